import asyncio
import logging
from collections.abc import Callable

from jobtracker.client.actions import Action, ClearAlert
from jobtracker.client.reducer import reduce
from jobtracker.client.state import AppState

logger = logging.getLogger(__name__)

ALERT_DURATION = 3.0

Listener = Callable[[AppState, Action], None]


class Store:
    """Single owner of the client's AppState.

    State only changes through ``dispatch``. Whenever a dispatch produces a new
    alert, a ``ClearAlert`` is scheduled ``alert_duration`` seconds later on the
    running event loop; a newer alert cancels the pending one and starts over.
    Outside an event loop the alert is kept until a ``ClearAlert`` is dispatched.
    """

    def __init__(self, state: AppState | None = None, alert_duration: float = ALERT_DURATION) -> None:
        self._state = state or AppState()
        self.alert_duration = alert_duration
        self._listeners: list[Listener] = []
        self._alert_timer: asyncio.TimerHandle | None = None

    @property
    def state(self) -> AppState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        previous = self._state
        self._state = reduce(previous, action)
        logger.debug("Dispatched %s", type(action).__name__)

        for listener in list(self._listeners):
            listener(self._state, action)

        if self._state.alert is None:
            self._cancel_alert_timer()
        elif self._state.alert is not previous.alert:
            self._restart_alert_timer()
        return self._state

    def _cancel_alert_timer(self) -> None:
        if self._alert_timer is not None:
            self._alert_timer.cancel()
            self._alert_timer = None

    def _restart_alert_timer(self) -> None:
        self._cancel_alert_timer()
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            logger.debug("No running event loop; alert stays until cleared")
            return
        self._alert_timer = loop.call_later(self.alert_duration, self.dispatch, ClearAlert())

    def close(self) -> None:
        self._cancel_alert_timer()
