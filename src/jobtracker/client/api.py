"""HTTP side of the client: every server call funnels through ``JobTrackerClient``.

Each operation dispatches ``RequestBegin`` and then exactly one of a success
action or ``RequestFailed``. A single response hook watches every reply for a
401 and logs the user out locally, since the server has already dropped the
session.
"""

import logging
from types import TracebackType

import httpx

from jobtracker.client.actions import (
    AuthSucceeded,
    ChangePage,
    ClearFilters,
    ClearValues,
    DisplayAlert,
    JobSaved,
    JobsLoaded,
    Logout,
    Operation,
    RequestBegin,
    RequestFailed,
    SetEditJob,
    SetFilter,
    SetFormValue,
    StatsLoaded,
    ToggleProfileEditing,
    ToggleSidebar,
)
from jobtracker.client.store import Store
from jobtracker.schemas.job import JobListResponse
from jobtracker.schemas.stats import StatsResponse
from jobtracker.schemas.user import AuthResponse

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000/api/v1"
LOGOUT_PATH = "/auth/logout"


class ApiError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        detail = response.json().get("detail")
    except ValueError:
        detail = None
    if isinstance(detail, str) and detail:
        return detail
    return response.text or response.reason_phrase


class JobTrackerClient:
    def __init__(
        self,
        store: Store | None = None,
        base_url: str = DEFAULT_BASE_URL,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float = 10.0,
    ) -> None:
        self.store = store or Store()
        self.http = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout,
            event_hooks={"response": [self._intercept_unauthorized]},
        )

    async def __aenter__(self) -> "JobTrackerClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        self.store.close()
        await self.http.aclose()

    async def _intercept_unauthorized(self, response: httpx.Response) -> None:
        if response.status_code != httpx.codes.UNAUTHORIZED:
            return
        if response.request.url.path.endswith(LOGOUT_PATH):
            return
        if self.store.state.user is not None:
            logger.info("Session rejected by %s; logging out", response.request.url.path)
        self.http.cookies.clear()
        self.store.dispatch(Logout())

    async def _request(self, method: str, url: str, **kwargs) -> dict:
        response = await self.http.request(method, url, **kwargs)
        if response.is_error:
            raise ApiError(response.status_code, _error_message(response))
        return response.json()

    async def _call(
        self, operation: Operation, method: str, url: str, *, silent: bool = False, **kwargs
    ) -> dict | None:
        """Run one request through the begin/success/failure cycle.

        Returns the decoded body, or None after dispatching ``RequestFailed``.
        With ``silent`` a 401 produces no alert.
        """
        self.store.dispatch(RequestBegin(operation))
        try:
            return await self._request(method, url, **kwargs)
        except ApiError as e:
            quiet = silent and e.status_code == httpx.codes.UNAUTHORIZED
            self.store.dispatch(RequestFailed(operation, e.message, silent=quiet))
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, url, e)
            self.store.dispatch(RequestFailed(operation, f"Could not reach the server: {e}"))
        return None

    # Authentication

    async def _authenticate(self, operation: Operation, method: str, url: str, **kwargs) -> None:
        data = await self._call(operation, method, url, **kwargs)
        if data is None:
            return
        auth = AuthResponse.model_validate(data)
        self.store.dispatch(AuthSucceeded(operation, auth.user, auth.user_location))

    async def register_user(
        self,
        name: str,
        email: str,
        password: str,
        last_name: str | None = None,
        location: str | None = None,
    ) -> None:
        payload = {"name": name, "email": email, "password": password}
        if last_name:
            payload["lastName"] = last_name
        if location:
            payload["location"] = location
        await self._authenticate(Operation.REGISTER_USER, "POST", "/auth/register", json=payload)

    async def login_user(self, email: str, password: str) -> None:
        payload = {"email": email, "password": password}
        await self._authenticate(Operation.LOGIN_USER, "POST", "/auth/login", json=payload)

    async def update_user(self, name: str, last_name: str, email: str, location: str) -> None:
        payload = {"name": name, "lastName": last_name, "email": email, "location": location}
        await self._authenticate(Operation.UPDATE_USER, "PATCH", "/auth/updateUser", json=payload)

    async def get_current_user(self) -> None:
        """Background refresh on start-up; an expired session is not an error."""
        await self._authenticate(
            Operation.GET_CURRENT_USER, "GET", "/auth/getCurrentUser", silent=True
        )

    async def logout_user(self) -> None:
        try:
            await self._request("GET", LOGOUT_PATH)
        except (ApiError, httpx.TransportError) as e:
            logger.warning("Server-side logout failed: %s", e)
        self.http.cookies.clear()
        self.store.dispatch(Logout())

    # Jobs

    async def add_job(self) -> None:
        payload = self.store.state.form.to_payload()
        if await self._call(Operation.ADD_JOB, "POST", "/jobs", json=payload) is not None:
            self.store.dispatch(JobSaved(Operation.ADD_JOB))

    async def edit_job(self) -> None:
        state = self.store.state
        url = f"/jobs/{state.edit_job_id}"
        if await self._call(Operation.EDIT_JOB, "PATCH", url, json=state.form.to_payload()) is None:
            return
        self.store.dispatch(JobSaved(Operation.EDIT_JOB))
        self.store.dispatch(ClearValues())

    async def get_all_jobs(self) -> None:
        params = self.store.state.filters.to_params()
        data = await self._call(Operation.GET_JOBS, "GET", "/jobs", params=params)
        if data is None:
            return
        page = JobListResponse.model_validate(data)
        self.store.dispatch(JobsLoaded(tuple(page.jobs), page.total_jobs, page.num_of_pages))

    async def delete_job(self, job_id: str) -> None:
        if await self._call(Operation.DELETE_JOB, "DELETE", f"/jobs/{job_id}") is not None:
            await self.get_all_jobs()

    async def get_stats(self) -> None:
        data = await self._call(Operation.GET_STATS, "GET", "/jobs/stats")
        if data is None:
            return
        stats = StatsResponse.model_validate(data)
        self.store.dispatch(StatsLoaded(stats.default_stats, tuple(stats.monthly_applications)))

    # Local UI state

    def display_alert(self, alert_type: str, text: str) -> None:
        self.store.dispatch(DisplayAlert(alert_type, text))

    def toggle_sidebar(self) -> None:
        self.store.dispatch(ToggleSidebar())

    def show_profile_editing_inputs(self) -> None:
        self.store.dispatch(ToggleProfileEditing(active=True))

    def save_profile_changes(self) -> None:
        self.store.dispatch(ToggleProfileEditing(active=False))

    def handle_change(self, name: str, value: object) -> None:
        self.store.dispatch(SetFormValue(name, value))

    def set_filter(self, name: str, value: str) -> None:
        self.store.dispatch(SetFilter(name, value))

    def clear_values(self) -> None:
        self.store.dispatch(ClearValues())

    def clear_filters(self) -> None:
        self.store.dispatch(ClearFilters())

    def set_edit_job(self, job_id: str) -> None:
        self.store.dispatch(SetEditJob(job_id))

    def change_page(self, page: int) -> None:
        self.store.dispatch(ChangePage(page))
