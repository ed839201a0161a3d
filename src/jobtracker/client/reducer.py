"""Pure state transitions: ``reduce(state, action) -> state``."""

from dataclasses import fields, replace

from jobtracker.client.actions import (
    Action,
    AuthSucceeded,
    ChangePage,
    ClearAlert,
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
from jobtracker.client.state import Alert, AppState, JobFilters, JobForm

SUCCESS = "success"
DANGER = "danger"

# Only writes and sign-in announce success; reads (jobs, stats, current user) stay quiet.
SUCCESS_MESSAGES: dict[Operation, str] = {
    Operation.REGISTER_USER: "User created! Redirecting...",
    Operation.LOGIN_USER: "Login successful! Redirecting...",
    Operation.UPDATE_USER: "User profile updated!",
    Operation.ADD_JOB: "New job created!",
    Operation.EDIT_JOB: "Job updated!",
}

_FORM_FIELDS = frozenset(f.name for f in fields(JobForm))
_FILTER_FIELDS = frozenset(f.name for f in fields(JobFilters)) - {"page"}


def _success_alert(state: AppState, operation: Operation) -> Alert | None:
    message = SUCCESS_MESSAGES.get(operation)
    return Alert(SUCCESS, message) if message else state.alert


def _reduce_request(state: AppState, action: Action) -> AppState | None:
    if isinstance(action, RequestBegin):
        user_loading = state.user_loading or action.operation == Operation.GET_CURRENT_USER
        return replace(state, is_loading=True, user_loading=user_loading)

    if isinstance(action, RequestFailed):
        user_loading = state.user_loading and action.operation != Operation.GET_CURRENT_USER
        alert = state.alert if action.silent else Alert(DANGER, action.message)
        return replace(state, is_loading=False, user_loading=user_loading, alert=alert)

    if isinstance(action, AuthSucceeded):
        form = state.form
        if not form.job_location:
            form = replace(form, job_location=action.user_location)
        is_profile_inputs_active = (
            False if action.operation == Operation.UPDATE_USER else state.is_profile_inputs_active
        )
        return replace(
            state,
            is_loading=False,
            user_loading=False,
            user=action.user,
            user_location=action.user_location,
            form=form,
            is_profile_inputs_active=is_profile_inputs_active,
            alert=_success_alert(state, action.operation),
        )

    if isinstance(action, JobSaved):
        return replace(state, is_loading=False, alert=_success_alert(state, action.operation))

    if isinstance(action, JobsLoaded):
        return replace(
            state,
            is_loading=False,
            jobs=action.jobs,
            total_jobs=action.total_jobs,
            num_of_pages=action.num_of_pages,
        )

    if isinstance(action, StatsLoaded):
        return replace(
            state,
            is_loading=False,
            stats=action.stats,
            monthly_applications=action.monthly_applications,
        )

    if isinstance(action, Logout):
        # Everything fetched on behalf of the user goes; a pending alert stays visible.
        return AppState(user_loading=False, alert=state.alert, show_sidebar=state.show_sidebar)

    return None


def _reduce_local(state: AppState, action: Action) -> AppState | None:
    if isinstance(action, DisplayAlert):
        return replace(state, alert=Alert(action.alert_type, action.text))

    if isinstance(action, ClearAlert):
        return replace(state, alert=None)

    if isinstance(action, ToggleSidebar):
        return replace(state, show_sidebar=not state.show_sidebar)

    if isinstance(action, ToggleProfileEditing):
        return replace(state, is_profile_inputs_active=action.active)

    if isinstance(action, SetFormValue):
        if action.name not in _FORM_FIELDS:
            raise ValueError(f"Unknown job form field: {action.name}")
        return replace(state, form=replace(state.form, **{action.name: action.value}))

    if isinstance(action, SetFilter):
        if action.name not in _FILTER_FIELDS:
            raise ValueError(f"Unknown job filter: {action.name}")
        filters = replace(state.filters, **{action.name: action.value}, page=1)
        return replace(state, filters=filters)

    if isinstance(action, ChangePage):
        return replace(state, filters=replace(state.filters, page=action.page))

    if isinstance(action, ClearFilters):
        return replace(state, filters=JobFilters())

    if isinstance(action, ClearValues):
        return replace(
            state,
            form=JobForm(job_location=state.user_location),
            is_editing=False,
            edit_job_id="",
        )

    if isinstance(action, SetEditJob):
        job = next((j for j in state.jobs if str(j.id) == action.job_id), None)
        if job is None:
            return state
        return replace(
            state,
            form=JobForm.from_job(job),
            is_editing=True,
            edit_job_id=action.job_id,
        )

    return None


def reduce(state: AppState, action: Action) -> AppState:
    new_state = _reduce_request(state, action)
    if new_state is None:
        new_state = _reduce_local(state, action)
    if new_state is None:
        raise TypeError(f"Unknown action: {action!r}")
    return new_state
