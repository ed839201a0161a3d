"""Every state transition the client knows about, one frozen dataclass per kind."""

from dataclasses import dataclass
from enum import StrEnum

from jobtracker.schemas.job import JobRead
from jobtracker.schemas.stats import DefaultStats, MonthlyApplication
from jobtracker.schemas.user import UserRead


class Operation(StrEnum):
    REGISTER_USER = "register_user"
    LOGIN_USER = "login_user"
    UPDATE_USER = "update_user"
    GET_CURRENT_USER = "get_current_user"
    ADD_JOB = "add_job"
    EDIT_JOB = "edit_job"
    DELETE_JOB = "delete_job"
    GET_JOBS = "get_jobs"
    GET_STATS = "get_stats"


# Server round-trips


@dataclass(frozen=True)
class RequestBegin:
    operation: Operation


@dataclass(frozen=True)
class RequestFailed:
    operation: Operation
    message: str
    silent: bool = False


@dataclass(frozen=True)
class AuthSucceeded:
    operation: Operation
    user: UserRead
    user_location: str


@dataclass(frozen=True)
class JobSaved:
    operation: Operation


@dataclass(frozen=True)
class JobsLoaded:
    jobs: tuple[JobRead, ...]
    total_jobs: int
    num_of_pages: int


@dataclass(frozen=True)
class StatsLoaded:
    stats: DefaultStats
    monthly_applications: tuple[MonthlyApplication, ...]


@dataclass(frozen=True)
class Logout:
    pass


# Local UI state


@dataclass(frozen=True)
class DisplayAlert:
    alert_type: str
    text: str


@dataclass(frozen=True)
class ClearAlert:
    pass


@dataclass(frozen=True)
class ToggleSidebar:
    pass


@dataclass(frozen=True)
class ToggleProfileEditing:
    active: bool


@dataclass(frozen=True)
class SetFormValue:
    name: str
    value: object


@dataclass(frozen=True)
class SetFilter:
    name: str
    value: str


@dataclass(frozen=True)
class ClearValues:
    pass


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class SetEditJob:
    job_id: str


@dataclass(frozen=True)
class ChangePage:
    page: int


Action = (
    RequestBegin
    | RequestFailed
    | AuthSucceeded
    | JobSaved
    | JobsLoaded
    | StatsLoaded
    | Logout
    | DisplayAlert
    | ClearAlert
    | ToggleSidebar
    | ToggleProfileEditing
    | SetFormValue
    | SetFilter
    | ClearValues
    | ClearFilters
    | SetEditJob
    | ChangePage
)
