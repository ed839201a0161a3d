from dataclasses import asdict, dataclass, field
from datetime import datetime

from pydantic.alias_generators import to_camel

from jobtracker.schemas.job import JobRead, JobStatus, JobType, Priority, SortOption
from jobtracker.schemas.stats import DefaultStats, MonthlyApplication
from jobtracker.schemas.user import UserRead

ALL = "all"

JOB_TYPE_OPTIONS = tuple(t.value for t in JobType)
STATUS_OPTIONS = tuple(s.value for s in JobStatus)
PRIORITY_OPTIONS = tuple(p.value for p in Priority)
SORT_OPTIONS = tuple(s.value for s in SortOption)


@dataclass(frozen=True)
class Alert:
    alert_type: str
    text: str


@dataclass(frozen=True)
class JobForm:
    """Values currently typed into the add/edit job form."""

    company: str = ""
    position: str = ""
    job_location: str = ""
    recruiter: str = ""
    recruiter_email: str = ""
    salary_min: int = 0
    salary_max: int = 0
    interview_scheduled_at: datetime | None = None
    job_type: str = JobType.FULL_TIME.value
    job_status: str = JobStatus.PENDING.value
    priority: str = Priority.MEDIUM.value

    @classmethod
    def from_job(cls, job: JobRead) -> "JobForm":
        return cls(
            company=job.company,
            position=job.position,
            job_location=job.job_location or "",
            recruiter=job.recruiter or "",
            recruiter_email=job.recruiter_email or "",
            salary_min=job.salary_min,
            salary_max=job.salary_max,
            interview_scheduled_at=job.interview_scheduled_at,
            job_type=job.job_type,
            job_status=job.job_status,
            priority=job.priority,
        )

    def to_payload(self) -> dict[str, object]:
        payload = {to_camel(name): value for name, value in asdict(self).items()}
        if self.interview_scheduled_at is not None:
            payload["interviewScheduledAt"] = self.interview_scheduled_at.isoformat()
        return payload


@dataclass(frozen=True)
class JobFilters:
    search: str = ""
    search_job_status: str = ALL
    search_job_type: str = ALL
    sort: str = SortOption.LATEST.value
    page: int = 1

    def to_params(self) -> dict[str, str | int]:
        params: dict[str, str | int] = {
            "page": self.page,
            "jobType": self.search_job_type,
            "jobStatus": self.search_job_status,
            "sort": self.sort,
        }
        if self.search:
            params["search"] = self.search
        return params


@dataclass(frozen=True)
class AppState:
    show_sidebar: bool = False
    is_profile_inputs_active: bool = False
    is_editing: bool = False
    is_loading: bool = False
    alert: Alert | None = None
    user: UserRead | None = None
    user_loading: bool = True
    user_location: str = ""
    edit_job_id: str = ""
    form: JobForm = field(default_factory=JobForm)
    filters: JobFilters = field(default_factory=JobFilters)
    jobs: tuple[JobRead, ...] = ()
    total_jobs: int = 0
    num_of_pages: int = 1
    stats: DefaultStats = field(default_factory=DefaultStats)
    monthly_applications: tuple[MonthlyApplication, ...] = ()

    @property
    def show_alert(self) -> bool:
        return self.alert is not None
