import uuid
from datetime import UTC, datetime
from enum import StrEnum

from pydantic import ConfigDict, EmailStr, Field, field_validator

from jobtracker.schemas import CamelModel, StatusResponse


class JobStatus(StrEnum):
    PENDING = "pending"
    INTERVIEW = "interview"
    DECLINED = "declined"


class JobType(StrEnum):
    FULL_TIME = "full-time"
    PART_TIME = "part-time"
    REMOTE = "remote"
    HYBRID = "hybrid"


class Priority(StrEnum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class SortOption(StrEnum):
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"
    PRIORITY_HIGH = "priority-high"
    PRIORITY_LOW = "priority-low"

    @classmethod
    def parse(cls, value: str | None) -> "SortOption":
        """Unknown or missing sort values fall back to newest first."""
        try:
            return cls(value)
        except ValueError:
            return cls.LATEST


class JobBase(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    position: str | None = Field(None, max_length=100)
    company: str | None = Field(None, max_length=50)
    job_location: str | None = Field(None, max_length=20)
    job_status: JobStatus = JobStatus.PENDING
    job_type: JobType = JobType.FULL_TIME
    recruiter: str | None = Field(None, max_length=30)
    recruiter_email: EmailStr | None = None
    salary_min: int = Field(0, ge=0)
    salary_max: int = Field(0, ge=0)
    interview_scheduled_at: datetime | None = None
    priority: Priority = Priority.MEDIUM

    @field_validator(
        "job_location", "recruiter", "recruiter_email", "interview_scheduled_at", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        # The job form submits "" for inputs the user never touched.
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("interview_scheduled_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value


class JobCreate(JobBase):
    @field_validator("interview_scheduled_at")
    @classmethod
    def _not_in_past(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        if value < datetime.now(UTC):
            raise ValueError("Interview date cannot be in the past")
        return value


class JobUpdate(JobBase):
    """Fields for PATCH; only the ones present in the request are applied."""


class JobRead(CamelModel):
    id: uuid.UUID
    position: str
    company: str
    job_location: str | None
    job_status: str
    job_type: str
    recruiter: str | None
    recruiter_email: str | None
    salary_min: int
    salary_max: int
    interview_scheduled_at: datetime | None
    priority: str
    priority_level: int
    owner_id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class JobListResponse(StatusResponse):
    jobs: list[JobRead]
    total_jobs: int
    num_of_pages: int


class JobCreatedResponse(StatusResponse):
    job: JobRead


class JobUpdatedResponse(StatusResponse):
    updated_job: JobRead
