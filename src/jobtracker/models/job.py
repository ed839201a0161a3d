import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from jobtracker.models.user import User


class Job(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "jobs"

    position: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    company: Mapped[str] = mapped_column(String(50), nullable=False)
    job_location: Mapped[str | None] = mapped_column(String(20), nullable=True)
    job_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending", server_default="pending", index=True
    )
    job_type: Mapped[str] = mapped_column(
        String(20), nullable=False, default="full-time", server_default="full-time", index=True
    )
    recruiter: Mapped[str | None] = mapped_column(String(30), nullable=True)
    recruiter_email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    salary_min: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    salary_max: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    interview_scheduled_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    priority: Mapped[str] = mapped_column(
        String(10), nullable=False, default="Medium", server_default="Medium"
    )
    priority_level: Mapped[int] = mapped_column(
        Integer, nullable=False, default=2, server_default="2", index=True
    )
    owner_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    owner: Mapped["User"] = relationship(back_populates="jobs")

    def __repr__(self) -> str:
        return f"<Job {self.position} at {self.company} ({self.job_status})>"
