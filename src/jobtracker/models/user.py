import uuid
from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jobtracker.models.base import Base, TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:
    from jobtracker.models.job import Job


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(20), nullable=False)
    last_name: Mapped[str] = mapped_column(
        String(20), nullable=False, default="lastName", server_default="lastName"
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    location: Mapped[str] = mapped_column(
        String(20), nullable=False, default="my city", server_default="my city"
    )
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    jobs: Mapped[list["Job"]] = relationship(
        back_populates="owner",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    sessions: Mapped[list["UserSession"]] = relationship(
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<User {self.name} {self.last_name} ({self.email})>"


class UserSession(Base):
    __tablename__ = "user_sessions"

    token: Mapped[str] = mapped_column(String(128), primary_key=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    expires_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    user: Mapped["User"] = relationship(back_populates="sessions", lazy="joined")

    def __repr__(self) -> str:
        return f"<UserSession user={self.user_id} expires={self.expires_at}>"
