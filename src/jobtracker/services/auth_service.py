"""Accounts, password hashing and cookie sessions."""

import hashlib
import hmac
import logging
import secrets
import uuid
from datetime import UTC, datetime, timedelta

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.config import get_settings
from jobtracker.core.exceptions import AuthenticationError, BadRequestError
from jobtracker.models.user import User, UserSession
from jobtracker.schemas.user import UserCreate, UserLogin, UserUpdate

logger = logging.getLogger(__name__)

_HASH_ALGORITHM = "pbkdf2_sha256"


def hash_password(password: str, iterations: int | None = None) -> str:
    """Return ``algorithm$iterations$salt$digest`` for storage."""
    iterations = iterations or get_settings().password_hash_iterations
    salt = secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), iterations)
    return f"{_HASH_ALGORITHM}${iterations}${salt}${digest.hex()}"


def verify_password(password: str, stored: str) -> bool:
    try:
        algorithm, iterations, salt, expected = stored.split("$")
    except ValueError:
        return False
    if algorithm != _HASH_ALGORITHM:
        return False
    digest = hashlib.pbkdf2_hmac("sha256", password.encode(), salt.encode(), int(iterations))
    return hmac.compare_digest(digest.hex(), expected)


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    return value if value.tzinfo else value.replace(tzinfo=UTC)


async def get_user_by_email(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: UserCreate) -> User:
    if await get_user_by_email(db, data.email):
        raise BadRequestError("Email already in use")
    user = User(
        name=data.name,
        email=data.email.lower(),
        password_hash=hash_password(data.password),
    )
    if data.last_name:
        user.last_name = data.last_name
    if data.location:
        user.location = data.location
    db.add(user)
    try:
        await db.flush()
    except IntegrityError as e:
        raise BadRequestError("Email already in use") from e
    await db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


async def authenticate(db: AsyncSession, data: UserLogin) -> User:
    user = await get_user_by_email(db, data.email)
    if not user or not verify_password(data.password, user.password_hash):
        logger.info("Failed login for %s", data.email)
        raise AuthenticationError("Invalid credentials")
    return user


async def update_user(db: AsyncSession, user: User, data: UserUpdate) -> User:
    email = data.email.lower()
    if email != user.email and await get_user_by_email(db, email):
        raise BadRequestError("Email already in use")
    user.name = data.name
    user.last_name = data.last_name
    user.email = email
    user.location = data.location
    await db.flush()
    await db.refresh(user)
    return user


async def create_session(db: AsyncSession, user: User) -> UserSession:
    settings = get_settings()
    session = UserSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        expires_at=datetime.now(UTC) + timedelta(hours=settings.session_ttl_hours),
    )
    db.add(session)
    await db.flush()
    return session


async def resolve_session(db: AsyncSession, token: str | None) -> User:
    """Return the user behind a session token or raise 401."""
    if not token:
        raise AuthenticationError()
    result = await db.execute(select(UserSession).where(UserSession.token == token))
    session = result.scalar_one_or_none()
    if not session or _as_utc(session.expires_at) <= datetime.now(UTC):
        raise AuthenticationError()
    return session.user


async def end_session(db: AsyncSession, token: str | None) -> None:
    if not token:
        return
    await db.execute(delete(UserSession).where(UserSession.token == token))
    await db.flush()
