from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.config import get_settings
from jobtracker.core.database import get_db
from jobtracker.models.user import User
from jobtracker.services import auth_service

__all__ = ["get_current_user", "get_db", "get_session_token"]


def get_session_token(request: Request) -> str | None:
    settings = get_settings()
    return request.cookies.get(settings.session_cookie_name)


async def get_current_user(
    token: str | None = Depends(get_session_token),
    db: AsyncSession = Depends(get_db),
) -> User:
    return await auth_service.resolve_session(db, token)
