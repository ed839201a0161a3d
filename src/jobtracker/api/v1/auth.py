from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.api.deps import get_current_user, get_db, get_session_token
from jobtracker.core.config import get_settings
from jobtracker.models.user import User, UserSession
from jobtracker.schemas import MessageResponse
from jobtracker.schemas.user import AuthResponse, UserCreate, UserLogin, UserRead, UserUpdate
from jobtracker.services import auth_service

router = APIRouter(prefix="/auth", tags=["auth"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(user=UserRead.model_validate(user), user_location=user.location)


def _attach_cookie(response: Response, session: UserSession) -> None:
    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=session.token,
        max_age=settings.session_ttl_hours * 3600,
        httponly=True,
        secure=settings.cookie_secure,
        samesite="lax",
    )


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: UserCreate,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    user = await auth_service.register_user(db, data)
    _attach_cookie(response, await auth_service.create_session(db, user))
    return _auth_response(user)


@router.post("/login", response_model=AuthResponse)
async def login(
    data: UserLogin,
    response: Response,
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    user = await auth_service.authenticate(db, data)
    _attach_cookie(response, await auth_service.create_session(db, user))
    return _auth_response(user)


@router.get("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await auth_service.end_session(db, token)
    response.delete_cookie(get_settings().session_cookie_name)
    return MessageResponse(message="User logged out!")


@router.patch("/updateUser", response_model=AuthResponse)
async def update_user(
    data: UserUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> AuthResponse:
    updated = await auth_service.update_user(db, user, data)
    return _auth_response(updated)


@router.get("/getCurrentUser", response_model=AuthResponse)
async def get_current_user_route(
    user: User = Depends(get_current_user),
) -> AuthResponse:
    return _auth_response(user)
