import uuid

from pydantic import ConfigDict, EmailStr, Field

from jobtracker.schemas import CamelModel


class UserCreate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=3, max_length=20)
    last_name: str | None = Field(None, max_length=20)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)
    location: str | None = Field(None, max_length=20)


class UserLogin(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserUpdate(CamelModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=3, max_length=20)
    last_name: str = Field(..., min_length=1, max_length=20)
    email: EmailStr
    location: str = Field(..., min_length=1, max_length=20)


class UserRead(CamelModel):
    id: uuid.UUID
    name: str
    last_name: str
    email: str
    location: str


class AuthResponse(CamelModel):
    user: UserRead
    user_location: str
