from pydantic import Field
from ...core.constants import MIN_PASSWORD_LENGTH
from .base import CamelModel


class User(CamelModel):
    id: str
    name: str
    email: str
    role: str


class LoginRequest(CamelModel):
    email: str
    password: str
    remember_me: bool = False


class RegisterRequest(CamelModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    password: str = Field(min_length=MIN_PASSWORD_LENGTH)


class TokenResponse(CamelModel):
    token: str
    token_type: str = "bearer"
    user: User


class VerifyResponse(CamelModel):
    valid: bool = True
    user: User
