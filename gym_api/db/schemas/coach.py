from datetime import datetime
from typing import Any
from pydantic import Field
from .base import CamelModel


class CoachBase(CamelModel):
    name: str = Field(min_length=1)
    email: str = ""
    phone: str = ""
    specialization: str = ""
    experience: int | None = None
    image: str | None = None
    bio: str | None = None
    certifications: Any = None
    teaching_preferences: Any = None
    status: str = "active"
    salary: float | None = None


class CoachCreate(CoachBase):
    password: str | None = None


class CoachUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    specialization: str | None = None
    experience: int | None = None
    image: str | None = None
    bio: str | None = None
    certifications: Any = None
    teaching_preferences: Any = None
    status: str | None = None
    salary: float | None = None
    password: str | None = None


class Coach(CoachBase):
    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
