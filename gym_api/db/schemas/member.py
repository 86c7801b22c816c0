from datetime import datetime
from pydantic import Field
from .base import CamelModel


class MemberBase(CamelModel):
    name: str = Field(min_length=1)
    email: str = ""
    phone: str = ""
    membership_type: str = ""
    status: str = "active"
    address: str | None = None
    emergency_contact: str | None = None
    expiration_date: datetime | None = None
    coach_id: str | None = None
    coach_name: str | None = None


class MemberCreate(MemberBase):
    join_date: datetime | None = None
    password: str | None = None


class MemberUpdate(CamelModel):
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    membership_type: str | None = None
    status: str | None = None
    address: str | None = None
    emergency_contact: str | None = None
    expiration_date: datetime | None = None
    coach_id: str | None = None
    coach_name: str | None = None


class Member(MemberBase):
    id: str
    join_date: datetime | None = None
    is_trial: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
