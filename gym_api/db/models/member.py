from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import Boolean, DateTime, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column
from ..session import Base, new_id


class MemberStatus(str, PyEnum):
    active = "active"
    inactive = "inactive"
    expired = "expired"


class Member(Base):
    __tablename__ = "members"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="", index=True)
    phone: Mapped[str] = mapped_column(String(32), default="")
    membership_type: Mapped[str] = mapped_column(String(64), default="")
    join_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    status: Mapped[str] = mapped_column(String(32), default=MemberStatus.active.value)
    address: Mapped[str | None] = mapped_column(Text)
    emergency_contact: Mapped[str | None] = mapped_column(String(255))
    expiration_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), index=True)
    is_trial: Mapped[bool] = mapped_column(Boolean, default=False)
    coach_id: Mapped[str | None] = mapped_column(String(32))
    coach_name: Mapped[str | None] = mapped_column(String(255))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )
