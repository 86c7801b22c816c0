from datetime import datetime
from typing import Any
from sqlalchemy import JSON, DateTime, Integer, Numeric, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..session import Base, new_id


class Coach(Base):
    __tablename__ = "coaches"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), default="")
    phone: Mapped[str] = mapped_column(String(32), default="")
    specialization: Mapped[str] = mapped_column(String(255), default="")
    experience: Mapped[int | None] = mapped_column(Integer)
    image: Mapped[str | None] = mapped_column(Text)
    bio: Mapped[str | None] = mapped_column(Text)
    certifications: Mapped[Any] = mapped_column(JSON)
    teaching_preferences: Mapped[Any] = mapped_column(JSON)
    status: Mapped[str] = mapped_column(String(32), default="active")
    salary: Mapped[float | None] = mapped_column(Numeric(12, 2, asdecimal=False))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    schedules = relationship("Schedule", back_populates="coach")
