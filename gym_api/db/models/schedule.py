import datetime as dt
from sqlalchemy import (
    CheckConstraint,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..session import Base, new_id


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        CheckConstraint("capacity IS NULL OR capacity > 0", name="ck_schedule_capacity_positive"),
    )

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    class_name: Mapped[str] = mapped_column(String(255), nullable=False)
    coach_id: Mapped[str | None] = mapped_column(ForeignKey("coaches.id", ondelete="SET NULL"))
    day: Mapped[str | None] = mapped_column(String(16))
    date: Mapped[dt.date] = mapped_column(Date, index=True)
    start_time: Mapped[dt.time] = mapped_column(Time)
    end_time: Mapped[dt.time] = mapped_column(Time)
    capacity: Mapped[int | None] = mapped_column(Integer)
    description: Mapped[str | None] = mapped_column(Text)
    created_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[dt.datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    coach = relationship("Coach", back_populates="schedules")
    enrollments = relationship(
        "ScheduleEnrollment",
        back_populates="schedule",
        cascade="all, delete-orphan",
        order_by="ScheduleEnrollment.enrolled_at",
    )

    @property
    def enrolled_members(self) -> list[str]:
        return [enrollment.member_id for enrollment in self.enrollments]

    @property
    def enrolled_count(self) -> int:
        return len(self.enrollments)

    @property
    def coach_name(self) -> str | None:
        return self.coach.name if self.coach else None


class ScheduleEnrollment(Base):
    __tablename__ = "schedule_enrollments"
    __table_args__ = (
        UniqueConstraint("schedule_id", "member_id", name="uq_enrollment_schedule_member"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    schedule_id: Mapped[str] = mapped_column(ForeignKey("schedules.id", ondelete="CASCADE"))
    member_id: Mapped[str] = mapped_column(String(64), index=True)
    enrolled_at: Mapped[dt.datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    schedule = relationship("Schedule", back_populates="enrollments")
