import datetime as dt
from pydantic import Field, field_serializer
from .base import CamelModel


class ScheduleBase(CamelModel):
    class_name: str = Field(min_length=1)
    coach_id: str | None = None
    day: str | None = None
    date: dt.date
    start_time: dt.time
    end_time: dt.time
    capacity: int | None = Field(default=None, gt=0)
    description: str | None = None


class ScheduleCreate(ScheduleBase):
    pass


class ScheduleUpdate(CamelModel):
    class_name: str | None = None
    coach_id: str | None = None
    day: str | None = None
    date: dt.date | None = None
    start_time: dt.time | None = None
    end_time: dt.time | None = None
    capacity: int | None = Field(default=None, gt=0)
    description: str | None = None


class Schedule(ScheduleBase):
    id: str
    coach_name: str | None = None
    enrolled_members: list[str] = []
    enrolled_count: int = 0
    status: str | None = None
    duration: str | None = None
    capacity_text: str | None = None
    created_at: dt.datetime | None = None
    updated_at: dt.datetime | None = None

    @field_serializer("start_time", "end_time")
    def _format_clock(self, value: dt.time) -> str:
        return value.strftime("%H:%M")


class EnrollRequest(CamelModel):
    user_id: str = Field(min_length=1)


class EnrollmentResult(CamelModel):
    message: str
    enrolled_count: int
    capacity: int | None = None
