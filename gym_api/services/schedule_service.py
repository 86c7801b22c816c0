from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from ..config import get_settings
from ..core.constants import STATUS_COMPLETED, STATUS_ONGOING, STATUS_UPCOMING
from ..db import models, schemas
from ..db.session import applicable_changes


class ScheduleError(Exception):
    pass


def _zone() -> ZoneInfo:
    return ZoneInfo(get_settings().timezone)


def local_now() -> datetime:
    """Current instant in the gym's wall-clock zone."""
    return datetime.now(_zone())


def starts_at(schedule: models.Schedule) -> datetime:
    return datetime.combine(schedule.date, schedule.start_time, tzinfo=_zone())


def ends_at(schedule: models.Schedule) -> datetime:
    return datetime.combine(schedule.date, schedule.end_time, tzinfo=_zone())


def get_status(schedule: models.Schedule, now: datetime | None = None) -> str:
    """Classify a class occurrence relative to ``now``.

    ``completed`` once the end has passed, ``ongoing`` between start and end
    (both inclusive), ``upcoming`` otherwise.
    """
    now = now or local_now()
    if now > ends_at(schedule):
        return STATUS_COMPLETED
    if starts_at(schedule) <= now <= ends_at(schedule):
        return STATUS_ONGOING
    return STATUS_UPCOMING


def is_offerable(schedule: models.Schedule, now: datetime | None = None) -> bool:
    return get_status(schedule, now) in (STATUS_UPCOMING, STATUS_ONGOING)


def format_duration(start_time: time, end_time: time) -> str:
    start_minutes = start_time.hour * 60 + start_time.minute
    end_minutes = end_time.hour * 60 + end_time.minute
    minutes = end_minutes - start_minutes
    if minutes < 60:
        return f"{minutes} min"
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m" if rest else f"{hours}h"


def format_capacity(enrolled_count: int, capacity: int | None) -> str:
    if capacity:
        return f"{enrolled_count}/{capacity}"
    return f"{enrolled_count}"


def annotate(schedule: models.Schedule, now: datetime | None = None) -> models.Schedule:
    setattr(schedule, "status", get_status(schedule, now))
    setattr(schedule, "duration", format_duration(schedule.start_time, schedule.end_time))
    setattr(schedule, "capacity_text", format_capacity(schedule.enrolled_count, schedule.capacity))
    return schedule


def list_schedules(
    db: Session,
    *,
    on_date: date | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    coach_id: str | None = None,
    member_id: str | None = None,
    status: str | None = None,
    now: datetime | None = None,
) -> list[models.Schedule]:
    stmt = select(models.Schedule).options(
        selectinload(models.Schedule.enrollments),
        selectinload(models.Schedule.coach),
    )
    if on_date:
        stmt = stmt.where(models.Schedule.date == on_date)
    if from_date:
        stmt = stmt.where(models.Schedule.date >= from_date)
    if to_date:
        stmt = stmt.where(models.Schedule.date <= to_date)
    if coach_id:
        stmt = stmt.where(models.Schedule.coach_id == coach_id)
    if member_id:
        stmt = stmt.where(
            models.Schedule.enrollments.any(models.ScheduleEnrollment.member_id == member_id)
        )
    stmt = stmt.order_by(models.Schedule.date, models.Schedule.start_time)
    now = now or local_now()
    schedules = [annotate(schedule, now) for schedule in db.execute(stmt).scalars().all()]
    if status:
        schedules = [schedule for schedule in schedules if schedule.status == status]
    return schedules


def count_upcoming(db: Session, now: datetime | None = None) -> int:
    return len(list_schedules(db, from_date=(now or local_now()).date(), status=STATUS_UPCOMING, now=now))


def _validate(db: Session, values: dict) -> None:
    if values["start_time"] >= values["end_time"]:
        raise ScheduleError("Start time must be before end time")
    coach_id = values.get("coach_id")
    if coach_id and db.get(models.Coach, coach_id) is None:
        raise ScheduleError("Coach not found")


def create_schedule(db: Session, payload: schemas.ScheduleCreate) -> models.Schedule:
    values = payload.model_dump()
    _validate(db, values)
    if not values.get("day"):
        values["day"] = values["date"].strftime("%A")
    schedule = models.Schedule(**values)
    db.add(schedule)
    db.commit()
    db.refresh(schedule)
    return annotate(schedule)


def update_schedule(
    db: Session, schedule: models.Schedule, payload: schemas.ScheduleUpdate
) -> models.Schedule:
    changes = applicable_changes(models.Schedule, payload.model_dump(exclude_unset=True))
    capacity = changes.get("capacity")
    if capacity is not None and capacity < schedule.enrolled_count:
        raise ScheduleError("Capacity cannot be below current enrollment")
    merged = {
        "start_time": changes.get("start_time") or schedule.start_time,
        "end_time": changes.get("end_time") or schedule.end_time,
        "coach_id": changes.get("coach_id"),
    }
    _validate(db, merged)
    for key, value in changes.items():
        setattr(schedule, key, value)
    if "date" in changes and "day" not in changes:
        schedule.day = schedule.date.strftime("%A")
    schedule.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(schedule)
    return annotate(schedule)
