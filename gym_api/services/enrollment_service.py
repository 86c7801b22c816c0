"""Class enrollment: capacity, duplicate, past-class and time-conflict rules.

Every check runs against a schedule row locked for the duration of the
transaction, so two members racing for the last seat are serialised and the
second one sees the class as full. A rejected request rolls the session back
and leaves the enrollment set untouched.
"""
import logging
from dataclasses import dataclass
from datetime import datetime, time, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..db import models
from . import schedule_service

logger = logging.getLogger(__name__)


class EnrollmentError(Exception):
    status_code = 400
    default_message = "Enrollment failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ScheduleNotFoundError(EnrollmentError):
    status_code = 404
    default_message = "Schedule not found"


class AlreadyEnrolledError(EnrollmentError):
    default_message = "Already enrolled in this class"


class ClassFullError(EnrollmentError):
    default_message = "Class is full"


class PastClassError(EnrollmentError):
    default_message = "Cannot enroll in past classes"


class NotEnrolledError(EnrollmentError):
    default_message = "Not enrolled in this class"


class TimeConflictError(EnrollmentError):
    def __init__(self, conflicting: models.Schedule) -> None:
        self.conflicting_schedule_id = conflicting.id
        super().__init__(
            f"Time conflict: You are already enrolled in '{conflicting.class_name}' "
            f"from {_clock(conflicting.start_time)} to {_clock(conflicting.end_time)}"
        )


@dataclass
class EnrollmentOutcome:
    schedule: models.Schedule
    enrolled_count: int
    capacity: int | None


def _clock(value: time) -> str:
    return value.strftime("%H:%M")


def intervals_overlap(new_start: time, new_end: time, existing_start: time, existing_end: time) -> bool:
    # half-open intervals: touching endpoints are not a conflict
    return new_start < existing_end and new_end > existing_start


def _lock_schedule(db: Session, schedule_id: str) -> models.Schedule:
    schedule = db.get(
        models.Schedule,
        schedule_id,
        with_for_update=True,
        populate_existing=True,
    )
    if schedule is None:
        raise ScheduleNotFoundError()
    return schedule


def find_time_conflict(
    db: Session, schedule: models.Schedule, member_id: str
) -> models.Schedule | None:
    """Return the first same-day class the member attends that overlaps ``schedule``."""
    same_day = (
        db.execute(
            select(models.Schedule)
            .join(models.ScheduleEnrollment)
            .where(
                models.ScheduleEnrollment.member_id == member_id,
                models.Schedule.date == schedule.date,
                models.Schedule.id != schedule.id,
            )
            .order_by(models.Schedule.start_time, models.Schedule.id)
        )
        .scalars()
        .all()
    )
    for other in same_day:
        if intervals_overlap(schedule.start_time, schedule.end_time, other.start_time, other.end_time):
            return other
    return None


def enroll(
    db: Session,
    schedule_id: str,
    member_id: str,
    now: datetime | None = None,
) -> EnrollmentOutcome:
    now = now or schedule_service.local_now()
    try:
        schedule = _lock_schedule(db, schedule_id)
        if member_id in schedule.enrolled_members:
            raise AlreadyEnrolledError()
        if schedule.capacity is not None and schedule.enrolled_count >= schedule.capacity:
            raise ClassFullError()
        # gate on the class start, so a class already in progress is rejected too
        if schedule_service.starts_at(schedule) < now:
            raise PastClassError()
        conflicting = find_time_conflict(db, schedule, member_id)
        if conflicting is not None:
            raise TimeConflictError(conflicting)
        schedule.enrollments.append(models.ScheduleEnrollment(member_id=member_id))
        schedule.updated_at = datetime.now(timezone.utc)
        db.commit()
    except EnrollmentError as exc:
        db.rollback()
        logger.info("Enrollment of member %s in schedule %s rejected: %s", member_id, schedule_id, exc)
        raise
    except IntegrityError as exc:
        db.rollback()
        raise AlreadyEnrolledError() from exc
    logger.info("Enrolled member %s in schedule %s", member_id, schedule_id)
    return EnrollmentOutcome(
        schedule=schedule,
        enrolled_count=schedule.enrolled_count,
        capacity=schedule.capacity,
    )


def unenroll(db: Session, schedule_id: str, member_id: str) -> EnrollmentOutcome:
    try:
        schedule = _lock_schedule(db, schedule_id)
        enrollment = next(
            (item for item in schedule.enrollments if item.member_id == member_id),
            None,
        )
        if enrollment is None:
            raise NotEnrolledError()
        schedule.enrollments.remove(enrollment)
        schedule.updated_at = datetime.now(timezone.utc)
        db.commit()
    except EnrollmentError as exc:
        db.rollback()
        logger.info("Unenrollment of member %s from schedule %s rejected: %s", member_id, schedule_id, exc)
        raise
    logger.info("Unenrolled member %s from schedule %s", member_id, schedule_id)
    return EnrollmentOutcome(
        schedule=schedule,
        enrolled_count=schedule.enrolled_count,
        capacity=schedule.capacity,
    )
