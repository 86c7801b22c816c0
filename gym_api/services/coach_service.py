import logging
from datetime import datetime, timezone

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..db import models, schemas
from ..db.session import applicable_changes
from . import accounts

logger = logging.getLogger(__name__)


def list_coaches(db: Session, *, q: str | None = None, status: str | None = None) -> list[models.Coach]:
    query = db.query(models.Coach)
    if q:
        pattern = f"%{q.strip()}%"
        query = query.filter(
            or_(
                models.Coach.name.ilike(pattern),
                models.Coach.email.ilike(pattern),
                models.Coach.specialization.ilike(pattern),
            )
        )
    if status:
        query = query.filter(models.Coach.status == status)
    return query.order_by(models.Coach.name.asc()).all()


def create_coach(db: Session, payload: schemas.CoachCreate) -> models.Coach:
    # the password only ever lands on the login account
    coach = models.Coach(**payload.model_dump(exclude={"password"}))
    db.add(coach)
    db.commit()
    db.refresh(coach)
    if payload.password:
        try:
            accounts.create_user_account(
                db,
                name=coach.name,
                email=coach.email,
                password=payload.password,
                role=models.UserRole.coach,
            )
        except accounts.AccountError as exc:
            db.rollback()
            logger.warning("Failed to create user account for coach %s: %s", coach.id, exc)
    return coach


def update_coach(db: Session, coach: models.Coach, payload: schemas.CoachUpdate) -> models.Coach:
    changes = applicable_changes(
        models.Coach, payload.model_dump(exclude_unset=True, exclude={"password"})
    )
    for key, value in changes.items():
        setattr(coach, key, value)
    coach.updated_at = datetime.now(timezone.utc)
    db.commit()
    db.refresh(coach)
    if payload.password and coach.email:
        accounts.reset_password(db, coach.email, payload.password)
    return coach


def delete_all(db: Session) -> int:
    deleted = db.query(models.Coach).delete(synchronize_session=False)
    db.commit()
    logger.info("Deleted %d coaches", deleted)
    return deleted
