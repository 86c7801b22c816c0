import logging
from datetime import datetime, timezone

from sqlalchemy import or_
from sqlalchemy.orm import Session

from ..config import get_settings
from ..core.constants import MEMBERSHIP_DURATIONS, TRIAL_EMAIL_DOMAIN, TRIAL_MEMBERSHIP
from ..db import models, schemas
from ..db.session import applicable_changes
from . import accounts

logger = logging.getLogger(__name__)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _aware(value: datetime | None) -> datetime | None:
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_expired(member: models.Member, now: datetime | None = None) -> bool:
    expiration = _aware(member.expiration_date)
    return expiration is not None and expiration <= (now or _now())


def display_status(member: models.Member, now: datetime | None = None) -> str:
    if is_expired(member, now):
        return models.MemberStatus.expired.value
    return member.status or models.MemberStatus.active.value


def apply_membership_terms(member: models.Member, now: datetime | None = None) -> None:
    """Set expiration, trial flag and status from the membership type."""
    now = now or _now()
    membership = (member.membership_type or "").strip().lower()
    duration = MEMBERSHIP_DURATIONS.get(membership)
    if duration is not None:
        member.expiration_date = now + duration
        member.is_trial = membership == TRIAL_MEMBERSHIP
        member.status = models.MemberStatus.active.value
    if is_expired(member, now):
        member.status = models.MemberStatus.expired.value


def to_schema(member: models.Member, now: datetime | None = None) -> schemas.Member:
    return schemas.Member.model_validate(member).model_copy(
        update={"status": display_status(member, now)}
    )


def list_members(
    db: Session,
    *,
    q: str | None = None,
    status: str | None = None,
    membership_type: str | None = None,
) -> list[models.Member]:
    query = db.query(models.Member)
    if q:
        pattern = f"%{q.strip()}%"
        query = query.filter(
            or_(
                models.Member.name.ilike(pattern),
                models.Member.email.ilike(pattern),
                models.Member.phone.ilike(pattern),
            )
        )
    if membership_type:
        query = query.filter(models.Member.membership_type.ilike(membership_type))
    members = query.order_by(models.Member.name.asc()).all()
    if status:
        members = [member for member in members if display_status(member) == status]
    return members


def _wants_login(member: models.Member) -> bool:
    email = accounts.normalize_email(member.email)
    return bool(email) and not member.is_trial and not email.endswith(TRIAL_EMAIL_DOMAIN)


def create_member(db: Session, payload: schemas.MemberCreate) -> models.Member:
    values = payload.model_dump(exclude={"password"}, exclude_none=True)
    member = models.Member(**values)
    apply_membership_terms(member)
    db.add(member)
    db.commit()
    db.refresh(member)

    if _wants_login(member) and accounts.find_user_by_email(db, member.email) is None:
        password = payload.password or get_settings().default_member_password
        try:
            accounts.create_user_account(
                db,
                name=member.name,
                email=member.email,
                password=password,
                role=models.UserRole.member,
            )
        except accounts.AccountError as exc:
            db.rollback()
            logger.warning("Failed to create user account for member %s: %s", member.id, exc)
    return member


def update_member(
    db: Session, member: models.Member, payload: schemas.MemberUpdate
) -> models.Member:
    changes = applicable_changes(models.Member, payload.model_dump(exclude_unset=True))
    previous_type = (member.membership_type or "").strip().lower()
    for key, value in changes.items():
        setattr(member, key, value)
    if "membership_type" in changes and (member.membership_type or "").strip().lower() != previous_type:
        apply_membership_terms(member)
    member.updated_at = _now()
    db.commit()
    db.refresh(member)
    return member


def expire_memberships(db: Session, now: datetime | None = None) -> int:
    now = now or _now()
    stale = (
        db.query(models.Member)
        .filter(models.Member.expiration_date.is_not(None))
        .filter(models.Member.expiration_date <= now)
        .filter(models.Member.status != models.MemberStatus.expired.value)
        .all()
    )
    for member in stale:
        member.status = models.MemberStatus.expired.value
        member.updated_at = now
    db.commit()
    if stale:
        logger.info("Marked %d memberships as expired", len(stale))
    return len(stale)
