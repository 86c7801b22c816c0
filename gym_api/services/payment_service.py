from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from ..config import get_settings
from ..db import models, schemas


def _now() -> datetime:
    return datetime.now(timezone.utc)


def apply_student_discount(amount: float, percent: float | None = None) -> float:
    if percent is None:
        percent = get_settings().student_discount_percent
    return round(amount * (100 - percent) / 100, 2)


def create_payment(db: Session, payload: schemas.PaymentCreate) -> models.Payment:
    values = payload.model_dump(exclude_none=True)
    if payload.is_student:
        values["original_amount"] = payload.amount
        values["amount"] = apply_student_discount(payload.amount)
    if not values.get("member_name"):
        member = db.get(models.Member, payload.member_id)
        if member is not None:
            values["member_name"] = member.name
            values.setdefault("membership_type", member.membership_type)
    payment = models.Payment(**values)
    db.add(payment)
    db.commit()
    db.refresh(payment)
    return payment


def list_payments(
    db: Session,
    *,
    member_id: str | None = None,
    from_date: date | None = None,
    to_date: date | None = None,
    q: str | None = None,
) -> list[models.Payment]:
    query = db.query(models.Payment)
    if member_id:
        query = query.filter(models.Payment.member_id == member_id)
    if from_date:
        query = query.filter(
            models.Payment.payment_date >= datetime.combine(from_date, time.min, tzinfo=timezone.utc)
        )
    if to_date:
        query = query.filter(
            models.Payment.payment_date
            < datetime.combine(to_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
        )
    if q:
        pattern = f"%{q.strip()}%"
        query = query.filter(
            or_(models.Payment.member_name.ilike(pattern), models.Payment.notes.ilike(pattern))
        )
    return query.order_by(models.Payment.payment_date.desc()).all()


def _revenue_since(db: Session, since: datetime | None = None) -> float:
    query = db.query(func.coalesce(func.sum(models.Payment.amount), 0)).filter(
        models.Payment.status == models.PaymentStatus.completed.value
    )
    if since is not None:
        query = query.filter(models.Payment.payment_date >= since)
    return float(query.scalar() or 0)


def total_revenue(db: Session) -> float:
    return _revenue_since(db)


def payment_stats(db: Session, now: datetime | None = None) -> schemas.PaymentStats:
    now = now or _now()
    today_start = datetime(now.year, now.month, now.day, tzinfo=timezone.utc)
    month_start = datetime(now.year, now.month, 1, tzinfo=timezone.utc)
    return schemas.PaymentStats(
        total_revenue=_revenue_since(db),
        total_payments=db.query(models.Payment).count(),
        this_month_revenue=_revenue_since(db, month_start),
        today_revenue=_revenue_since(db, today_start),
    )


def _shift_month(year: int, month: int, offset: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + offset
    return index // 12, index % 12 + 1


def monthly_revenue(db: Session, months: int = 6, now: datetime | None = None) -> dict:
    """Completed revenue per calendar month, oldest first, ending with the current month."""
    now = now or _now()
    first_year, first_month = _shift_month(now.year, now.month, -(months - 1))
    window_start = datetime(first_year, first_month, 1, tzinfo=timezone.utc)
    payments = (
        db.query(models.Payment.payment_date, models.Payment.amount)
        .filter(models.Payment.status == models.PaymentStatus.completed.value)
        .filter(models.Payment.payment_date >= window_start)
        .all()
    )
    buckets: dict[tuple[int, int], float] = {}
    for paid_at, amount in payments:
        key = (paid_at.year, paid_at.month)
        buckets[key] = buckets.get(key, 0.0) + float(amount or 0)

    labels, values = [], []
    for offset in range(months):
        year, month = _shift_month(first_year, first_month, offset)
        labels.append(date(year, month, 1).strftime("%b %Y"))
        values.append(round(buckets.get((year, month), 0.0), 2))
    return {"labels": labels, "values": values}
