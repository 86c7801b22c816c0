import logging

from apscheduler.schedulers.asyncio import AsyncIOScheduler

from ..config import get_settings
from ..db.session import SessionLocal
from ..services import member_service

logger = logging.getLogger(__name__)


def expire_memberships() -> None:
    with SessionLocal() as db:
        expired = member_service.expire_memberships(db)
        logger.debug("Membership expiry run finished", extra={"expired": expired})


def get_scheduler() -> AsyncIOScheduler:
    settings = get_settings()
    scheduler = AsyncIOScheduler()
    scheduler.add_job(
        expire_memberships,
        "interval",
        minutes=settings.membership_expiry_interval_min,
    )
    return scheduler
