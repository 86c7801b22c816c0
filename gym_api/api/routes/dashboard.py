from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models
from ...services import member_service, payment_service, schedule_service

router = APIRouter(tags=["dashboard"])


@router.get("/dashboard/stats")
def dashboard_stats(
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    members = db.query(models.Member).all()
    active_members = sum(
        1
        for member in members
        if member_service.display_status(member) == models.MemberStatus.active.value
    )
    return {
        "totalMembers": len(members),
        "activeMembers": active_members,
        "totalCoaches": db.query(models.Coach).count(),
        "totalRevenue": payment_service.total_revenue(db),
        "upcomingClasses": schedule_service.count_upcoming(db),
    }


@router.get("/revenue")
def revenue(
    months: int = Query(6, ge=1, le=24),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return payment_service.monthly_revenue(db, months=months)
