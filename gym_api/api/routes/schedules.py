from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import enrollment_service, schedule_service

router = APIRouter(prefix="/schedules", tags=["schedules"])


def _get_or_404(db: Session, schedule_id: str) -> models.Schedule:
    schedule = db.get(models.Schedule, schedule_id)
    if not schedule:
        raise HTTPException(status_code=404, detail="Schedule not found")
    return schedule


@router.get("", response_model=list[schemas.Schedule])
def list_schedules(
    on_date: date | None = Query(None, alias="date"),
    from_date: date | None = Query(None, alias="fromDate"),
    to_date: date | None = Query(None, alias="toDate"),
    coach_id: str | None = Query(None, alias="coachId"),
    member_id: str | None = Query(None, alias="memberId"),
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return schedule_service.list_schedules(
        db,
        on_date=on_date,
        from_date=from_date,
        to_date=to_date,
        coach_id=coach_id,
        member_id=member_id,
        status=status_filter,
    )


@router.get("/{schedule_id}", response_model=schemas.Schedule)
def get_schedule(
    schedule_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return schedule_service.annotate(_get_or_404(db, schedule_id))


@router.post("", response_model=schemas.Schedule, status_code=status.HTTP_201_CREATED)
def create_schedule(
    payload: schemas.ScheduleCreate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin", "coach")),
):
    try:
        return schedule_service.create_schedule(db, payload)
    except schedule_service.ScheduleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.put("/{schedule_id}", response_model=schemas.Schedule)
def update_schedule(
    schedule_id: str,
    payload: schemas.ScheduleUpdate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    schedule = _get_or_404(db, schedule_id)
    try:
        return schedule_service.update_schedule(db, schedule, payload)
    except schedule_service.ScheduleError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.delete("/{schedule_id}")
def delete_schedule(
    schedule_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    schedule = _get_or_404(db, schedule_id)
    db.delete(schedule)
    db.commit()
    return {"message": "Schedule deleted successfully"}


@router.post("/{schedule_id}/enroll", response_model=schemas.EnrollmentResult)
def enroll(
    schedule_id: str,
    payload: schemas.EnrollRequest,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    try:
        outcome = enrollment_service.enroll(db, schedule_id, payload.user_id)
    except enrollment_service.EnrollmentError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return schemas.EnrollmentResult(
        message="Successfully enrolled in class",
        enrolled_count=outcome.enrolled_count,
        capacity=outcome.capacity,
    )


@router.post("/{schedule_id}/unenroll", response_model=schemas.EnrollmentResult)
def unenroll(
    schedule_id: str,
    payload: schemas.EnrollRequest,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    try:
        outcome = enrollment_service.unenroll(db, schedule_id, payload.user_id)
    except enrollment_service.EnrollmentError as exc:
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc
    return schemas.EnrollmentResult(
        message="Successfully unenrolled from class",
        enrolled_count=outcome.enrolled_count,
        capacity=outcome.capacity,
    )
