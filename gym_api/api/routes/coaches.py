from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import coach_service

router = APIRouter(prefix="/coaches", tags=["coaches"])


@router.get("", response_model=list[schemas.Coach])
def list_coaches(
    q: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return coach_service.list_coaches(db, q=q, status=status_filter)


@router.delete("/clear-all")
def clear_all(
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    count = coach_service.delete_all(db)
    return {"message": f"Deleted {count} coaches successfully"}


@router.get("/{coach_id}", response_model=schemas.Coach)
def get_coach(
    coach_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    coach = db.get(models.Coach, coach_id)
    if not coach:
        raise HTTPException(status_code=404, detail="Coach not found")
    return coach


@router.post("", response_model=schemas.Coach, status_code=status.HTTP_201_CREATED)
def create_coach(
    payload: schemas.CoachCreate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    return coach_service.create_coach(db, payload)


@router.put("/{coach_id}", response_model=schemas.Coach)
def update_coach(
    coach_id: str,
    payload: schemas.CoachUpdate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    coach = db.get(models.Coach, coach_id)
    if not coach:
        raise HTTPException(status_code=404, detail="Coach not found")
    return coach_service.update_coach(db, coach, payload)


@router.delete("/{coach_id}")
def delete_coach(
    coach_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    coach = db.get(models.Coach, coach_id)
    if not coach:
        raise HTTPException(status_code=404, detail="Coach not found")
    db.delete(coach)
    db.commit()
    return {"message": "Coach deleted successfully"}
