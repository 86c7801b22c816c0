from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import member_service

router = APIRouter(prefix="/members", tags=["members"])


def _get_or_404(db: Session, member_id: str) -> models.Member:
    member = db.get(models.Member, member_id)
    if not member:
        raise HTTPException(status_code=404, detail="Member not found")
    return member


@router.get("", response_model=list[schemas.Member])
def list_members(
    q: str | None = None,
    status_filter: str | None = Query(None, alias="status"),
    membership_type: str | None = Query(None, alias="membershipType"),
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    members = member_service.list_members(
        db, q=q, status=status_filter, membership_type=membership_type
    )
    return [member_service.to_schema(member) for member in members]


@router.get("/{member_id}", response_model=schemas.Member)
def get_member(
    member_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return member_service.to_schema(_get_or_404(db, member_id))


@router.post("", response_model=schemas.Member, status_code=status.HTTP_201_CREATED)
def create_member(
    payload: schemas.MemberCreate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    member = member_service.create_member(db, payload)
    return member_service.to_schema(member)


@router.put("/{member_id}", response_model=schemas.Member)
def update_member(
    member_id: str,
    payload: schemas.MemberUpdate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    member = member_service.update_member(db, _get_or_404(db, member_id), payload)
    return member_service.to_schema(member)


@router.delete("/{member_id}")
def delete_member(
    member_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    member = _get_or_404(db, member_id)
    db.delete(member)
    db.commit()
    return {"message": "Member deleted successfully"}
