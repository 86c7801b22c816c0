from datetime import date
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session
from ...api import deps
from ...db.session import get_db
from ...db import models, schemas
from ...services import payment_service

router = APIRouter(prefix="/payments", tags=["payments"])


@router.get("", response_model=list[schemas.Payment])
def list_payments(
    member_id: str | None = Query(None, alias="memberId"),
    from_date: date | None = Query(None, alias="fromDate"),
    to_date: date | None = Query(None, alias="toDate"),
    q: str | None = None,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return payment_service.list_payments(
        db, member_id=member_id, from_date=from_date, to_date=to_date, q=q
    )


@router.get("/stats", response_model=schemas.PaymentStats)
def payment_stats(
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    return payment_service.payment_stats(db)


@router.get("/{payment_id}", response_model=schemas.Payment)
def get_payment(
    payment_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.get_current_user),
):
    payment = db.get(models.Payment, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    return payment


@router.post("", response_model=schemas.Payment, status_code=status.HTTP_201_CREATED)
def create_payment(
    payload: schemas.PaymentCreate,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    return payment_service.create_payment(db, payload)


@router.delete("/{payment_id}")
def delete_payment(
    payment_id: str,
    db: Session = Depends(get_db),
    _: models.User = Depends(deps.require_roles("admin")),
):
    payment = db.get(models.Payment, payment_id)
    if not payment:
        raise HTTPException(status_code=404, detail="Payment not found")
    db.delete(payment)
    db.commit()
    return {"message": "Payment deleted successfully"}
