from datetime import datetime, timedelta, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from ...core import auth as core_auth, security
from ...db.session import get_db
from ...db import models, schemas
from ...config import get_settings
from ...services import accounts
from .. import deps


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=schemas.TokenResponse)
def login(payload: schemas.LoginRequest, db: Session = Depends(get_db)):
    user = core_auth.authenticate_user(db, payload.email, payload.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid email or password"
        )
    settings = get_settings()
    minutes = settings.jwt_remember_expire_min if payload.remember_me else settings.jwt_expire_min
    token = security.create_access_token(
        {"sub": user.id, "role": user.role.value}, timedelta(minutes=minutes)
    )
    user.last_login_at = datetime.now(timezone.utc)
    db.commit()
    return schemas.TokenResponse(token=token, user=schemas.User.model_validate(user))


@router.post("/register", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
def register(payload: schemas.RegisterRequest, db: Session = Depends(get_db)):
    try:
        user = accounts.create_user_account(
            db,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            role=models.UserRole.member,
        )
    except accounts.AccountError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    return user


@router.get("/verify", response_model=schemas.VerifyResponse)
def verify(current: models.User = Depends(deps.get_current_user)):
    return schemas.VerifyResponse(user=schemas.User.model_validate(current))


@router.get("/me", response_model=schemas.User)
def me(current: models.User = Depends(deps.get_current_user)):
    return current


@router.post("/logout")
def logout():
    return {"message": "Logged out successfully"}
