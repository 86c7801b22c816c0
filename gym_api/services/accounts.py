import logging
from sqlalchemy.orm import Session

from ..core import security
from ..db import models

logger = logging.getLogger(__name__)


class AccountError(Exception):
    pass


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def find_user_by_email(db: Session, email: str) -> models.User | None:
    return db.query(models.User).filter_by(email=normalize_email(email)).first()


def create_user_account(
    db: Session,
    *,
    name: str,
    email: str,
    password: str,
    role: models.UserRole,
) -> models.User:
    if find_user_by_email(db, email):
        raise AccountError("Email already registered")
    user = models.User(
        name=name,
        email=normalize_email(email),
        password_hash=security.get_password_hash(password),
        role=role,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Created %s account for '%s'", role.value, user.email)
    return user


def reset_password(db: Session, email: str, password: str) -> bool:
    user = find_user_by_email(db, email)
    if user is None:
        return False
    user.password_hash = security.get_password_hash(password)
    db.commit()
    logger.info("Reset password for '%s'", user.email)
    return True


def ensure_admin_exists(session: Session, name: str, email: str, password: str) -> None:
    admin = find_user_by_email(session, email)
    if admin:
        updated = False
        if not security.verify_password(password, admin.password_hash):
            admin.password_hash = security.get_password_hash(password)
            updated = True
        if admin.role != models.UserRole.admin:
            admin.role = models.UserRole.admin
            updated = True
        if not admin.is_active:
            admin.is_active = True
            updated = True
        if updated:
            session.commit()
            logger.info("Updated default admin user '%s'", admin.email)
        else:
            logger.info("Admin user '%s' already exists", admin.email)
        return

    create_user_account(
        session,
        name=name,
        email=email,
        password=password,
        role=models.UserRole.admin,
    )
    logger.info("Created default admin user '%s'", normalize_email(email))
