import uuid

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session
from ..config import get_settings

settings = get_settings()

engine = create_engine(settings.sqlalchemy_url, future=True, echo=False)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)
Base = declarative_base()


def get_db() -> Session:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def new_id() -> str:
    return uuid.uuid4().hex


def applicable_changes(model, changes: dict) -> dict:
    """Drop explicit nulls aimed at NOT NULL columns of ``model``."""
    columns = model.__table__.c
    return {
        key: value
        for key, value in changes.items()
        if value is not None or key not in columns or columns[key].nullable
    }
