import os

os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("TIMEZONE", "UTC")

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from gym_api.api import deps
from gym_api.api.errors import register_exception_handlers
from gym_api.api.routes import auth, coaches, dashboard, members, misc, payments, schedules
from gym_api.db import models
from gym_api.db.session import Base, get_db


@pytest.fixture()
def db_session():
    engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def build_test_app(TestingSessionLocal, current_user=None) -> FastAPI:
    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    test_app = FastAPI()
    register_exception_handlers(test_app)
    for module in (auth, coaches, members, payments, schedules, dashboard, misc):
        test_app.include_router(module.router, prefix="/api")
    test_app.dependency_overrides[get_db] = override_get_db
    if current_user is not None:
        test_app.dependency_overrides[deps.get_current_user] = lambda: current_user
    return test_app


@pytest.fixture()
def session_factory():
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    TestingSessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    return TestingSessionLocal


@pytest.fixture()
def api_client(session_factory):
    admin = models.User(
        id="admin-id",
        name="Admin",
        email="admin@gym.local",
        password_hash="x",
        role=models.UserRole.admin,
        is_active=True,
    )
    test_app = build_test_app(session_factory, current_user=admin)
    with TestClient(test_app) as client:
        yield client, session_factory
    test_app.dependency_overrides.clear()


@pytest.fixture()
def anonymous_client(session_factory):
    test_app = build_test_app(session_factory)
    with TestClient(test_app) as client:
        yield client, session_factory
    test_app.dependency_overrides.clear()
