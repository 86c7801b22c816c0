from gym_api.db import models
from gym_api.services.accounts import ensure_admin_exists
from gym_api.core import security


def test_creates_default_admin(db_session):
    ensure_admin_exists(db_session, "Owner", "Owner@Gym.local", "strong_password")

    created = db_session.query(models.User).filter_by(email="owner@gym.local").one()

    assert created.role == models.UserRole.admin
    assert security.verify_password("strong_password", created.password_hash)


def test_updates_password_for_existing_admin(db_session):
    ensure_admin_exists(db_session, "Owner", "owner@gym.local", "old_password")

    ensure_admin_exists(db_session, "Owner", "owner@gym.local", "new_password")

    admins = db_session.query(models.User).filter_by(email="owner@gym.local").all()
    assert len(admins) == 1
    assert security.verify_password("new_password", admins[0].password_hash)


def test_promotes_existing_user_to_admin(db_session):
    user = models.User(
        name="Jo",
        email="jo@gym.local",
        password_hash=security.get_password_hash("pw12345"),
        role=models.UserRole.member,
    )
    db_session.add(user)
    db_session.commit()

    ensure_admin_exists(db_session, "Jo", "jo@gym.local", "pw12345")

    db_session.refresh(user)
    assert user.role == models.UserRole.admin
