from . import (
    auth,
    coaches,
    members,
    payments,
    schedules,
    dashboard,
    misc,
)

__all__ = [
    "auth",
    "coaches",
    "members",
    "payments",
    "schedules",
    "dashboard",
    "misc",
]
