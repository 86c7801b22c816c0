from . import (
    accounts,
    coach_service,
    enrollment_service,
    member_service,
    payment_service,
    schedule_service,
)
__all__ = [
    "accounts",
    "coach_service",
    "enrollment_service",
    "member_service",
    "payment_service",
    "schedule_service",
]
