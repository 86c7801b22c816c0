"""Common application-wide constants."""

from datetime import timedelta

# Validity granted on creation, keyed by lower-cased membership type
MEMBERSHIP_DURATIONS = {
    "trial": timedelta(days=1),
    "monthly": timedelta(days=30),
    "annual": timedelta(days=365),
}
TRIAL_MEMBERSHIP = "trial"
TRIAL_EMAIL_DOMAIN = "@trial.local"

MIN_PASSWORD_LENGTH = 6

# Derived schedule statuses
STATUS_UPCOMING = "upcoming"
STATUS_ONGOING = "ongoing"
STATUS_COMPLETED = "completed"


__all__ = [
    "MEMBERSHIP_DURATIONS",
    "TRIAL_MEMBERSHIP",
    "TRIAL_EMAIL_DOMAIN",
    "MIN_PASSWORD_LENGTH",
    "STATUS_UPCOMING",
    "STATUS_ONGOING",
    "STATUS_COMPLETED",
]
