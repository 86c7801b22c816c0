from .coach import Coach, CoachCreate, CoachUpdate
from .member import Member, MemberCreate, MemberUpdate
from .payment import Payment, PaymentCreate, PaymentStats
from .schedule import (
    EnrollRequest,
    EnrollmentResult,
    Schedule,
    ScheduleCreate,
    ScheduleUpdate,
)
from .user import LoginRequest, RegisterRequest, TokenResponse, User, VerifyResponse
