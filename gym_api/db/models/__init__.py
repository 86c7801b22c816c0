from .user import User, UserRole
from .coach import Coach
from .member import Member, MemberStatus
from .payment import Payment, PaymentStatus
from .schedule import Schedule, ScheduleEnrollment
