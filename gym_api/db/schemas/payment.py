from datetime import datetime
from pydantic import Field
from .base import CamelModel


class PaymentBase(CamelModel):
    member_id: str
    member_name: str = ""
    membership_type: str | None = None
    amount: float = Field(gt=0)
    payment_date: datetime | None = None
    payment_method: str = ""
    status: str = "completed"
    description: str | None = None
    notes: str | None = None
    is_student: bool = False


class PaymentCreate(PaymentBase):
    pass


class Payment(PaymentBase):
    id: str
    original_amount: float | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaymentStats(CamelModel):
    total_revenue: float
    total_payments: int
    this_month_revenue: float
    today_revenue: float
