# app/schemas/payment.py
from datetime import date, datetime
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel, Field

PaymentStatus = Literal["pending", "completed", "failed"]


class PaymentCreate(SQLModel):
    """
    Admin records a payment for a vendor (optionally tied to an order).
    """

    model_config = ConfigDict(extra="forbid")

    vendor_id: int
    order_id: int | None = None
    amount: float = Field(gt=0)
    payment_method: str | None = Field(default=None, max_length=20)
    transaction_id: str | None = Field(default=None, max_length=100)
    notes: str | None = None


class PaymentRead(SQLModel):
    id: int
    vendor_id: int
    order_id: int | None
    amount: float
    payment_method: str | None
    payment_status: PaymentStatus
    transaction_id: str | None
    payment_date: datetime | None
    notes: str | None
    created_at: datetime


class PaymentHistoryRead(PaymentRead):
    order_date: date | None = None
    order_amount: float | None = None


class PaymentAdminRead(PaymentHistoryRead):
    vendor_name: str
    vendor_phone: str


class PaymentSummary(SQLModel):
    pending_amount: float
    completed_amount: float
    pending_count: int
    completed_count: int


class PaymentStatusUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    payment_status: PaymentStatus
    notes: str | None = None
