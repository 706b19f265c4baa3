# app/models/payment.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Payment(SQLModel, table=True):
    """
    Payment record against a vendor (optionally a specific order).

    Only bookkeeping: no settlement happens here.
    payment_status: pending | completed | failed
    """

    __tablename__ = "payments"

    id: int | None = Field(default=None, primary_key=True)

    vendor_id: int = Field(
        foreign_key="vendors.id",
        ondelete="CASCADE",
        index=True,
    )
    order_id: int | None = Field(
        default=None,
        foreign_key="orders.id",
        ondelete="CASCADE",
        index=True,
    )

    amount: float = Field(gt=0)

    payment_method: str | None = Field(default=None, max_length=20)
    payment_status: str = Field(default="pending", index=True)
    transaction_id: str | None = Field(default=None, max_length=100)

    payment_date: datetime | None = Field(default=None)
    notes: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
