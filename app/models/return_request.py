# app/models/return_request.py
from datetime import date, datetime, timezone

from sqlmodel import SQLModel, Field


class ReturnRequest(SQLModel, table=True):
    """
    Vendor request to send back a delivered product.

    One row per returned product; status: pending | approved | rejected.
    """

    __tablename__ = "return_requests"

    id: int | None = Field(default=None, primary_key=True)

    vendor_id: int = Field(
        foreign_key="vendors.id",
        ondelete="CASCADE",
        index=True,
    )
    product_id: int = Field(
        foreign_key="products.id",
        ondelete="CASCADE",
        index=True,
    )

    quantity: float = Field(gt=0)
    return_date: date
    reason: str | None = Field(default=None)

    status: str = Field(default="pending", index=True)
    notes: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
