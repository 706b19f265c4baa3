# app/models/demand.py
from datetime import date, datetime, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class DailyNeed(SQLModel, table=True):
    """
    Standing (recurring) demand of a vendor for one product.

    At most one row per (vendor, product). The vendor replaces the
    whole set at once; rows are never patched individually.
    """

    __tablename__ = "daily_needs"
    __table_args__ = (
        UniqueConstraint("vendor_id", "product_id", name="uq_daily_needs_vendor_product"),
    )

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

    is_recurring: bool = Field(default=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class ExtraOrder(SQLModel, table=True):
    """
    One-off demand for a specific delivery date.

    Not deduplicated: several rows for the same vendor/product/date
    all count.
    """

    __tablename__ = "extra_orders"

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

    order_date: date = Field(index=True)

    notes: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )


class CancelledOrder(SQLModel, table=True):
    """
    Vendor opt-out for one delivery date.

    Suppresses order generation for that vendor and date (extra
    orders included) and removes the vendor from the packing list.
    """

    __tablename__ = "cancelled_orders"
    __table_args__ = (
        UniqueConstraint("vendor_id", "cancel_date", name="uq_cancelled_orders_vendor_date"),
    )

    id: int | None = Field(default=None, primary_key=True)

    vendor_id: int = Field(
        foreign_key="vendors.id",
        ondelete="CASCADE",
        index=True,
    )

    cancel_date: date = Field(index=True)

    reason: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
