# app/models/order.py
from datetime import datetime, date, timezone

from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field


class Order(SQLModel, table=True):
    """
    Order generated from a vendor's daily needs + extra orders
    for one delivery date.

    Invariants:
      - one row per (vendor_id, order_date)
      - total_amount == sum(order_items.total_price)
    """

    __tablename__ = "orders"
    __table_args__ = (
        UniqueConstraint("vendor_id", "order_date", name="uq_orders_vendor_date"),
    )

    id: int | None = Field(default=None, primary_key=True)

    vendor_id: int = Field(
        foreign_key="vendors.id",
        ondelete="CASCADE",
        index=True,
    )

    order_date: date = Field(
        index=True,
        description="Delivery date the order was generated for",
    )

    total_amount: float = Field(
        default=0.0,
        description="Sum of item totals at generation time",
    )

    # pending | processing | out_for_delivery | delivered | cancelled
    status: str = Field(
        default="pending",
        index=True,
        description="Order status lifecycle",
    )

    delivery_address: str | None = Field(
        default=None,
        description="Vendor address snapshotted at generation time",
    )

    notes: str | None = Field(default=None)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last update timestamp (UTC)",
    )


class OrderItem(SQLModel, table=True):
    """
    Line item inside an order.

    unit_price is the product price at generation time.
    """

    __tablename__ = "order_items"

    id: int | None = Field(default=None, primary_key=True)

    order_id: int = Field(
        foreign_key="orders.id",
        ondelete="CASCADE",
        index=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        ondelete="CASCADE",
        index=True,
    )

    quantity: float = Field(gt=0)

    unit_price: float = Field(
        description="Unit price at time of generation",
    )

    total_price: float = Field(
        description="quantity * unit_price",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
