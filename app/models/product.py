# app/models/product.py
from datetime import date, datetime, timezone

from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Supply catalog entry.

    `price` is the current price. Order generation copies it onto
    each order item, so later edits never touch historical orders.
    """

    __tablename__ = "products"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(
        max_length=100,
        index=True,
        description="Display name (not unique)",
    )

    description: str | None = Field(default=None)

    unit: str = Field(
        max_length=20,
        description="Selling unit, e.g. kg, litre, dozen",
    )

    price: float = Field(
        ge=0,
        description="Current unit price",
    )

    stock_quantity: float = Field(default=0.0, ge=0)
    min_stock_level: float = Field(default=0.0, ge=0)

    category: str | None = Field(default=None, max_length=50, index=True)

    expiry_date: date | None = Field(default=None)

    is_active: bool = Field(
        default=True,
        index=True,
        description="Inactive products are excluded from generation and packing",
    )

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last update timestamp (UTC)",
    )
