# app/schemas/order.py
from datetime import date, datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel

OrderStatus = Literal[
    "pending",
    "processing",
    "out_for_delivery",
    "delivered",
    "cancelled",
]


class OrderRead(SQLModel):
    """
    Lightweight representation of an order (without items).
    """

    id: int
    vendor_id: int
    order_date: date
    total_amount: float
    status: OrderStatus
    delivery_address: str | None
    notes: str | None
    created_at: datetime


class OrderListRead(OrderRead):
    """
    Order row in listings, with vendor info and line count.
    """

    vendor_name: str | None = None
    vendor_phone: str | None = None
    item_count: int


class OrderItemRead(SQLModel):
    """
    Representation of a single order line item.
    """

    id: int
    order_id: int
    product_id: int
    product_name: str
    unit: str
    quantity: float
    unit_price: float
    total_price: float


class OrderWithItemsRead(OrderRead):
    """
    Full order view including items.
    """

    items: list[OrderItemRead]


class OrderStatusUpdate(SQLModel):
    """
    Admin payload to change order status.
    """

    model_config = ConfigDict(extra="forbid")

    status: OrderStatus
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def normalize_notes(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None
