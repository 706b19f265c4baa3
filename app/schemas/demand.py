# app/schemas/demand.py
from datetime import date, datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


# -------- Daily needs --------


class DailyNeedItem(SQLModel):
    model_config = ConfigDict(extra="forbid")

    product_id: int
    quantity: float = Field(gt=0)


class DailyNeedsSet(SQLModel):
    """
    Full replacement of a vendor's standing needs.

    An empty list clears all needs. A product may appear only once.
    """

    model_config = ConfigDict(extra="forbid")

    daily_needs: list[DailyNeedItem]

    @field_validator("daily_needs")
    @classmethod
    def unique_products(cls, v: list[DailyNeedItem]) -> list[DailyNeedItem]:
        ids = [item.product_id for item in v]
        if len(ids) != len(set(ids)):
            raise ValueError("each product may appear only once")
        return v


class DailyNeedRead(SQLModel):
    id: int
    product_id: int
    product_name: str
    unit: str
    price: float
    quantity: float


# -------- Extra orders --------


class ExtraOrderCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    product_id: int
    quantity: float = Field(gt=0)
    order_date: date
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def normalize_notes(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None


class ExtraOrderRead(SQLModel):
    id: int
    vendor_id: int
    product_id: int
    quantity: float
    order_date: date
    notes: str | None
    created_at: datetime


# -------- Cancellations --------


class CancellationCreate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    cancel_date: date
    reason: str | None = None


class CancellationRead(SQLModel):
    id: int
    vendor_id: int
    cancel_date: date
    reason: str | None
    created_at: datetime
