# app/schemas/return_request.py
from datetime import date, datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

ReturnStatus = Literal["pending", "approved", "rejected"]


class ReturnItem(SQLModel):
    model_config = ConfigDict(extra="forbid")

    product_id: int
    quantity: float = Field(gt=0)


class ReturnCreate(SQLModel):
    """
    Vendor payload for returning products from one of their orders.
    """

    model_config = ConfigDict(extra="forbid")

    items: list[ReturnItem] = Field(min_length=1)
    return_date: date
    reason: str | None = None


class ReturnRequestRead(SQLModel):
    id: int
    vendor_id: int
    product_id: int
    quantity: float
    return_date: date
    reason: str | None
    status: ReturnStatus
    notes: str | None
    created_at: datetime


class ReturnRequestAdminRead(ReturnRequestRead):
    vendor_name: str
    vendor_phone: str
    product_name: str
    unit: str


class ReturnProcess(SQLModel):
    """
    Admin decision on a pending return.
    """

    model_config = ConfigDict(extra="forbid")

    status: Literal["approved", "rejected"]
    notes: str | None = None

    @field_validator("notes")
    @classmethod
    def normalize_notes(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        return v or None
