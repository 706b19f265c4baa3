# app/schemas/vendor.py
import re
from datetime import datetime
from typing import Literal

from pydantic import EmailStr, ConfigDict, field_validator
from sqlmodel import SQLModel, Field

Language = Literal["en", "hi", "mr", "ta", "bn"]

_PHONE_RE = re.compile(r"^\+?[0-9]{7,15}$")


def _normalize_phone(v: str) -> str:
    v = re.sub(r"[\s\-()]", "", v)
    if not _PHONE_RE.match(v):
        raise ValueError("valid phone number is required")
    return v


class VendorRegister(SQLModel):
    """
    Self-registration payload for a vendor.

    Phone is the login handle and must be unique.
    """

    model_config = ConfigDict(extra="forbid")

    name: str = Field(max_length=100)
    phone: str
    email: EmailStr | None = None
    address: str
    city: str = Field(max_length=50)
    state: str = Field(max_length=50)
    pincode: str = Field(max_length=10)
    vendor_type: str = Field(max_length=50)
    working_hours: str | None = Field(default=None, max_length=100)
    language: Language = "en"

    @field_validator("name", "address", "city", "state", "pincode", "vendor_type")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v

    @field_validator("phone")
    @classmethod
    def valid_phone(cls, v: str) -> str:
        return _normalize_phone(v)


class VendorLogin(SQLModel):
    model_config = ConfigDict(extra="forbid")

    phone: str

    @field_validator("phone")
    @classmethod
    def valid_phone(cls, v: str) -> str:
        return _normalize_phone(v)


class VendorUpdate(SQLModel):
    """
    Partial profile update. Phone is immutable.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    email: EmailStr | None = None
    address: str | None = None
    working_hours: str | None = Field(default=None, max_length=100)
    language: Language | None = None

    @field_validator("name", "address", "working_hours")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class VendorRead(SQLModel):
    id: int
    name: str
    phone: str
    email: str | None
    address: str | None
    city: str | None
    state: str | None
    pincode: str | None
    vendor_type: str | None
    working_hours: str | None
    language: str
    credit_limit: float
    is_active: bool
    created_at: datetime


class VendorAuthResponse(SQLModel):
    vendor: VendorRead
    token: str


class VendorAdminDetail(VendorRead):
    """
    Vendor row plus activity counters for the admin detail view.
    """

    total_orders: int
    daily_needs_count: int
    total_payments: float


class VendorStatusUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    is_active: bool
