# app/models/vendor.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Vendor(SQLModel, table=True):
    """
    Street vendor account.

    Identity:
      - phone is the login handle (unique)
      - address is snapshotted onto each generated order as the
        delivery address
    """

    __tablename__ = "vendors"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(max_length=100, index=True)

    phone: str = Field(
        max_length=15,
        unique=True,
        index=True,
        description="Login phone number (unique)",
    )

    email: str | None = Field(default=None, max_length=100)

    address: str | None = Field(
        default=None,
        description="Default delivery address",
    )
    city: str | None = Field(default=None, max_length=50)
    state: str | None = Field(default=None, max_length=50)
    pincode: str | None = Field(default=None, max_length=10)

    vendor_type: str | None = Field(default=None, max_length=50)
    working_hours: str | None = Field(default=None, max_length=100)

    # en | hi | mr | ta | bn
    language: str = Field(default="en", max_length=20)

    credit_limit: float = Field(default=0.0, ge=0)

    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last update timestamp (UTC)",
    )
