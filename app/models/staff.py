# app/models/staff.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Staff(SQLModel, table=True):
    """
    Admin / warehouse staff member.

    Staff authenticate with email + password (bcrypt hash stored here).
    Every active staff member has admin access; `role` is informational.
    """

    __tablename__ = "staff"

    id: int | None = Field(default=None, primary_key=True)

    name: str = Field(max_length=100)

    email: str = Field(
        max_length=100,
        unique=True,
        index=True,
    )

    phone: str | None = Field(default=None, max_length=15)

    role: str = Field(
        default="admin",
        max_length=50,
        description="Staff role label, e.g. admin | packer | manager",
    )

    password_hash: str = Field(max_length=255)

    is_active: bool = Field(default=True, index=True)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp (UTC)",
    )
    updated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Last update timestamp (UTC)",
    )
