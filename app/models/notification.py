# app/models/notification.py
from datetime import datetime, timezone

from sqlmodel import SQLModel, Field


class Notification(SQLModel, table=True):
    """
    Message pushed by staff to a vendor.

    `sent_via` records the intended channel (app | email | sms | whatsapp);
    rows are only stored and read back in-app.
    """

    __tablename__ = "notifications"

    id: int | None = Field(default=None, primary_key=True)

    vendor_id: int = Field(
        foreign_key="vendors.id",
        ondelete="CASCADE",
        index=True,
    )

    type: str = Field(max_length=50)
    title: str = Field(max_length=100)
    message: str

    is_read: bool = Field(default=False, index=True)
    sent_via: str = Field(default="app", max_length=20)

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )
