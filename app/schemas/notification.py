# app/schemas/notification.py
from datetime import datetime
from typing import Literal

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field

SentVia = Literal["app", "email", "sms", "whatsapp"]


class NotificationContent(SQLModel):
    model_config = ConfigDict(extra="forbid")

    type: str = Field(max_length=50)
    title: str = Field(max_length=100)
    message: str
    sent_via: SentVia = "app"

    @field_validator("type", "title", "message")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class NotificationCreate(NotificationContent):
    """
    Admin payload for pushing a notification to one vendor.
    """

    vendor_id: int


class NotificationBulkCreate(NotificationContent):
    """
    Same notification for several vendors; unknown or inactive ids
    are skipped.
    """

    vendor_ids: list[int] = Field(min_length=1)


class NotificationRead(SQLModel):
    id: int
    vendor_id: int
    type: str
    title: str
    message: str
    is_read: bool
    sent_via: str
    created_at: datetime


class NotificationAdminRead(NotificationRead):
    vendor_name: str
    vendor_phone: str


class UnreadCount(SQLModel):
    unread_count: int


class ReadAllResult(SQLModel):
    updated_count: int
