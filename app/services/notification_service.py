# app/services/notification_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.notification import Notification
from app.repositories.notification_repo import NotificationRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.notification import (
    NotificationAdminRead,
    NotificationBulkCreate,
    NotificationCreate,
    NotificationRead,
)

logger = logging.getLogger(__name__)


class NotificationService:
    """
    Stored vendor notifications.

    `sent_via` is recorded only; nothing is pushed to SMS, email
    or WhatsApp from here.
    """

    def __init__(self, repo: NotificationRepository, vendor_repo: VendorRepository):
        self.repo = repo
        self.vendor_repo = vendor_repo

    def list_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Notification]:
        return self.repo.list_for_vendor(
            session, vendor_id, unread_only=unread_only, skip=skip, limit=limit
        )

    def mark_read(self, session: Session, vendor_id: int, notification_id: int) -> Notification:
        notification = self.repo.get_for_vendor(session, vendor_id, notification_id)
        if not notification:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Notification not found",
            )
        notification.is_read = True
        return self.repo.update(session, notification)

    def mark_all_read(self, session: Session, vendor_id: int) -> int:
        return self.repo.mark_all_read(session, vendor_id)

    def unread_count(self, session: Session, vendor_id: int) -> int:
        return self.repo.count_unread(session, vendor_id)

    def send(self, session: Session, payload: NotificationCreate) -> Notification:
        vendor = self.vendor_repo.get_by_id(session, payload.vendor_id)
        if not vendor or not vendor.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Vendor not found or inactive",
            )

        notification = self.repo.create(session, Notification(**payload.model_dump()))
        logger.info(
            "Notification %s stored for vendor %s via %s",
            notification.id,
            vendor.id,
            notification.sent_via,
        )
        return notification

    def send_bulk(
        self,
        session: Session,
        payload: NotificationBulkCreate,
    ) -> list[Notification]:
        vendors = self.vendor_repo.list_active_by_ids(session, payload.vendor_ids)
        content = payload.model_dump(exclude={"vendor_ids"})

        notifications = self.repo.create_many(
            session,
            [Notification(vendor_id=vendor.id, **content) for vendor in vendors],
        )
        logger.info(
            "Bulk notification stored for %d of %d vendors via %s",
            len(notifications),
            len(set(payload.vendor_ids)),
            payload.sent_via,
        )
        return notifications

    def list_all(
        self,
        session: Session,
        vendor_id: int | None = None,
        type: str | None = None,
        is_read: bool | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[NotificationAdminRead]:
        rows = self.repo.list_all(
            session, vendor_id=vendor_id, type=type, is_read=is_read, skip=skip, limit=limit
        )
        return [
            NotificationAdminRead(
                **NotificationRead.model_validate(notification).model_dump(),
                vendor_name=vendor.name,
                vendor_phone=vendor.phone,
            )
            for notification, vendor in rows
        ]
