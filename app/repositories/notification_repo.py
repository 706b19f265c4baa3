# app/repositories/notification_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from app.models.notification import Notification
from app.models.vendor import Vendor


class NotificationRepository:
    """
    Data access layer for notifications.
    """

    def create(self, session: Session, notification: Notification) -> Notification:
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    def create_many(
        self,
        session: Session,
        notifications: list[Notification],
    ) -> list[Notification]:
        session.add_all(notifications)
        session.commit()
        for notification in notifications:
            session.refresh(notification)
        return notifications

    def get_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        notification_id: int,
    ) -> Notification | None:
        stmt = select(Notification).where(
            Notification.id == notification_id,
            Notification.vendor_id == vendor_id,
        )
        return session.exec(stmt).first()

    def list_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        unread_only: bool = False,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Notification]:
        stmt = select(Notification).where(Notification.vendor_id == vendor_id)
        if unread_only:
            stmt = stmt.where(Notification.is_read == False)
        stmt = (
            stmt.order_by(Notification.created_at.desc(), Notification.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def list_all(
        self,
        session: Session,
        vendor_id: int | None = None,
        type: str | None = None,
        is_read: bool | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[Notification, Vendor]]:
        stmt = select(Notification, Vendor).join(Vendor, Vendor.id == Notification.vendor_id)
        if vendor_id is not None:
            stmt = stmt.where(Notification.vendor_id == vendor_id)
        if type:
            stmt = stmt.where(Notification.type == type)
        if is_read is not None:
            stmt = stmt.where(Notification.is_read == is_read)
        stmt = (
            stmt.order_by(Notification.created_at.desc(), Notification.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def update(self, session: Session, notification: Notification) -> Notification:
        session.add(notification)
        session.commit()
        session.refresh(notification)
        return notification

    def mark_all_read(self, session: Session, vendor_id: int) -> int:
        stmt = select(Notification).where(
            Notification.vendor_id == vendor_id,
            Notification.is_read == False,
        )
        unread = session.exec(stmt).all()
        for notification in unread:
            notification.is_read = True
            session.add(notification)
        session.commit()
        return len(unread)

    def count_unread(self, session: Session, vendor_id: int) -> int:
        stmt = (
            select(func.count(Notification.id))
            .where(Notification.vendor_id == vendor_id, Notification.is_read == False)
        )
        return int(session.exec(stmt).one() or 0)
