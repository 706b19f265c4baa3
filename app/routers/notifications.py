# app/routers/notifications.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_admin, require_vendor
from app.database import get_session
from app.models.vendor import Vendor
from app.repositories.notification_repo import NotificationRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.notification import (
    NotificationAdminRead,
    NotificationBulkCreate,
    NotificationCreate,
    NotificationRead,
    ReadAllResult,
    UnreadCount,
)
from app.services.notification_service import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])

service = NotificationService(NotificationRepository(), VendorRepository())


# -------- Vendor endpoints --------


@router.get("/vendor", response_model=list[NotificationRead])
def list_notifications(
    unread_only: bool = False,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return service.list_for_vendor(
        session, vendor.id, unread_only=unread_only, skip=skip, limit=limit
    )


@router.put("/vendor/read-all", response_model=ReadAllResult)
def mark_all_read(
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return ReadAllResult(updated_count=service.mark_all_read(session, vendor.id))


@router.get("/vendor/unread-count", response_model=UnreadCount)
def unread_count(
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return UnreadCount(unread_count=service.unread_count(session, vendor.id))


@router.put("/vendor/{notification_id}/read", response_model=NotificationRead)
def mark_read(
    notification_id: int,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return service.mark_read(session, vendor.id, notification_id)


# -------- Admin endpoints --------


@router.post(
    "/admin/send",
    response_model=NotificationRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def send_notification(
    payload: NotificationCreate,
    session: Session = Depends(get_session),
):
    """
    Store a notification for an active vendor.

    `sent_via` is recorded as-is; no external delivery happens.
    """
    return service.send(session, payload)


@router.post(
    "/admin/send-bulk",
    response_model=list[NotificationRead],
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def send_bulk_notification(
    payload: NotificationBulkCreate,
    session: Session = Depends(get_session),
):
    """Store the same notification for every active vendor in `vendor_ids`."""
    return service.send_bulk(session, payload)


@router.get(
    "/admin/all",
    response_model=list[NotificationAdminRead],
    dependencies=[Depends(require_admin)],
)
def list_all_notifications(
    vendor_id: int | None = None,
    type: str | None = None,
    is_read: bool | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    return service.list_all(
        session, vendor_id=vendor_id, type=type, is_read=is_read, skip=skip, limit=limit
    )
