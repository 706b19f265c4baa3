# app/routers/payments.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_admin, require_vendor
from app.database import get_session
from app.models.vendor import Vendor
from app.repositories.order_repo import OrderRepository
from app.repositories.payment_repo import PaymentRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.payment import (
    PaymentAdminRead,
    PaymentCreate,
    PaymentHistoryRead,
    PaymentRead,
    PaymentStatus,
    PaymentStatusUpdate,
    PaymentSummary,
)
from app.services.payment_service import PaymentService

router = APIRouter(prefix="/payments", tags=["Payments"])

service = PaymentService(PaymentRepository(), VendorRepository(), OrderRepository())


# -------- Vendor endpoints --------


@router.get("/history", response_model=list[PaymentHistoryRead])
def payment_history(
    status_filter: PaymentStatus | None = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return service.history(
        session, vendor.id, status_filter=status_filter, skip=skip, limit=limit
    )


@router.get("/summary", response_model=PaymentSummary)
def payment_summary(
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Pending and completed totals for the calling vendor.
    """
    return service.summary(session, vendor.id)


# -------- Admin endpoints --------


@router.post(
    "",
    response_model=PaymentRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def record_payment(
    payload: PaymentCreate,
    session: Session = Depends(get_session),
):
    return service.record_payment(session, payload)


@router.get(
    "/admin/all",
    response_model=list[PaymentAdminRead],
    dependencies=[Depends(require_admin)],
)
def list_all_payments(
    status_filter: PaymentStatus | None = Query(None, alias="status"),
    vendor_id: int | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    return service.list_all(
        session,
        status_filter=status_filter,
        vendor_id=vendor_id,
        skip=skip,
        limit=limit,
    )


@router.put(
    "/admin/{payment_id}/status",
    response_model=PaymentRead,
    dependencies=[Depends(require_admin)],
)
def update_payment_status(
    payment_id: int,
    payload: PaymentStatusUpdate,
    session: Session = Depends(get_session),
):
    """
    Set payment status; payment_date is stamped with the current time.
    """
    return service.update_status(session, payment_id, payload)
