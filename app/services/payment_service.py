# app/services/payment_service.py
import logging
from datetime import datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.payment import Payment
from app.repositories.order_repo import OrderRepository
from app.repositories.payment_repo import PaymentRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.payment import (
    PaymentAdminRead,
    PaymentCreate,
    PaymentHistoryRead,
    PaymentRead,
    PaymentStatusUpdate,
    PaymentSummary,
)

logger = logging.getLogger(__name__)


class PaymentService:
    """
    Payment bookkeeping. Recording a payment moves no money.
    """

    def __init__(
        self,
        repo: PaymentRepository,
        vendor_repo: VendorRepository,
        order_repo: OrderRepository,
    ):
        self.repo = repo
        self.vendor_repo = vendor_repo
        self.order_repo = order_repo

    # -------- Vendor-facing --------

    def history(
        self,
        session: Session,
        vendor_id: int,
        status_filter: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[PaymentHistoryRead]:
        rows = self.repo.list_for_vendor(
            session, vendor_id, status=status_filter, skip=skip, limit=limit
        )
        return [
            PaymentHistoryRead(
                **PaymentRead.model_validate(payment).model_dump(),
                order_date=order.order_date if order else None,
                order_amount=order.total_amount if order else None,
            )
            for payment, order in rows
        ]

    def summary(self, session: Session, vendor_id: int) -> PaymentSummary:
        pending_amount, completed_amount, pending_count, completed_count = (
            self.repo.summary_for_vendor(session, vendor_id)
        )
        return PaymentSummary(
            pending_amount=float(pending_amount or 0.0),
            completed_amount=float(completed_amount or 0.0),
            pending_count=int(pending_count or 0),
            completed_count=int(completed_count or 0),
        )

    # -------- Admin --------

    def record_payment(self, session: Session, payload: PaymentCreate) -> Payment:
        """
        Record a pending payment for a vendor.

        If order_id is given, the order must belong to that vendor.
        """
        vendor = self.vendor_repo.get_by_id(session, payload.vendor_id)
        if not vendor:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Vendor not found",
            )

        if payload.order_id is not None:
            order = self.order_repo.get_by_id(session, payload.order_id)
            if not order or order.vendor_id != vendor.id:
                raise HTTPException(
                    status_code=status.HTTP_404_NOT_FOUND,
                    detail="Order not found for this vendor",
                )

        payment = self.repo.create(session, Payment(**payload.model_dump()))
        logger.info("Payment %s recorded for vendor %s", payment.id, vendor.id)
        return payment

    def list_all(
        self,
        session: Session,
        status_filter: str | None = None,
        vendor_id: int | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[PaymentAdminRead]:
        rows = self.repo.list_all(
            session, status=status_filter, vendor_id=vendor_id, skip=skip, limit=limit
        )
        return [
            PaymentAdminRead(
                **PaymentRead.model_validate(payment).model_dump(),
                order_date=order.order_date if order else None,
                order_amount=order.total_amount if order else None,
                vendor_name=vendor.name,
                vendor_phone=vendor.phone,
            )
            for payment, vendor, order in rows
        ]

    def update_status(
        self,
        session: Session,
        payment_id: int,
        payload: PaymentStatusUpdate,
    ) -> Payment:
        payment = self.repo.get_by_id(session, payment_id)
        if not payment:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Payment not found",
            )

        payment.payment_status = payload.payment_status
        payment.payment_date = datetime.now(timezone.utc)
        if payload.notes is not None:
            payment.notes = payload.notes
        return self.repo.update(session, payment)
