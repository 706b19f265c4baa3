# app/repositories/payment_repo.py
from sqlalchemy import case, func
from sqlmodel import Session, select

from app.models.order import Order
from app.models.payment import Payment
from app.models.vendor import Vendor


class PaymentRepository:
    """
    Data access layer for payments.
    """

    def get_by_id(self, session: Session, payment_id: int) -> Payment | None:
        return session.get(Payment, payment_id)

    def create(self, session: Session, payment: Payment) -> Payment:
        session.add(payment)
        session.commit()
        session.refresh(payment)
        return payment

    def update(self, session: Session, payment: Payment) -> Payment:
        session.add(payment)
        session.commit()
        session.refresh(payment)
        return payment

    def list_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        status: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[Payment, Order | None]]:
        stmt = (
            select(Payment, Order)
            .outerjoin(Order, Order.id == Payment.order_id)
            .where(Payment.vendor_id == vendor_id)
        )
        if status:
            stmt = stmt.where(Payment.payment_status == status)
        stmt = (
            stmt.order_by(Payment.created_at.desc(), Payment.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def list_all(
        self,
        session: Session,
        status: str | None = None,
        vendor_id: int | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[Payment, Vendor, Order | None]]:
        stmt = (
            select(Payment, Vendor, Order)
            .join(Vendor, Vendor.id == Payment.vendor_id)
            .outerjoin(Order, Order.id == Payment.order_id)
        )
        if status:
            stmt = stmt.where(Payment.payment_status == status)
        if vendor_id is not None:
            stmt = stmt.where(Payment.vendor_id == vendor_id)
        stmt = (
            stmt.order_by(Payment.created_at.desc(), Payment.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def summary_for_vendor(self, session: Session, vendor_id: int) -> tuple:
        """
        (pending_amount, completed_amount, pending_count, completed_count)
        """
        pending = Payment.payment_status == "pending"
        completed = Payment.payment_status == "completed"
        stmt = select(
            func.coalesce(func.sum(case((pending, Payment.amount), else_=0)), 0),
            func.coalesce(func.sum(case((completed, Payment.amount), else_=0)), 0),
            func.count(case((pending, 1))),
            func.count(case((completed, 1))),
        ).where(Payment.vendor_id == vendor_id)
        return tuple(session.exec(stmt).one())
