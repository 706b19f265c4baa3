# app/repositories/stats_repo.py
from datetime import datetime

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.order import Order, OrderItem
from app.models.product import Product
from app.models.vendor import Vendor


class StatsRepository:
    """
    Read-only aggregated queries for the admin analytics view.
    """

    def count_active_vendors(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Vendor).where(Vendor.is_active == True)
        # SQLModel's Session.exec() -> ScalarResult -> use .one()
        value = session.exec(stmt).one()
        return int(value or 0)

    def orders_since(self, session: Session, since: datetime) -> tuple[int, float]:
        """
        (order count, revenue) for orders created at or after `since`.
        """
        stmt = select(
            func.count(Order.id),
            func.coalesce(func.sum(Order.total_amount), 0.0),
        ).where(Order.created_at >= since)
        count, revenue = session.exec(stmt).one()
        return int(count or 0), float(revenue or 0.0)

    def top_products(
        self,
        session: Session,
        since: datetime,
        limit: int = 10,
    ) -> list[tuple]:
        """
        Products ordered the most (by quantity) since `since`.
        """
        qty_sum = func.coalesce(func.sum(OrderItem.quantity), 0)

        stmt = (
            select(
                Product.id,
                Product.name,
                func.count(OrderItem.id).label("order_count"),
                qty_sum.label("total_quantity"),
            )
            .select_from(OrderItem)
            .join(Order, Order.id == OrderItem.order_id)
            .join(Product, Product.id == OrderItem.product_id)
            .where(Order.created_at >= since)
            .group_by(Product.id, Product.name)
            .order_by(qty_sum.desc())
            .limit(limit)
        )

        return list(session.exec(stmt).all())

    def top_vendors(
        self,
        session: Session,
        since: datetime,
        limit: int = 10,
    ) -> list[tuple]:
        """
        Vendors with the highest order totals since `since`.
        """
        spent = func.coalesce(func.sum(Order.total_amount), 0.0)

        stmt = (
            select(
                Vendor.id,
                Vendor.name,
                func.count(Order.id).label("order_count"),
                spent.label("total_spent"),
            )
            .select_from(Order)
            .join(Vendor, Vendor.id == Order.vendor_id)
            .where(Order.created_at >= since)
            .group_by(Vendor.id, Vendor.name)
            .order_by(spent.desc())
            .limit(limit)
        )

        return list(session.exec(stmt).all())
