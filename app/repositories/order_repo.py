# app/repositories/order_repo.py
from datetime import date

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.order import Order, OrderItem
from app.models.product import Product
from app.models.vendor import Vendor


class OrderRepository:
    """
    Data access layer for orders and order_items.

    NOTE:
      - No commits here; order creation is a multi-step transaction.
        The service is responsible for calling session.commit().
    """

    # ---- Orders ----

    def get_by_id(self, session: Session, order_id: int) -> Order | None:
        return session.get(Order, order_id)

    def get_for_vendor_date(
        self,
        session: Session,
        vendor_id: int,
        order_date: date,
    ) -> Order | None:
        stmt = select(Order).where(
            Order.vendor_id == vendor_id,
            Order.order_date == order_date,
        )
        return session.exec(stmt).first()

    def list_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        status: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[Order, int]]:
        """
        (order, item_count) pairs for one vendor, newest first.
        """
        stmt = (
            select(Order, func.count(OrderItem.id).label("item_count"))
            .outerjoin(OrderItem, OrderItem.order_id == Order.id)
            .where(Order.vendor_id == vendor_id)
        )
        if status:
            stmt = stmt.where(Order.status == status)
        stmt = (
            stmt.group_by(Order.id)
            .order_by(Order.order_date.desc(), Order.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def list_all(
        self,
        session: Session,
        status: str | None = None,
        order_date: date | None = None,
        vendor_id: int | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[Order, str, str, int]]:
        """
        (order, vendor_name, vendor_phone, item_count) rows for admin listing.
        """
        stmt = (
            select(
                Order,
                Vendor.name,
                Vendor.phone,
                func.count(OrderItem.id).label("item_count"),
            )
            .join(Vendor, Vendor.id == Order.vendor_id)
            .outerjoin(OrderItem, OrderItem.order_id == Order.id)
        )
        if status:
            stmt = stmt.where(Order.status == status)
        if order_date is not None:
            stmt = stmt.where(Order.order_date == order_date)
        if vendor_id is not None:
            stmt = stmt.where(Order.vendor_id == vendor_id)
        stmt = (
            stmt.group_by(Order.id, Vendor.name, Vendor.phone)
            .order_by(Order.created_at.desc(), Order.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def create_order(self, session: Session, order: Order) -> Order:
        """
        Insert an Order without committing, but ensure id is populated.
        """
        session.add(order)
        session.flush()  # Assign PK
        session.refresh(order)
        return order

    def update_order(self, session: Session, order: Order) -> Order:
        session.add(order)
        session.flush()
        session.refresh(order)
        return order

    # ---- Order items ----

    def list_items_with_products(
        self,
        session: Session,
        order_id: int,
    ) -> list[tuple[OrderItem, Product]]:
        stmt = (
            select(OrderItem, Product)
            .join(Product, Product.id == OrderItem.product_id)
            .where(OrderItem.order_id == order_id)
            .order_by(OrderItem.id)
        )
        return list(session.exec(stmt).all())

    def create_items(
        self,
        session: Session,
        items: list[OrderItem],
    ) -> list[OrderItem]:
        session.add_all(items)
        session.flush()
        for item in items:
            session.refresh(item)
        return items
