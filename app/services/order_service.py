# app/services/order_service.py
import logging
from datetime import date, datetime, timezone

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.order import Order, OrderItem
from app.models.product import Product
from app.repositories.order_repo import OrderRepository
from app.schemas.order import (
    OrderItemRead,
    OrderListRead,
    OrderRead,
    OrderStatusUpdate,
    OrderWithItemsRead,
)

logger = logging.getLogger(__name__)

# Admin-driven lifecycle; delivered and cancelled are terminal.
ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    "pending": {"processing", "cancelled"},
    "processing": {"out_for_delivery"},
    "out_for_delivery": {"delivered"},
    "delivered": set(),
    "cancelled": set(),
}


class OrderService:
    """
    Read access to generated orders plus the admin status machine.

    Orders are only ever created by daily generation
    (see DailyOrderService).
    """

    def __init__(self, order_repo: OrderRepository):
        self.order_repo = order_repo

    # -------- Vendor-facing operations --------

    def list_vendor_orders(
        self,
        session: Session,
        vendor_id: int,
        status_filter: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[OrderListRead]:
        rows = self.order_repo.list_for_vendor(
            session, vendor_id, status=status_filter, skip=skip, limit=limit
        )
        return [
            OrderListRead(**OrderRead.model_validate(order).model_dump(), item_count=count)
            for order, count in rows
        ]

    def get_vendor_order(
        self,
        session: Session,
        vendor_id: int,
        order_id: int,
    ) -> OrderWithItemsRead:
        order = self.order_repo.get_by_id(session, order_id)
        # Other vendors' orders are reported as missing.
        if not order or order.vendor_id != vendor_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return self._build_order_with_items_dto(session, order)

    # -------- Admin operations --------

    def list_all_orders(
        self,
        session: Session,
        status_filter: str | None = None,
        order_date: date | None = None,
        vendor_id: int | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[OrderListRead]:
        rows = self.order_repo.list_all(
            session,
            status=status_filter,
            order_date=order_date,
            vendor_id=vendor_id,
            skip=skip,
            limit=limit,
        )
        return [
            OrderListRead(
                **OrderRead.model_validate(order).model_dump(),
                vendor_name=vendor_name,
                vendor_phone=vendor_phone,
                item_count=count,
            )
            for order, vendor_name, vendor_phone, count in rows
        ]

    def get_order(self, session: Session, order_id: int) -> Order:
        order = self.order_repo.get_by_id(session, order_id)
        if not order:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )
        return order

    def get_order_admin(self, session: Session, order_id: int) -> OrderWithItemsRead:
        return self._build_order_with_items_dto(session, self.get_order(session, order_id))

    def update_status(
        self,
        session: Session,
        order_id: int,
        payload: OrderStatusUpdate,
    ) -> Order:
        """
        Admin-only status update:

          pending          -> processing, cancelled
          processing       -> out_for_delivery
          out_for_delivery -> delivered
          delivered        -> (no change)
          cancelled        -> (no change)

        Setting the current status again is a no-op (notes still apply).
        Any other transition raises 400.
        """
        order = self.get_order(session, order_id)

        current = order.status
        new = payload.status

        if current != new and new not in ALLOWED_TRANSITIONS.get(current, set()):
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Invalid status transition: {current} -> {new}",
            )

        order.status = new
        if payload.notes is not None:
            order.notes = payload.notes
        order.updated_at = datetime.now(timezone.utc)

        self.order_repo.update_order(session, order)
        session.commit()
        session.refresh(order)
        logger.info("Order %s: %s -> %s", order.id, current, new)
        return order

    # -------- Helper DTO builder --------

    def _build_order_with_items_dto(
        self,
        session: Session,
        order: Order,
    ) -> OrderWithItemsRead:
        rows: list[tuple[OrderItem, Product]] = self.order_repo.list_items_with_products(
            session, order.id
        )
        items = [
            OrderItemRead(
                id=item.id,
                order_id=item.order_id,
                product_id=item.product_id,
                product_name=product.name,
                unit=product.unit,
                quantity=item.quantity,
                unit_price=item.unit_price,
                total_price=item.total_price,
            )
            for item, product in rows
        ]
        return OrderWithItemsRead(**OrderRead.model_validate(order).model_dump(), items=items)
