# app/routers/orders.py
from datetime import date

from fastapi import APIRouter, Body, Depends, Query
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.demand_repo import DemandRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.generation import DailyGenerationResult, GenerateDailyRequest
from app.schemas.order import (
    OrderListRead,
    OrderRead,
    OrderStatus,
    OrderStatusUpdate,
    OrderWithItemsRead,
)
from app.services.daily_order_service import DailyOrderService
from app.services.order_service import OrderService

router = APIRouter(
    prefix="/admin/orders",
    tags=["Orders"],
    dependencies=[Depends(require_admin)],
)

order_repo = OrderRepository()

service = OrderService(order_repo)
daily_service = DailyOrderService(VendorRepository(), DemandRepository(), order_repo)


@router.post("/generate-daily", response_model=DailyGenerationResult)
def generate_daily_orders(
    payload: GenerateDailyRequest | None = Body(None),
    session: Session = Depends(get_session),
):
    """
    Generate orders for every active vendor with daily needs.

    - `target_date` defaults to today.
    - Safe to re-run: vendors that already have an order for the date
      are reported under `skipped` with reason `already_generated`.
    """
    target_date = payload.target_date if payload else None
    return daily_service.generate_daily_orders(session, target_date)


@router.get("", response_model=list[OrderListRead])
def list_orders(
    status_filter: OrderStatus | None = Query(None, alias="status"),
    order_date: date | None = Query(None, alias="date"),
    vendor_id: int | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    return service.list_all_orders(
        session,
        status_filter=status_filter,
        order_date=order_date,
        vendor_id=vendor_id,
        skip=skip,
        limit=limit,
    )


@router.get("/{order_id}", response_model=OrderWithItemsRead)
def get_order(
    order_id: int,
    session: Session = Depends(get_session),
):
    return service.get_order_admin(session, order_id)


@router.patch("/{order_id}/status", response_model=OrderRead)
def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    session: Session = Depends(get_session),
):
    """
    Move an order along pending -> processing -> out_for_delivery ->
    delivered, or cancel a pending order.
    """
    return service.update_status(session, order_id, payload)
