# app/routers/vendors.py
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_vendor
from app.database import get_session
from app.models.vendor import Vendor
from app.repositories.demand_repo import DemandRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.return_repo import ReturnRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.demand import (
    CancellationCreate,
    CancellationRead,
    DailyNeedRead,
    DailyNeedsSet,
    ExtraOrderCreate,
    ExtraOrderRead,
)
from app.schemas.order import OrderListRead, OrderStatus, OrderWithItemsRead
from app.schemas.return_request import ReturnCreate, ReturnRequestRead
from app.schemas.vendor import (
    VendorAuthResponse,
    VendorLogin,
    VendorRead,
    VendorRegister,
    VendorUpdate,
)
from app.services.order_service import OrderService
from app.services.return_service import ReturnService
from app.services.vendor_service import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])

vendor_repo = VendorRepository()
demand_repo = DemandRepository()
product_repo = ProductRepository()
order_repo = OrderRepository()
return_repo = ReturnRepository()

service = VendorService(vendor_repo, demand_repo, product_repo)
order_service = OrderService(order_repo)
return_service = ReturnService(return_repo, order_repo)


# -------- Auth --------


@router.post(
    "/register",
    response_model=VendorAuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_vendor(
    payload: VendorRegister,
    session: Session = Depends(get_session),
):
    """
    Self-registration. Returns the vendor and a vendor token.
    """
    return service.register(session, payload)


@router.post("/login", response_model=VendorAuthResponse)
def login_vendor(
    payload: VendorLogin,
    session: Session = Depends(get_session),
):
    """
    Phone login for active vendors.
    """
    return service.login(session, payload)


# -------- Profile --------


@router.get("/profile", response_model=VendorRead)
def get_profile(vendor: Vendor = Depends(require_vendor)):
    return vendor


@router.put("/profile", response_model=VendorRead)
def update_profile(
    payload: VendorUpdate,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Update editable profile fields. Phone cannot be changed.
    """
    return service.update_profile(session, vendor, payload)


# -------- Daily needs --------


@router.get("/daily-needs", response_model=list[DailyNeedRead])
def get_daily_needs(
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Standing needs on active products, ordered by product name.
    """
    return service.get_daily_needs(session, vendor)


@router.post("/daily-needs", response_model=list[DailyNeedRead])
def set_daily_needs(
    payload: DailyNeedsSet,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Replace all daily needs with the given list (empty list clears them).
    """
    return service.set_daily_needs(session, vendor, payload)


# -------- Extra orders --------


@router.post(
    "/extra-orders",
    response_model=ExtraOrderRead,
    status_code=status.HTTP_201_CREATED,
)
def add_extra_order(
    payload: ExtraOrderCreate,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    One-off extra quantity for a specific delivery date.

    Only picked up if the vendor also has daily needs that day.
    """
    return service.add_extra_order(session, vendor, payload)


@router.get("/extra-orders", response_model=list[ExtraOrderRead])
def list_extra_orders(
    order_date: date | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return service.list_extra_orders(
        session, vendor, order_date=order_date, skip=skip, limit=limit
    )


# -------- Cancellations --------


@router.post(
    "/cancel-order",
    response_model=CancellationRead,
    status_code=status.HTTP_201_CREATED,
)
def cancel_order(
    payload: CancellationCreate,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Skip delivery for one date (daily needs and extras alike).
    """
    return service.cancel_date(session, vendor, payload)


@router.get("/cancellations", response_model=list[CancellationRead])
def list_cancellations(
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return service.list_cancellations(session, vendor, skip=skip, limit=limit)


# -------- Orders --------


@router.get("/orders", response_model=list[OrderListRead])
def list_my_orders(
    status_filter: OrderStatus | None = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    The vendor's orders, newest delivery date first.
    """
    return order_service.list_vendor_orders(
        session, vendor.id, status_filter=status_filter, skip=skip, limit=limit
    )


@router.get("/orders/{order_id}", response_model=OrderWithItemsRead)
def get_my_order(
    order_id: int,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    return order_service.get_vendor_order(session, vendor.id, order_id)


@router.post(
    "/orders/{order_id}/return",
    response_model=list[ReturnRequestRead],
    status_code=status.HTTP_201_CREATED,
)
def request_return(
    order_id: int,
    payload: ReturnCreate,
    vendor: Vendor = Depends(require_vendor),
    session: Session = Depends(get_session),
):
    """
    Create one pending return request per returned product.
    """
    return return_service.create_returns(session, vendor.id, order_id, payload)
