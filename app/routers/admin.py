# app/routers/admin.py
from datetime import date

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.demand_repo import DemandRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.return_repo import ReturnRepository
from app.repositories.staff_repo import StaffRepository
from app.repositories.stats_repo import StatsRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.generation import PackingListRead
from app.schemas.return_request import (
    ReturnProcess,
    ReturnRequestAdminRead,
    ReturnRequestRead,
    ReturnStatus,
)
from app.schemas.staff import StaffAuthResponse, StaffLogin, StaffRegister
from app.schemas.stats import AdminAnalytics, AnalyticsPeriod
from app.schemas.vendor import VendorAdminDetail, VendorRead, VendorStatusUpdate
from app.services.packing_service import PackingService
from app.services.return_service import ReturnService
from app.services.staff_service import StaffService
from app.services.stats_service import StatsService
from app.services.vendor_service import VendorService

router = APIRouter(prefix="/admin", tags=["Admin"])

demand_repo = DemandRepository()
vendor_repo = VendorRepository()

staff_service = StaffService(StaffRepository())
packing_service = PackingService(demand_repo)
vendor_service = VendorService(vendor_repo, demand_repo, ProductRepository())
return_service = ReturnService(ReturnRepository(), OrderRepository())
stats_service = StatsService(StatsRepository())


# -------- Auth --------


@router.post(
    "/register",
    response_model=StaffAuthResponse,
    status_code=status.HTTP_201_CREATED,
)
def register_staff(
    payload: StaffRegister,
    session: Session = Depends(get_session),
):
    return staff_service.register(session, payload)


@router.post("/login", response_model=StaffAuthResponse)
def login_staff(
    payload: StaffLogin,
    session: Session = Depends(get_session),
):
    return staff_service.login(session, payload)


# -------- Packing --------


@router.get(
    "/daily-packing",
    response_model=PackingListRead,
    dependencies=[Depends(require_admin)],
)
def get_daily_packing(
    target_date: date | None = Query(None, alias="date"),
    session: Session = Depends(get_session),
):
    """
    Total product demand for a delivery date (defaults to today).

    Vendors that cancelled the date are excluded from the totals and
    listed under `cancelled_orders`.
    """
    return packing_service.get_packing_list(session, target_date)


# -------- Vendors --------


@router.get(
    "/vendors",
    response_model=list[VendorRead],
    dependencies=[Depends(require_admin)],
)
def list_vendors(
    search: str | None = None,
    is_active: bool | None = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    """
    List vendors.

    - `search` matches name, phone or city.
    - `status=true|false` filters by active flag.
    """
    return vendor_service.list_vendors(
        session, search=search, is_active=is_active, skip=skip, limit=limit
    )


@router.get(
    "/vendors/{vendor_id}",
    response_model=VendorAdminDetail,
    dependencies=[Depends(require_admin)],
)
def get_vendor(
    vendor_id: int,
    session: Session = Depends(get_session),
):
    return vendor_service.get_vendor_detail(session, vendor_id)


@router.put(
    "/vendors/{vendor_id}/status",
    response_model=VendorRead,
    dependencies=[Depends(require_admin)],
)
def set_vendor_status(
    vendor_id: int,
    payload: VendorStatusUpdate,
    session: Session = Depends(get_session),
):
    """
    Activate or deactivate a vendor. Inactive vendors get no orders
    and cannot log in.
    """
    return vendor_service.set_status(session, vendor_id, payload.is_active)


# -------- Returns --------


@router.get(
    "/returns",
    response_model=list[ReturnRequestAdminRead],
    dependencies=[Depends(require_admin)],
)
def list_returns(
    status_filter: ReturnStatus | None = Query(None, alias="status"),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    return return_service.list_returns(
        session, status_filter=status_filter, skip=skip, limit=limit
    )


@router.put(
    "/returns/{return_id}/process",
    response_model=ReturnRequestRead,
    dependencies=[Depends(require_admin)],
)
def process_return(
    return_id: int,
    payload: ReturnProcess,
    session: Session = Depends(get_session),
):
    return return_service.process_return(session, return_id, payload)


# -------- Analytics --------


@router.get(
    "/analytics",
    response_model=AdminAnalytics,
    dependencies=[Depends(require_admin)],
)
def get_analytics(
    period: AnalyticsPeriod = "month",
    session: Session = Depends(get_session),
):
    """
    Active vendor count, orders and revenue since the start of the
    period, plus top products and vendors.
    """
    return stats_service.get_analytics(session, period=period)
