# app/services/vendor_service.py
import logging
from datetime import date

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from app.core.auth import create_access_token
from app.models.demand import CancelledOrder, DailyNeed, ExtraOrder
from app.models.vendor import Vendor
from app.repositories.demand_repo import DemandRepository
from app.repositories.product_repo import ProductRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.demand import (
    CancellationCreate,
    DailyNeedRead,
    DailyNeedsSet,
    ExtraOrderCreate,
)
from app.schemas.vendor import (
    VendorAdminDetail,
    VendorAuthResponse,
    VendorLogin,
    VendorRead,
    VendorRegister,
    VendorUpdate,
)

logger = logging.getLogger(__name__)


class VendorService:
    """
    Business logic for vendors and their demand inputs.

    Responsibilities:
      - registration / phone login
      - profile edits
      - daily needs (full replace), extra orders, date cancellations
      - admin vendor listing and status changes
    """

    def __init__(
        self,
        repo: VendorRepository,
        demand_repo: DemandRepository,
        product_repo: ProductRepository,
    ):
        self.repo = repo
        self.demand_repo = demand_repo
        self.product_repo = product_repo

    # ----- Auth -----

    @staticmethod
    def _auth_response(vendor: Vendor) -> VendorAuthResponse:
        token = create_access_token({"vendor_id": vendor.id})
        return VendorAuthResponse(vendor=VendorRead.model_validate(vendor), token=token)

    def register(self, session: Session, payload: VendorRegister) -> VendorAuthResponse:
        if self.repo.get_by_phone(session, payload.phone):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Vendor with this phone number already exists",
            )

        vendor = Vendor(**payload.model_dump())
        try:
            vendor = self.repo.create(session, vendor)
        except IntegrityError:
            session.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Vendor with this phone number already exists",
            )

        logger.info("Vendor %s registered", vendor.id)
        return self._auth_response(vendor)

    def login(self, session: Session, payload: VendorLogin) -> VendorAuthResponse:
        vendor = self.repo.get_by_phone(session, payload.phone)
        if vendor is None or not vendor.is_active:
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Vendor not found or inactive",
            )
        return self._auth_response(vendor)

    # ----- Profile -----

    def update_profile(
        self,
        session: Session,
        vendor: Vendor,
        payload: VendorUpdate,
    ) -> Vendor:
        updates = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not updates:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No fields to update",
            )
        for field, value in updates.items():
            setattr(vendor, field, value)
        return self.repo.update(session, vendor)

    # ----- Daily needs -----

    def get_daily_needs(self, session: Session, vendor: Vendor) -> list[DailyNeedRead]:
        rows = self.demand_repo.list_active_daily_needs(session, vendor.id)
        return [
            DailyNeedRead(
                id=need.id,
                product_id=product.id,
                product_name=product.name,
                unit=product.unit,
                price=product.price,
                quantity=need.quantity,
            )
            for need, product in rows
        ]

    def set_daily_needs(
        self,
        session: Session,
        vendor: Vendor,
        payload: DailyNeedsSet,
    ) -> list[DailyNeedRead]:
        """
        Replace all of the vendor's daily needs with `payload`.

        Every product must exist and be active; otherwise nothing changes.
        """
        invalid = []
        for item in payload.daily_needs:
            product = self.product_repo.get_by_id(session, item.product_id)
            if product is None or not product.is_active:
                invalid.append(item.product_id)

        if invalid:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Invalid products", "product_ids": invalid},
            )

        needs = [
            DailyNeed(vendor_id=vendor.id, product_id=item.product_id, quantity=item.quantity)
            for item in payload.daily_needs
        ]
        self.demand_repo.replace_daily_needs(session, vendor.id, needs)
        session.commit()

        return self.get_daily_needs(session, vendor)

    # ----- Extra orders -----

    def add_extra_order(
        self,
        session: Session,
        vendor: Vendor,
        payload: ExtraOrderCreate,
    ) -> ExtraOrder:
        product = self.product_repo.get_by_id(session, payload.product_id)
        if product is None or not product.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )

        extra = ExtraOrder(vendor_id=vendor.id, **payload.model_dump())
        extra = self.demand_repo.create_extra_order(session, extra)
        session.commit()
        session.refresh(extra)
        return extra

    def list_extra_orders(
        self,
        session: Session,
        vendor: Vendor,
        order_date: date | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[ExtraOrder]:
        return self.demand_repo.list_extra_orders_for_vendor(
            session, vendor.id, order_date=order_date, skip=skip, limit=limit
        )

    # ----- Cancellations -----

    def cancel_date(
        self,
        session: Session,
        vendor: Vendor,
        payload: CancellationCreate,
    ) -> CancelledOrder:
        """
        Cancel delivery for one date. At most one cancellation per date.
        """
        if self.demand_repo.find_cancellation(session, vendor.id, payload.cancel_date):
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Order already cancelled for this date",
            )

        cancellation = CancelledOrder(
            vendor_id=vendor.id,
            cancel_date=payload.cancel_date,
            reason=payload.reason,
        )
        try:
            cancellation = self.demand_repo.create_cancellation(session, cancellation)
            session.commit()
        except IntegrityError:
            session.rollback()
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail="Order already cancelled for this date",
            )

        session.refresh(cancellation)
        logger.info("Vendor %s cancelled %s", vendor.id, payload.cancel_date)
        return cancellation

    def list_cancellations(
        self,
        session: Session,
        vendor: Vendor,
        skip: int = 0,
        limit: int = 50,
    ) -> list[CancelledOrder]:
        return self.demand_repo.list_cancellations_for_vendor(
            session, vendor.id, skip=skip, limit=limit
        )

    # ----- Admin operations -----

    def list_vendors(
        self,
        session: Session,
        search: str | None = None,
        is_active: bool | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Vendor]:
        return self.repo.list_all(
            session, search=search, is_active=is_active, skip=skip, limit=limit
        )

    def get_vendor(self, session: Session, vendor_id: int) -> Vendor:
        vendor = self.repo.get_by_id(session, vendor_id)
        if not vendor:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Vendor not found",
            )
        return vendor

    def get_vendor_detail(self, session: Session, vendor_id: int) -> VendorAdminDetail:
        vendor = self.get_vendor(session, vendor_id)
        return VendorAdminDetail(
            **VendorRead.model_validate(vendor).model_dump(),
            total_orders=self.repo.count_orders(session, vendor.id),
            daily_needs_count=self.repo.count_daily_needs(session, vendor.id),
            total_payments=self.repo.total_payments(session, vendor.id),
        )

    def set_status(self, session: Session, vendor_id: int, is_active: bool) -> Vendor:
        vendor = self.get_vendor(session, vendor_id)
        vendor.is_active = is_active
        vendor = self.repo.update(session, vendor)
        logger.info("Vendor %s is_active=%s", vendor.id, is_active)
        return vendor
