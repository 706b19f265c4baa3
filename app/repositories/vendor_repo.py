# app/repositories/vendor_repo.py
from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.models.demand import DailyNeed
from app.models.order import Order
from app.models.payment import Payment
from app.models.vendor import Vendor


class VendorRepository:
    """
    Data access layer for Vendor.

    Responsibilities:
      - Pure DB operations (CRUD + queries)
      - No FastAPI, no HTTP, no business logic
    """

    # ----- Basic CRUD -----

    def get_by_id(self, session: Session, vendor_id: int) -> Vendor | None:
        """Return a Vendor by primary key, or None if not found."""
        return session.get(Vendor, vendor_id)

    def get_by_phone(self, session: Session, phone: str) -> Vendor | None:
        """Return a Vendor by unique phone, or None if not found."""
        stmt = select(Vendor).where(Vendor.phone == phone)
        return session.exec(stmt).first()

    def list_all(
        self,
        session: Session,
        search: str | None = None,
        is_active: bool | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Vendor]:
        """
        Paginated vendor listing.

        Args:
            search: case-insensitive match on name, phone or city
            is_active: filter by status; None returns both
        """
        stmt = select(Vendor)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(
                    Vendor.name.ilike(pattern),
                    Vendor.phone.ilike(pattern),
                    Vendor.city.ilike(pattern),
                )
            )
        if is_active is not None:
            stmt = stmt.where(Vendor.is_active == is_active)
        stmt = stmt.order_by(Vendor.created_at.desc(), Vendor.id.desc()).offset(skip).limit(limit)
        return list(session.exec(stmt).all())

    def list_active_by_ids(self, session: Session, vendor_ids: list[int]) -> list[Vendor]:
        """Active vendors among `vendor_ids`; unknown ids are ignored."""
        if not vendor_ids:
            return []
        stmt = (
            select(Vendor)
            .where(Vendor.id.in_(vendor_ids), Vendor.is_active == True)
            .order_by(Vendor.id)
        )
        return list(session.exec(stmt).all())

    def create(self, session: Session, vendor: Vendor) -> Vendor:
        """Insert a new Vendor and return the persisted row."""
        session.add(vendor)
        session.commit()
        session.refresh(vendor)
        return vendor

    def update(self, session: Session, vendor: Vendor) -> Vendor:
        """Persist changes to an existing Vendor."""
        session.add(vendor)
        session.commit()
        session.refresh(vendor)
        return vendor

    # ----- Generation input -----

    def list_active_vendors_with_daily_needs(
        self,
        session: Session,
    ) -> list[tuple[int, str, str | None]]:
        """
        (id, name, address) of active vendors owning at least one daily need.
        """
        stmt = (
            select(Vendor.id, Vendor.name, Vendor.address)
            .join(DailyNeed, DailyNeed.vendor_id == Vendor.id)
            .where(Vendor.is_active == True)
            .distinct()
            .order_by(Vendor.id)
        )
        return list(session.exec(stmt).all())

    # ----- Admin counters -----

    def count_orders(self, session: Session, vendor_id: int) -> int:
        stmt = select(func.count(Order.id)).where(Order.vendor_id == vendor_id)
        return int(session.exec(stmt).one() or 0)

    def count_daily_needs(self, session: Session, vendor_id: int) -> int:
        stmt = select(func.count(DailyNeed.id)).where(DailyNeed.vendor_id == vendor_id)
        return int(session.exec(stmt).one() or 0)

    def total_payments(self, session: Session, vendor_id: int) -> float:
        stmt = select(func.coalesce(func.sum(Payment.amount), 0.0)).where(
            Payment.vendor_id == vendor_id
        )
        return float(session.exec(stmt).one() or 0.0)
