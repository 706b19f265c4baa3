# app/repositories/demand_repo.py
from dataclasses import dataclass, field
from datetime import date

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.demand import CancelledOrder, DailyNeed, ExtraOrder
from app.models.product import Product
from app.models.vendor import Vendor
from app.repositories.availability import vendor_available_clause


@dataclass
class ProductDemand:
    """
    Demand for one product summed over vendors.
    """

    product_id: int
    product_name: str
    unit: str
    price: float
    total_quantity: float
    vendor_count: int
    vendor_names: list[str] = field(default_factory=list)
    vendor_ids: list[int] = field(default_factory=list)


class DemandRepository:
    """
    Data access layer for vendor demand inputs:
    daily_needs, extra_orders and cancelled_orders.

    NOTE:
      - No commits here; replacing daily needs is a multi-statement
        write and the service owns the transaction.
    """

    # ---- Daily needs ----

    def list_daily_needs(
        self,
        session: Session,
        vendor_id: int,
        only_active: bool = True,
    ) -> list[tuple[DailyNeed, Product]]:
        stmt = (
            select(DailyNeed, Product)
            .join(Product, Product.id == DailyNeed.product_id)
            .where(DailyNeed.vendor_id == vendor_id)
            .order_by(Product.name, DailyNeed.id)
        )
        if only_active:
            stmt = stmt.where(Product.is_active == True)
        return list(session.exec(stmt).all())

    def list_active_daily_needs(
        self,
        session: Session,
        vendor_id: int,
    ) -> list[tuple[DailyNeed, Product]]:
        """
        Vendor-facing view. Order generation does not use this; it reads
        list_daily_needs(only_active=False) and skips inactive products itself.
        """
        return self.list_daily_needs(session, vendor_id, only_active=True)

    def replace_daily_needs(
        self,
        session: Session,
        vendor_id: int,
        needs: list[DailyNeed],
    ) -> list[DailyNeed]:
        existing = session.exec(
            select(DailyNeed).where(DailyNeed.vendor_id == vendor_id)
        ).all()
        for need in existing:
            session.delete(need)
        # Deletes must reach the DB before the inserts (unique vendor/product).
        session.flush()

        session.add_all(needs)
        session.flush()
        return needs

    # ---- Extra orders ----

    def create_extra_order(self, session: Session, extra: ExtraOrder) -> ExtraOrder:
        session.add(extra)
        session.flush()
        session.refresh(extra)
        return extra

    def list_extra_orders(
        self,
        session: Session,
        vendor_id: int,
        order_date: date,
        only_active: bool = True,
    ) -> list[tuple[ExtraOrder, Product]]:
        stmt = (
            select(ExtraOrder, Product)
            .join(Product, Product.id == ExtraOrder.product_id)
            .where(
                ExtraOrder.vendor_id == vendor_id,
                ExtraOrder.order_date == order_date,
            )
            .order_by(ExtraOrder.id)
        )
        if only_active:
            stmt = stmt.where(Product.is_active == True)
        return list(session.exec(stmt).all())

    def list_extra_orders_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        order_date: date | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[ExtraOrder]:
        stmt = select(ExtraOrder).where(ExtraOrder.vendor_id == vendor_id)
        if order_date is not None:
            stmt = stmt.where(ExtraOrder.order_date == order_date)
        stmt = (
            stmt.order_by(ExtraOrder.order_date.desc(), ExtraOrder.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    # ---- Cancellations ----

    def find_cancellation(
        self,
        session: Session,
        vendor_id: int,
        cancel_date: date,
    ) -> CancelledOrder | None:
        stmt = select(CancelledOrder).where(
            CancelledOrder.vendor_id == vendor_id,
            CancelledOrder.cancel_date == cancel_date,
        )
        return session.exec(stmt).first()

    def create_cancellation(
        self,
        session: Session,
        cancellation: CancelledOrder,
    ) -> CancelledOrder:
        session.add(cancellation)
        session.flush()
        session.refresh(cancellation)
        return cancellation

    def list_cancellations_for_vendor(
        self,
        session: Session,
        vendor_id: int,
        skip: int = 0,
        limit: int = 50,
    ) -> list[CancelledOrder]:
        stmt = (
            select(CancelledOrder)
            .where(CancelledOrder.vendor_id == vendor_id)
            .order_by(CancelledOrder.cancel_date.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def list_cancellations_for_date(
        self,
        session: Session,
        cancel_date: date,
    ) -> list[tuple[int, str, str | None]]:
        """
        (vendor_id, vendor_name, reason) for active vendors that cancelled
        `cancel_date`.
        """
        stmt = (
            select(Vendor.id, Vendor.name, CancelledOrder.reason)
            .join(Vendor, Vendor.id == CancelledOrder.vendor_id)
            .where(
                CancelledOrder.cancel_date == cancel_date,
                Vendor.is_active == True,
            )
            .order_by(Vendor.name)
        )
        return list(session.exec(stmt).all())

    # ---- Packing aggregates ----

    def daily_needs_grouped_by_product(
        self,
        session: Session,
        target_date: date,
    ) -> list[ProductDemand]:
        """
        Standing demand per active product, summed over vendors that
        take part in `target_date`.
        """
        return self._grouped_by_product(
            session,
            DailyNeed,
            vendor_available_clause(target_date),
        )

    def extra_orders_grouped_by_product(
        self,
        session: Session,
        target_date: date,
    ) -> list[ProductDemand]:
        """
        Extra demand placed for `target_date` per active product, summed
        over vendors that take part in that date.
        """
        return self._grouped_by_product(
            session,
            ExtraOrder,
            vendor_available_clause(target_date),
            ExtraOrder.order_date == target_date,
        )

    def _grouped_by_product(
        self,
        session: Session,
        model: type[DailyNeed] | type[ExtraOrder],
        *criteria,
    ) -> list[ProductDemand]:
        qty_sum = func.coalesce(func.sum(model.quantity), 0)
        vendor_count = func.count(func.distinct(model.vendor_id))

        totals_stmt = (
            select(
                Product.id,
                Product.name,
                Product.unit,
                Product.price,
                qty_sum.label("total_quantity"),
                vendor_count.label("vendor_count"),
            )
            .select_from(model)
            .join(Product, Product.id == model.product_id)
            .join(Vendor, Vendor.id == model.vendor_id)
            .where(Product.is_active == True, *criteria)
            .group_by(Product.id, Product.name, Product.unit, Product.price)
            .order_by(Product.name, Product.id)
        )

        names_stmt = (
            select(model.product_id, Vendor.id, Vendor.name)
            .join(Vendor, Vendor.id == model.vendor_id)
            .join(Product, Product.id == model.product_id)
            .where(Product.is_active == True, *criteria)
            .distinct()
            .order_by(model.product_id, Vendor.name, Vendor.id)
        )

        names: dict[int, list[str]] = {}
        ids: dict[int, list[int]] = {}
        for product_id, vendor_id, vendor_name in session.exec(names_stmt).all():
            names.setdefault(product_id, []).append(vendor_name)
            ids.setdefault(product_id, []).append(vendor_id)

        return [
            ProductDemand(
                product_id=row.id,
                product_name=row.name,
                unit=row.unit,
                price=float(row.price),
                total_quantity=float(row.total_quantity or 0),
                vendor_count=int(row.vendor_count or 0),
                vendor_names=names.get(row.id, []),
                vendor_ids=ids.get(row.id, []),
            )
            for row in session.exec(totals_stmt).all()
        ]
