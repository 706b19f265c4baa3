# app/services/daily_order_service.py
import logging
from dataclasses import dataclass
from datetime import date
from typing import Literal

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session

from app.models.order import Order, OrderItem
from app.models.product import Product
from app.repositories.availability import is_vendor_active_for
from app.repositories.demand_repo import DemandRepository
from app.repositories.order_repo import OrderRepository
from app.repositories.vendor_repo import VendorRepository
from app.schemas.generation import (
    DailyGenerationResult,
    FailedVendor,
    GeneratedOrderSummary,
    SkipReason,
    SkippedVendor,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DraftLine:
    product_id: int
    quantity: float
    unit_price: float
    total_price: float
    source: Literal["daily", "extra"]


@dataclass(frozen=True)
class VendorOrderDraft:
    """
    Priced demand of one vendor for one date, not yet persisted.
    """

    vendor_id: int
    order_date: date
    items: tuple[DraftLine, ...]
    total_amount: float


class OrderAlreadyGenerated(Exception):
    def __init__(self, vendor_id: int, order_date: date):
        super().__init__(f"Order already generated for vendor {vendor_id} on {order_date}")
        self.vendor_id = vendor_id
        self.order_date = order_date


def _price_line(product: Product, quantity: float, source: str) -> DraftLine:
    unit_price = float(product.price)
    return DraftLine(
        product_id=product.id,
        quantity=float(quantity),
        unit_price=unit_price,
        total_price=round(float(quantity) * unit_price, 2),
        source=source,
    )


class DailyOrderService:
    """
    Turns vendor demand into orders for a delivery date.

    Pipeline per vendor:
      1. compute_vendor_order: daily needs + extra orders for the date,
         priced at current product prices (None when nothing to generate)
      2. materialize: one Order + its OrderItems in a single transaction

    generate_daily_orders runs both steps for every active vendor that
    has daily needs. A vendor that is skipped or fails never stops the
    batch.
    """

    def __init__(
        self,
        vendor_repo: VendorRepository,
        demand_repo: DemandRepository,
        order_repo: OrderRepository,
    ):
        self.vendor_repo = vendor_repo
        self.demand_repo = demand_repo
        self.order_repo = order_repo

    # -------- Aggregation --------

    def compute_vendor_order(
        self,
        session: Session,
        vendor_id: int,
        target_date: date,
    ) -> VendorOrderDraft | None:
        """
        Priced order draft for (vendor, date), or None when:
          - the vendor cancelled the date (or is inactive)
          - the vendor has no daily needs on active products

        Extra orders alone never produce an order. Extra lines are kept
        separate from a daily-need line for the same product.
        """
        draft, _ = self._aggregate(session, vendor_id, target_date)
        return draft

    def _aggregate(
        self,
        session: Session,
        vendor_id: int,
        target_date: date,
    ) -> tuple[VendorOrderDraft | None, SkipReason | None]:
        if not is_vendor_active_for(session, vendor_id, target_date):
            if self.demand_repo.find_cancellation(session, vendor_id, target_date):
                return None, "cancelled"
            return None, "vendor_inactive"

        lines: list[DraftLine] = []

        needs = self.demand_repo.list_daily_needs(session, vendor_id, only_active=False)
        for need, product in needs:
            if not product.is_active:
                logger.debug(
                    "Vendor %s: daily need for inactive product %s excluded",
                    vendor_id,
                    product.id,
                )
                continue
            lines.append(_price_line(product, need.quantity, "daily"))

        if not lines:
            return None, "no_daily_needs"

        extras = self.demand_repo.list_extra_orders(
            session, vendor_id, target_date, only_active=False
        )
        for extra, product in extras:
            if not product.is_active:
                logger.debug(
                    "Vendor %s: extra order %s for inactive product %s excluded",
                    vendor_id,
                    extra.id,
                    product.id,
                )
                continue
            lines.append(_price_line(product, extra.quantity, "extra"))

        total = round(sum(line.total_price for line in lines), 2)
        draft = VendorOrderDraft(
            vendor_id=vendor_id,
            order_date=target_date,
            items=tuple(lines),
            total_amount=total,
        )
        return draft, None

    # -------- Materialization --------

    def materialize(
        self,
        session: Session,
        vendor_id: int,
        delivery_address: str | None,
        target_date: date,
        draft: VendorOrderDraft | None,
    ) -> Order | None:
        """
        Persist a draft as Order + OrderItems, atomically.

        Returns None for a None draft. `delivery_address` is copied onto
        the order, so later address edits do not change it.

        Raises:
            OrderAlreadyGenerated: an order for (vendor, date) exists.
            SQLAlchemyError: any other write failure (already rolled back).
        """
        if draft is None:
            return None

        if self.order_repo.get_for_vendor_date(session, vendor_id, target_date):
            raise OrderAlreadyGenerated(vendor_id, target_date)

        try:
            order = self.order_repo.create_order(
                session,
                Order(
                    vendor_id=vendor_id,
                    order_date=target_date,
                    total_amount=draft.total_amount,
                    status="pending",
                    delivery_address=delivery_address,
                ),
            )
            self.order_repo.create_items(
                session,
                [
                    OrderItem(
                        order_id=order.id,
                        product_id=line.product_id,
                        quantity=line.quantity,
                        unit_price=line.unit_price,
                        total_price=line.total_price,
                    )
                    for line in draft.items
                ],
            )
            session.commit()
        except IntegrityError:
            session.rollback()
            # A concurrent run may have won the uq_orders_vendor_date race.
            if self.order_repo.get_for_vendor_date(session, vendor_id, target_date):
                raise OrderAlreadyGenerated(vendor_id, target_date)
            raise
        except SQLAlchemyError:
            session.rollback()
            raise

        session.refresh(order)
        return order

    # -------- Batch --------

    def generate_daily_orders(
        self,
        session: Session,
        target_date: date | None = None,
    ) -> DailyGenerationResult:
        """
        Generate orders for every active vendor with daily needs.

        Only the initial vendor query can fail the whole call. Per vendor:
          - no draft / existing order -> listed in `skipped`
          - write failure             -> rolled back, listed in `failed`
        """
        target_date = target_date or date.today()
        vendors = self.vendor_repo.list_active_vendors_with_daily_needs(session)

        generated: list[GeneratedOrderSummary] = []
        skipped: list[SkippedVendor] = []
        failed: list[FailedVendor] = []

        for vendor_id, vendor_name, address in vendors:
            try:
                draft, reason = self._aggregate(session, vendor_id, target_date)
                if draft is None:
                    skipped.append(
                        SkippedVendor(vendor_id=vendor_id, vendor_name=vendor_name, reason=reason)
                    )
                    continue

                order = self.materialize(session, vendor_id, address, target_date, draft)
            except OrderAlreadyGenerated:
                skipped.append(
                    SkippedVendor(
                        vendor_id=vendor_id,
                        vendor_name=vendor_name,
                        reason="already_generated",
                    )
                )
                continue
            except SQLAlchemyError as exc:
                session.rollback()
                logger.exception(
                    "Order generation failed for vendor %s on %s", vendor_id, target_date
                )
                failed.append(
                    FailedVendor(
                        vendor_id=vendor_id,
                        vendor_name=vendor_name,
                        error=exc.__class__.__name__,
                    )
                )
                continue

            generated.append(
                GeneratedOrderSummary(
                    order_id=order.id,
                    vendor_id=vendor_id,
                    vendor_name=vendor_name,
                    total_amount=order.total_amount,
                    item_count=len(draft.items),
                )
            )

        logger.info(
            "Daily generation %s: %d generated, %d skipped, %d failed",
            target_date,
            len(generated),
            len(skipped),
            len(failed),
        )

        return DailyGenerationResult(
            message=f"Generated {len(generated)} orders for {target_date.isoformat()}",
            date=target_date,
            generated_count=len(generated),
            generated_orders=generated,
            skipped=skipped,
            failed=failed,
        )
