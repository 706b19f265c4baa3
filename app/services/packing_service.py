# app/services/packing_service.py
from datetime import date

from sqlmodel import Session

from app.repositories.demand_repo import DemandRepository, ProductDemand
from app.schemas.generation import (
    CancelledVendorEntry,
    PackingListItem,
    PackingListRead,
    PackingSummary,
)


def merge_product_demand(
    daily: list[ProductDemand],
    extras: list[ProductDemand],
) -> list[PackingListItem]:
    """
    Merge standing and extra demand per product (keyed by product_id).

    For a product present in both inputs, quantities and vendor counts
    are added and vendor names concatenated as-is: a vendor with a daily
    need and an extra order for the same product is counted twice.
    """
    merged: dict[int, PackingListItem] = {}

    for row in daily:
        merged[row.product_id] = PackingListItem(
            product_id=row.product_id,
            product_name=row.product_name,
            unit=row.unit,
            price=row.price,
            daily_quantity=row.total_quantity,
            extra_quantity=0.0,
            total_quantity=row.total_quantity,
            vendor_count=row.vendor_count,
            vendor_names=list(row.vendor_names),
            vendor_ids=list(row.vendor_ids),
        )

    for row in extras:
        item = merged.get(row.product_id)
        if item is None:
            merged[row.product_id] = PackingListItem(
                product_id=row.product_id,
                product_name=row.product_name,
                unit=row.unit,
                price=row.price,
                daily_quantity=0.0,
                extra_quantity=row.total_quantity,
                total_quantity=row.total_quantity,
                vendor_count=row.vendor_count,
                vendor_names=list(row.vendor_names),
                vendor_ids=list(row.vendor_ids),
            )
            continue

        item.extra_quantity += row.total_quantity
        item.total_quantity += row.total_quantity
        item.vendor_count += row.vendor_count
        item.vendor_names = item.vendor_names + list(row.vendor_names)
        item.vendor_ids = item.vendor_ids + list(row.vendor_ids)

    return sorted(merged.values(), key=lambda i: (i.product_name, i.product_id))


class PackingService:
    """
    Admin packing list: total product demand for one delivery date.
    """

    def __init__(self, demand_repo: DemandRepository):
        self.demand_repo = demand_repo

    def get_packing_list(
        self,
        session: Session,
        target_date: date | None = None,
    ) -> PackingListRead:
        target_date = target_date or date.today()

        daily = self.demand_repo.daily_needs_grouped_by_product(session, target_date)
        extras = self.demand_repo.extra_orders_grouped_by_product(session, target_date)
        packing_list = merge_product_demand(daily, extras)

        cancelled = [
            CancelledVendorEntry(vendor_id=vendor_id, vendor_name=name, reason=reason)
            for vendor_id, name, reason in self.demand_repo.list_cancellations_for_date(
                session, target_date
            )
        ]

        vendor_ids = {vid for item in packing_list for vid in item.vendor_ids}

        return PackingListRead(
            date=target_date,
            packing_list=packing_list,
            cancelled_orders=cancelled,
            summary=PackingSummary(
                total_products=len(packing_list),
                total_vendors=len(vendor_ids),
                cancelled_vendors=len(cancelled),
            ),
        )
