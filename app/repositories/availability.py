# app/repositories/availability.py
from datetime import date

from sqlalchemy import and_, exists
from sqlalchemy.sql.elements import ColumnElement
from sqlmodel import Session, select

from app.models.demand import CancelledOrder
from app.models.vendor import Vendor


def vendor_available_clause(target_date: date) -> ColumnElement[bool]:
    """
    SQL predicate: the vendor row in the enclosing query is active and
    has NOT cancelled `target_date`.

    This is the single definition of "vendor takes part in this date".
    Order generation (through `is_vendor_active_for`) and the packing
    list queries both filter with it, so a cancellation suppresses the
    order and the packing demand at the same time.

    The enclosing statement must have `vendors` in its FROM clause;
    the EXISTS subquery correlates on Vendor.id.
    """
    cancelled = exists().where(
        CancelledOrder.vendor_id == Vendor.id,
        CancelledOrder.cancel_date == target_date,
    )
    return and_(Vendor.is_active == True, ~cancelled)


def is_vendor_active_for(session: Session, vendor_id: int, target_date: date) -> bool:
    stmt = select(Vendor.id).where(
        Vendor.id == vendor_id,
        vendor_available_clause(target_date),
    )
    return session.exec(stmt).first() is not None
