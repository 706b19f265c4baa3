# app/schemas/generation.py
from datetime import date
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

SkipReason = Literal[
    "cancelled",
    "vendor_inactive",
    "no_daily_needs",
    "already_generated",
]


# -------- Daily order generation --------


class GenerateDailyRequest(SQLModel):
    """
    Batch trigger. target_date defaults to today.
    """

    model_config = ConfigDict(extra="forbid")

    target_date: date | None = None


class GeneratedOrderSummary(SQLModel):
    order_id: int
    vendor_id: int
    vendor_name: str
    total_amount: float
    item_count: int


class SkippedVendor(SQLModel):
    vendor_id: int
    vendor_name: str
    reason: SkipReason


class FailedVendor(SQLModel):
    vendor_id: int
    vendor_name: str
    error: str


class DailyGenerationResult(SQLModel):
    message: str
    date: date
    generated_count: int
    generated_orders: list[GeneratedOrderSummary]
    skipped: list[SkippedVendor]
    failed: list[FailedVendor]


# -------- Packing list --------


class PackingListItem(SQLModel):
    product_id: int
    product_name: str
    unit: str
    price: float
    daily_quantity: float
    extra_quantity: float
    total_quantity: float
    vendor_count: int
    vendor_names: list[str]
    vendor_ids: list[int]


class CancelledVendorEntry(SQLModel):
    vendor_id: int
    vendor_name: str
    reason: str | None


class PackingSummary(SQLModel):
    total_products: int
    total_vendors: int
    cancelled_vendors: int


class PackingListRead(SQLModel):
    date: date
    packing_list: list[PackingListItem]
    cancelled_orders: list[CancelledVendorEntry]
    summary: PackingSummary
