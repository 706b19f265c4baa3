# app/schemas/stats.py
from typing import Literal

from pydantic import ConfigDict
from sqlmodel import SQLModel

AnalyticsPeriod = Literal["week", "month", "year"]


class AnalyticsSummary(SQLModel):
    """
    Headline counters for the selected period.
    """
    model_config = ConfigDict(extra="forbid")

    total_vendors: int
    total_orders: int
    total_revenue: float


class TopProduct(SQLModel):
    """
    Aggregated order-item stats for top products.
    """
    model_config = ConfigDict(extra="forbid")

    product_id: int
    name: str
    order_count: int
    total_quantity: float


class TopVendor(SQLModel):
    model_config = ConfigDict(extra="forbid")

    vendor_id: int
    name: str
    order_count: int
    total_spent: float


class AdminAnalytics(SQLModel):
    """
    Full payload for the admin analytics view.
    """
    model_config = ConfigDict(extra="forbid")

    period: AnalyticsPeriod
    summary: AnalyticsSummary
    top_products: list[TopProduct]
    top_vendors: list[TopVendor]
