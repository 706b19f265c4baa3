# app/services/stats_service.py
from datetime import datetime, timedelta, timezone

from sqlmodel import Session

from app.repositories.stats_repo import StatsRepository
from app.schemas.stats import (
    AdminAnalytics,
    AnalyticsPeriod,
    AnalyticsSummary,
    TopProduct,
    TopVendor,
)


def period_start(period: AnalyticsPeriod, now: datetime) -> datetime:
    """
    Start of the analytics window:
      - week:  rolling 7 days back from `now`
      - month: first day of the current month, midnight
      - year:  January 1st of the current year, midnight
    """
    if period == "week":
        return now - timedelta(days=7)
    if period == "year":
        return now.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


class StatsService:
    """
    Orchestrates aggregated admin analytics.
    """

    def __init__(self, repo: StatsRepository):
        self.repo = repo

    def get_analytics(
        self,
        session: Session,
        period: AnalyticsPeriod = "month",
        top_n: int = 10,
    ) -> AdminAnalytics:
        since = period_start(period, datetime.now(timezone.utc))

        total_vendors = self.repo.count_active_vendors(session)
        total_orders, total_revenue = self.repo.orders_since(session, since)

        top_products = [
            TopProduct(
                product_id=product_id,
                name=name,
                order_count=int(order_count or 0),
                total_quantity=float(total_quantity or 0.0),
            )
            for product_id, name, order_count, total_quantity in self.repo.top_products(
                session, since, limit=top_n
            )
        ]

        top_vendors = [
            TopVendor(
                vendor_id=vendor_id,
                name=name,
                order_count=int(order_count or 0),
                total_spent=float(total_spent or 0.0),
            )
            for vendor_id, name, order_count, total_spent in self.repo.top_vendors(
                session, since, limit=top_n
            )
        ]

        return AdminAnalytics(
            period=period,
            summary=AnalyticsSummary(
                total_vendors=total_vendors,
                total_orders=total_orders,
                total_revenue=total_revenue,
            ),
            top_products=top_products,
            top_vendors=top_vendors,
        )
