# app/repositories/return_repo.py
from sqlmodel import Session, select

from app.models.product import Product
from app.models.return_request import ReturnRequest
from app.models.vendor import Vendor


class ReturnRepository:
    """
    Data access layer for return_requests.

    NOTE:
      - create_many does not commit; one vendor request can span
        several rows and the service commits them together.
    """

    def get_by_id(self, session: Session, return_id: int) -> ReturnRequest | None:
        return session.get(ReturnRequest, return_id)

    def create_many(
        self,
        session: Session,
        requests: list[ReturnRequest],
    ) -> list[ReturnRequest]:
        session.add_all(requests)
        session.flush()
        for rr in requests:
            session.refresh(rr)
        return requests

    def list_all(
        self,
        session: Session,
        status: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[tuple[ReturnRequest, Vendor, Product]]:
        stmt = (
            select(ReturnRequest, Vendor, Product)
            .join(Vendor, Vendor.id == ReturnRequest.vendor_id)
            .join(Product, Product.id == ReturnRequest.product_id)
        )
        if status:
            stmt = stmt.where(ReturnRequest.status == status)
        stmt = (
            stmt.order_by(ReturnRequest.created_at.desc(), ReturnRequest.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(session.exec(stmt).all())

    def update(self, session: Session, rr: ReturnRequest) -> ReturnRequest:
        session.add(rr)
        session.commit()
        session.refresh(rr)
        return rr
