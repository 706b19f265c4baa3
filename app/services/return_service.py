# app/services/return_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.return_request import ReturnRequest
from app.repositories.order_repo import OrderRepository
from app.repositories.return_repo import ReturnRepository
from app.schemas.return_request import (
    ReturnCreate,
    ReturnProcess,
    ReturnRequestAdminRead,
    ReturnRequestRead,
)

logger = logging.getLogger(__name__)


class ReturnService:
    """
    Product returns against delivered (or any) vendor orders.

    Vendors create one ReturnRequest per returned product;
    admins approve or reject each pending request.
    """

    def __init__(self, repo: ReturnRepository, order_repo: OrderRepository):
        self.repo = repo
        self.order_repo = order_repo

    def create_returns(
        self,
        session: Session,
        vendor_id: int,
        order_id: int,
        payload: ReturnCreate,
    ) -> list[ReturnRequest]:
        """
        Steps:
          1. Order must exist and belong to the vendor.
          2. Every returned product must be a line of that order,
             with quantity not above the ordered quantity.
          3. Insert all rows, commit once.
        """
        order = self.order_repo.get_by_id(session, order_id)
        if not order or order.vendor_id != vendor_id:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Order not found",
            )

        ordered: dict[int, float] = {}
        for item, _product in self.order_repo.list_items_with_products(session, order.id):
            ordered[item.product_id] = ordered.get(item.product_id, 0.0) + item.quantity

        errors: list[dict[str, str]] = []
        for item in payload.items:
            if item.product_id not in ordered:
                errors.append(
                    {"product_id": str(item.product_id), "reason": "Product not in order"}
                )
            elif item.quantity > ordered[item.product_id]:
                errors.append(
                    {
                        "product_id": str(item.product_id),
                        "reason": f"Quantity exceeds ordered ({ordered[item.product_id]})",
                    }
                )

        if errors:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail={"message": "Return validation failed", "items": errors},
            )

        requests = [
            ReturnRequest(
                vendor_id=vendor_id,
                product_id=item.product_id,
                quantity=item.quantity,
                return_date=payload.return_date,
                reason=payload.reason,
                status="pending",
            )
            for item in payload.items
        ]
        requests = self.repo.create_many(session, requests)
        session.commit()
        for rr in requests:
            session.refresh(rr)

        logger.info("Vendor %s requested %d returns on order %s", vendor_id, len(requests), order.id)
        return requests

    def list_returns(
        self,
        session: Session,
        status_filter: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[ReturnRequestAdminRead]:
        rows = self.repo.list_all(session, status=status_filter, skip=skip, limit=limit)
        return [
            ReturnRequestAdminRead(
                **ReturnRequestRead.model_validate(rr).model_dump(),
                vendor_name=vendor.name,
                vendor_phone=vendor.phone,
                product_name=product.name,
                unit=product.unit,
            )
            for rr, vendor, product in rows
        ]

    def process_return(
        self,
        session: Session,
        return_id: int,
        payload: ReturnProcess,
    ) -> ReturnRequest:
        rr = self.repo.get_by_id(session, return_id)
        if not rr:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Return request not found",
            )

        if rr.status != "pending":
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Return request already {rr.status}",
            )

        rr.status = payload.status
        if payload.notes is not None:
            rr.notes = payload.notes
        return self.repo.update(session, rr)
