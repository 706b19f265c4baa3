# app/services/product_service.py
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.models.product import Product
from app.repositories.product_repo import ProductRepository
from app.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger(__name__)


class ProductService:
    """
    Business logic for the product catalogue.

    Responsibilities:
      - public browsing (active products only)
      - admin CRUD and stock maintenance (enforced at router via require_admin)
      - refusing to delete products that demand or orders still reference
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    # ----- Products -----

    def list_products(
        self,
        session: Session,
        category: str | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 50,
    ) -> list[Product]:
        return self.repo.list_all(
            session, category=category, search=search, skip=skip, limit=limit
        )

    def list_categories(self, session: Session) -> list[str]:
        return self.repo.list_categories(session)

    def get_product(self, session: Session, product_id: int) -> Product:
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def get_active_product(self, session: Session, product_id: int) -> Product:
        """Public lookup: inactive products are reported as missing."""
        product = self.get_product(session, product_id)
        if not product.is_active:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        product = Product(**payload.model_dump())
        product = self.repo.create(session, product)
        logger.info("Product %s created", product.id)
        return product

    def update_product(
        self,
        session: Session,
        product_id: int,
        payload: ProductUpdate,
    ) -> Product:
        """
        Partial update of a product.

        A price change only affects orders generated afterwards;
        existing order items keep their unit_price.
        """
        product = self.get_product(session, product_id)

        updates = payload.model_dump(exclude_unset=True, exclude_none=True)
        if not updates:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="No fields to update",
            )
        for field, value in updates.items():
            setattr(product, field, value)

        return self.repo.update(session, product)

    def delete_product(self, session: Session, product_id: int) -> None:
        product = self.get_product(session, product_id)

        if self.repo.count_usage(session, product.id) > 0:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Product is referenced by daily needs, extra orders or orders; deactivate it instead",
            )

        self.repo.delete(session, product)
        logger.info("Product %s deleted", product_id)

    # ----- Stock -----

    def list_low_stock(self, session: Session) -> list[Product]:
        return self.repo.list_low_stock(session)

    def set_stock(self, session: Session, product_id: int, stock_quantity: float) -> Product:
        product = self.get_product(session, product_id)
        product.stock_quantity = stock_quantity
        return self.repo.update(session, product)
