# app/repositories/product_repo.py
from sqlalchemy import func, or_
from sqlmodel import Session, select

from app.models.demand import DailyNeed, ExtraOrder
from app.models.order import OrderItem
from app.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    """

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def list_all(
        self,
        session: Session,
        category: str | None = None,
        search: str | None = None,
        skip: int = 0,
        limit: int = 50,
        only_active: bool = True,
    ) -> list[Product]:
        stmt = select(Product)
        if only_active:
            stmt = stmt.where(Product.is_active == True)
        if category:
            stmt = stmt.where(Product.category == category)
        if search:
            pattern = f"%{search}%"
            stmt = stmt.where(
                or_(Product.name.ilike(pattern), Product.description.ilike(pattern))
            )
        stmt = stmt.order_by(Product.name, Product.id).offset(skip).limit(limit)
        return list(session.exec(stmt).all())

    def list_categories(self, session: Session) -> list[str]:
        stmt = (
            select(Product.category)
            .where(Product.is_active == True, Product.category.is_not(None))
            .distinct()
            .order_by(Product.category)
        )
        return list(session.exec(stmt).all())

    def list_low_stock(self, session: Session) -> list[Product]:
        stmt = (
            select(Product)
            .where(
                Product.is_active == True,
                Product.stock_quantity <= Product.min_stock_level,
            )
            .order_by(Product.stock_quantity.asc(), Product.id)
        )
        return list(session.exec(stmt).all())

    def count_usage(self, session: Session, product_id: int) -> int:
        """
        Number of daily needs, extra orders and order items
        referencing the product.
        """
        total = 0
        for model in (DailyNeed, ExtraOrder, OrderItem):
            stmt = select(func.count(model.id)).where(model.product_id == product_id)
            total += int(session.exec(stmt).one() or 0)
        return total

    def create(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def update(self, session: Session, product: Product) -> Product:
        session.add(product)
        session.commit()
        session.refresh(product)
        return product

    def delete(self, session: Session, product: Product) -> None:
        session.delete(product)
        session.commit()
