# app/routers/products.py
from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.core.auth import require_admin
from app.database import get_session
from app.repositories.product_repo import ProductRepository
from app.schemas.product import (
    ProductCreate,
    ProductRead,
    ProductStockUpdate,
    ProductUpdate,
)
from app.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


# -------- Public endpoints --------


@router.get("", response_model=list[ProductRead])
def list_products(
    category: str | None = None,
    search: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
    session: Session = Depends(get_session),
):
    """
    List active products.

    - Public endpoint.
    - `search` matches name or description (case-insensitive).
    """
    return service.list_products(
        session, category=category, search=search, skip=skip, limit=limit
    )


@router.get("/categories/list", response_model=list[str])
def list_categories(session: Session = Depends(get_session)):
    """Distinct categories of active products."""
    return service.list_categories(session)


# -------- Admin endpoints --------


@router.get(
    "/admin/low-stock",
    response_model=list[ProductRead],
    dependencies=[Depends(require_admin)],
)
def list_low_stock(session: Session = Depends(get_session)):
    """
    Active products at or below their minimum stock level.
    """
    return service.list_low_stock(session)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product (admin only).
    """
    return service.create_product(session, payload)


@router.put(
    "/{product_id}",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def update_product(
    product_id: int,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Update an existing product (admin only).
    """
    return service.update_product(session, product_id, payload)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_200_OK,
    dependencies=[Depends(require_admin)],
)
def delete_product(
    product_id: int,
    session: Session = Depends(get_session),
) -> dict[str, str]:
    """
    Delete an unused product (admin only).

    Products still referenced by daily needs, extra orders or orders
    must be deactivated instead.
    """
    service.delete_product(session, product_id)
    return {"message": "Product deleted successfully"}


@router.put(
    "/{product_id}/stock",
    response_model=ProductRead,
    dependencies=[Depends(require_admin)],
)
def update_stock(
    product_id: int,
    payload: ProductStockUpdate,
    session: Session = Depends(get_session),
):
    return service.set_stock(session, product_id, payload.stock_quantity)


# -------- Public detail --------


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: int,
    session: Session = Depends(get_session),
):
    """
    Get a single active product by id.

    - Public endpoint.
    """
    return service.get_active_product(session, product_id)
