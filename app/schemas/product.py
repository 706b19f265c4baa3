# app/schemas/product.py
from datetime import date, datetime

from pydantic import ConfigDict, field_validator
from sqlmodel import SQLModel, Field


class ProductBase(SQLModel):
    """
    Shared fields for create/read.

    Validation:
      - name, unit, category must not be blank
      - price and stock values must be >= 0
    """

    name: str = Field(max_length=100)
    description: str | None = None
    unit: str = Field(max_length=20)
    price: float = Field(ge=0)
    stock_quantity: float = Field(ge=0)
    min_stock_level: float = Field(default=0.0, ge=0)
    category: str = Field(max_length=50)
    expiry_date: date | None = None

    @field_validator("name", "unit", "category")
    @classmethod
    def not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ProductCreate(ProductBase):
    model_config = ConfigDict(extra="forbid")


class ProductUpdate(SQLModel):
    """
    Partial update. Any field left as None is unchanged.
    """

    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(default=None, max_length=100)
    description: str | None = None
    unit: str | None = Field(default=None, max_length=20)
    price: float | None = Field(default=None, ge=0)
    stock_quantity: float | None = Field(default=None, ge=0)
    min_stock_level: float | None = Field(default=None, ge=0)
    category: str | None = Field(default=None, max_length=50)
    expiry_date: date | None = None
    is_active: bool | None = None

    @field_validator("name", "unit", "category")
    @classmethod
    def not_empty(cls, v: str | None) -> str | None:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty")
        return v


class ProductStockUpdate(SQLModel):
    model_config = ConfigDict(extra="forbid")

    stock_quantity: float = Field(ge=0)


class ProductRead(SQLModel):
    id: int
    name: str
    description: str | None
    unit: str
    price: float
    stock_quantity: float
    min_stock_level: float
    category: str | None
    expiry_date: date | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
