# backend/schemas/product.py
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import datetime
from typing import Optional, List

from utils.money import MAX_AMOUNT, MAX_QUANTITY


# Base configuration for ORM compatibility
class ORMBase(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# Schema for creating a new product
class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    initial_stock: int = Field(..., ge=0, le=MAX_QUANTITY)
    buying_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT)
    selling_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT)


# Schema for product updates - counters are owned by the ledger and not editable
class ProductUpdate(BaseModel):
    """Schema for PUT requests - all fields optional."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    buying_price: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)
    selling_price: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT)


# Full product representation including derived figures
class ProductOut(ORMBase):
    id: int
    name: str
    initial_stock: int
    delivered_quantity: int
    sold_quantity: int
    remaining_quantity: int
    buying_price: float
    selling_price: float
    buying_cost: float
    sales_value: float
    profit_loss: float
    created_at: Optional[datetime] = None


class ProductList(BaseModel):
    items: List[ProductOut]
    count: int


class RemainingOut(BaseModel):
    product_id: int
    remaining_quantity: int
