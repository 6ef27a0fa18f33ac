# backend/schemas/sales.py
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
import datetime as dt
from typing import List, Optional

from utils.money import MAX_AMOUNT, MAX_ID, MAX_QUANTITY


# Single line of an incoming sale
class SalesItemCreate(BaseModel):
    product_id: int = Field(..., le=MAX_ID)
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)
    selling_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT)


# Input schema for a sale; totals are recomputed on the server
class SalesRecordCreate(BaseModel):
    seller_name: str = Field(..., min_length=1)
    items: List[SalesItemCreate] = Field(..., min_length=1)
    total_due_amount: Decimal = Field(Decimal("0"), ge=0, le=MAX_AMOUNT)
    total_sales_amount: Optional[Decimal] = Field(None, ge=0, le=MAX_AMOUNT) # Optional cross-check only
    date: dt.date


class SalesItemOut(BaseModel):
    product_id: int
    product_name: str
    quantity: int
    selling_price: float
    total_price: float

    model_config = ConfigDict(from_attributes=True)


class SalesRecordOut(BaseModel):
    id: int
    seller_name: str
    items: List[SalesItemOut]
    total_sales_amount: float
    total_due_amount: float
    cash_sale_amount: float
    date: dt.date
    created_at: Optional[dt.datetime] = None

    model_config = ConfigDict(from_attributes=True)


class SalesRecordList(BaseModel):
    items: List[SalesRecordOut]
    count: int
