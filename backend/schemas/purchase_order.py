# backend/schemas/purchase_order.py
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import date, datetime
from typing import List, Optional

from models.purchase_order import PurchaseOrderStatus
from utils.money import MAX_AMOUNT, MAX_ID, MAX_QUANTITY


# Input schema for a new purchase order
class PurchaseOrderCreate(BaseModel):
    product_id: int = Field(..., le=MAX_ID)
    quantity: int = Field(..., ge=1, le=MAX_QUANTITY)
    buying_price: Decimal = Field(..., ge=0, le=MAX_AMOUNT)


# Output schema representing a purchase order
class PurchaseOrderOut(BaseModel):
    id: int
    product_id: int
    product_name: str
    quantity: int
    buying_price: float
    total_cost: float
    status: PurchaseOrderStatus
    order_date: date
    delivery_date: Optional[date] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class PurchaseOrderList(BaseModel):
    items: List[PurchaseOrderOut]
    count: int
