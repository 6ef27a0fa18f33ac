# schemas/reports.py
from typing import List
from pydantic import BaseModel, ConfigDict

from schemas.product import ProductOut
from schemas.purchase_order import PurchaseOrderOut

# Stock analytics across all products
class StockReportOut(BaseModel):
    products: List[ProductOut]
    total_buying_cost: float
    total_sales_value: float
    total_profit_loss: float
    total_remaining_stock: int

    model_config = ConfigDict(from_attributes=True)

# Delivered purchase orders
class OrderHistoryOut(BaseModel):
    orders: List[PurchaseOrderOut]
    count: int
    total_ordered_value: float

    model_config = ConfigDict(from_attributes=True)
