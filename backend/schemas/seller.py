# backend/schemas/seller.py
from pydantic import BaseModel
from typing import List

from schemas.due import DueEntryOut
from schemas.product import ORMBase
from schemas.sales import SalesRecordOut


class SellerList(BaseModel):
    items: List[str]
    count: int

# Per-product grouping of a seller's sale lines
class ProductSalesOut(ORMBase):
    product_id: int
    product_name: str
    total_quantity: int
    total_value: float
    average_price: float

class SellerSummaryOut(ORMBase):
    seller_name: str
    total_sales: float
    total_quantity_sold: int
    total_due_amount: float
    total_cash_amount: float
    outstanding_due: float
    record_count: int
    sales_records: List[SalesRecordOut]
    products_sold: List[ProductSalesOut]

class MonthlySummaryOut(SellerSummaryOut):
    month: str
    due_entries: List[DueEntryOut]
    dues_added: float

class SellerOverviewRowOut(ORMBase):
    seller_name: str
    total_sales: float
    total_quantity: int
    total_records: int

class SellersOverviewOut(ORMBase):
    sellers: List[SellerOverviewRowOut]
    total_system_sales: float
