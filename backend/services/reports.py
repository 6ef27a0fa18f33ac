# backend/services/reports.py
from dataclasses import dataclass
from decimal import Decimal
from typing import List

from sqlalchemy.orm import Session

from models.product import Product
from models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from services import product_ledger, purchase_orders
from utils.money import money_sum


@dataclass
class StockReport:
    products: List[Product]
    total_buying_cost: Decimal
    total_sales_value: Decimal
    total_profit_loss: Decimal
    total_remaining_stock: int


@dataclass
class OrderHistory:
    orders: List[PurchaseOrder]
    count: int
    total_ordered_value: Decimal


def stock_report(db: Session) -> StockReport:
    products = product_ledger.list_products(db)
    return StockReport(
        products=products,
        total_buying_cost=money_sum(p.buying_cost for p in products),
        total_sales_value=money_sum(p.sales_value for p in products),
        total_profit_loss=money_sum(p.profit_loss for p in products),
        total_remaining_stock=sum(p.remaining_quantity for p in products),
    )


def order_history(db: Session) -> OrderHistory:
    # Only delivered orders count as history
    orders = purchase_orders.list_orders(db, status=PurchaseOrderStatus.DELIVERED)
    return OrderHistory(
        orders=orders,
        count=len(orders),
        total_ordered_value=money_sum(o.total_cost for o in orders),
    )
