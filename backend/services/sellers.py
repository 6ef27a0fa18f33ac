# backend/services/sellers.py
"""
Seller Aggregator: read-only views over sales records and due entries.

A seller is not stored as an account; it is the ``seller_name`` grouping
key. Sellers without any records produce empty summaries, not errors.
"""
import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List

from sqlalchemy.orm import Session

from models.due import DueEntry
from models.sales import SalesItem, SalesRecord, Seller
from services import dues as due_ledger
from services import sales as sales_recorder
from utils.errors import ValidationError
from utils.money import money_sum, to_money

YEAR_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


@dataclass
class ProductSales:
    product_id: int
    product_name: str
    total_quantity: int = 0
    total_value: Decimal = Decimal("0.00")

    @property
    def average_price(self) -> Decimal:
        if not self.total_quantity:
            return Decimal("0.00")
        return to_money(self.total_value / self.total_quantity)


class ProductSalesAccumulator:
    """Groups sale lines by product: quantities and values are summed,
    the average price is derived when read."""

    def __init__(self):
        self._by_product: Dict[int, ProductSales] = {}

    def add(self, item: SalesItem) -> None:
        entry = self._by_product.get(item.product_id)
        if entry is None:
            # First line seen keeps its name snapshot
            entry = ProductSales(product_id=item.product_id, product_name=item.product_name)
            self._by_product[item.product_id] = entry
        entry.total_quantity += item.quantity
        entry.total_value = to_money(entry.total_value + item.total_price)

    def add_records(self, records: Iterable[SalesRecord]) -> "ProductSalesAccumulator":
        for record in records:
            for item in record.items:
                self.add(item)
        return self

    def results(self) -> List[ProductSales]:
        return list(self._by_product.values())


@dataclass
class SellerSummary:
    seller_name: str
    total_sales: Decimal
    total_quantity_sold: int
    total_due_amount: Decimal
    total_cash_amount: Decimal
    sales_records: List[SalesRecord]
    products_sold: List[ProductSales]
    outstanding_due: Decimal = Decimal("0.00")

    @property
    def record_count(self) -> int:
        return len(self.sales_records)


@dataclass
class MonthlySummary(SellerSummary):
    month: str = ""
    due_entries: List[DueEntry] = field(default_factory=list)
    dues_added: Decimal = Decimal("0.00")


@dataclass
class SellerOverviewRow:
    seller_name: str
    total_sales: Decimal
    total_quantity: int
    total_records: int


@dataclass
class SellersOverview:
    sellers: List[SellerOverviewRow]
    total_system_sales: Decimal


def _summarize(seller_name: str, records: List[SalesRecord], **extra) -> dict:
    return dict(
        seller_name=seller_name,
        total_sales=money_sum(r.total_sales_amount for r in records),
        total_quantity_sold=sum(item.quantity for r in records for item in r.items),
        total_due_amount=money_sum(r.total_due_amount for r in records),
        total_cash_amount=money_sum(r.cash_sale_amount for r in records),
        sales_records=records,
        products_sold=ProductSalesAccumulator().add_records(records).results(),
        **extra,
    )


def list_sellers(db: Session) -> List[str]:
    """Names from the seller registry, which the sales recorder fills in the
    same transaction as each seller's first sale."""
    return [name for (name,) in db.query(Seller.name).order_by(Seller.name).all()]


def seller_summary(db: Session, seller_name: str) -> SellerSummary:
    records = sales_recorder.list_sales(db, seller=seller_name) if seller_name else []
    return SellerSummary(
        **_summarize(seller_name, records),
        outstanding_due=due_ledger.total_due_for_seller(db, seller_name),
    )


def monthly_summary(db: Session, seller_name: str, year_month: str) -> MonthlySummary:
    if not year_month or not YEAR_MONTH_RE.match(year_month):
        raise ValidationError("Month must be given as YYYY-MM", field="month", month=year_month)

    def in_month(day) -> bool:
        return day is not None and day.isoformat().startswith(year_month)

    records = [
        r for r in (sales_recorder.list_sales(db, seller=seller_name) if seller_name else [])
        if in_month(r.date)
    ]
    entries = [e for e in due_ledger.dues_for_seller(db, seller_name) if in_month(e.date_added)]

    return MonthlySummary(
        **_summarize(seller_name, records),
        outstanding_due=due_ledger.total_due_for_seller(db, seller_name),
        month=year_month,
        due_entries=entries,
        dues_added=money_sum(e.due_amount for e in entries),
    )


def sellers_overview(db: Session) -> SellersOverview:
    rows = []
    for name in list_sellers(db):
        records = sales_recorder.list_sales(db, seller=name)
        rows.append(SellerOverviewRow(
            seller_name=name,
            total_sales=money_sum(r.total_sales_amount for r in records),
            total_quantity=sum(item.quantity for r in records for item in r.items),
            total_records=len(records),
        ))
    return SellersOverview(
        sellers=rows,
        total_system_sales=money_sum(row.total_sales for row in rows),
    )
