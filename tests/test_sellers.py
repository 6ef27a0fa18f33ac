from datetime import date
from decimal import Decimal

import pytest

from helpers import line
from models.sales import SalesRecord, Seller
from services import dues, sales, sellers
from utils.errors import InsufficientStock, ValidationError


@pytest.fixture
def history(db, widget, gadget):
    sales.create_sale(
        db, seller_name="Acme", items=[line(widget, 10, "5.00"), line(gadget, 2, "12.00")],
        total_due_amount="20.00", sale_date=date(2026, 9, 3),
    )
    sales.create_sale(
        db, seller_name="Acme", items=[line(widget, 10, "6.00")],
        sale_date=date(2026, 10, 1),
    )
    sales.create_sale(db, seller_name="Bolt", items=[line(widget, 1, "5.00")], sale_date=date(2026, 10, 1))
    dues.create_due(db, seller_name="Acme", shop_name="CornerStore", due_amount="25.00", date_added=date(2026, 9, 20))
    dues.create_due(db, seller_name="Acme", shop_name="Night Market", due_amount="4.50", date_added=date(2026, 10, 2))


def test_list_sellers(db, history):
    assert sellers.list_sellers(db) == ["Acme", "Bolt"]


def test_list_sellers_matches_recorded_sales(db, history, widget):
    # A rejected sale must not leave its seller behind in the registry
    with pytest.raises(InsufficientStock):
        sales.create_sale(db, seller_name="Cobalt", items=[line(widget, 1000)], sale_date=date(2026, 10, 1))

    recorded = sorted({r.seller_name for r in db.query(SalesRecord).all()})
    assert sellers.list_sellers(db) == recorded == ["Acme", "Bolt"]
    assert [s.name for s in db.query(Seller).order_by(Seller.name)] == ["Acme", "Bolt"]


def test_seller_summary_groups_products(db, history, widget, gadget):
    summary = sellers.seller_summary(db, "Acme")

    assert summary.total_sales == Decimal("134.00")
    assert summary.total_quantity_sold == 22
    assert summary.total_due_amount == Decimal("20.00")
    assert summary.total_cash_amount == Decimal("114.00")
    assert summary.outstanding_due == Decimal("29.50")
    assert summary.record_count == 2

    by_id = {p.product_id: p for p in summary.products_sold}
    assert by_id[widget.id].total_quantity == 20
    assert by_id[widget.id].total_value == Decimal("110.00")
    assert by_id[widget.id].average_price == Decimal("5.50")
    assert by_id[gadget.id].total_quantity == 2
    assert by_id[gadget.id].average_price == Decimal("12.00")


def test_summary_of_unknown_seller_is_empty(db, history):
    summary = sellers.seller_summary(db, "Nobody")
    assert summary.sales_records == []
    assert summary.products_sold == []
    assert summary.total_sales == Decimal("0.00")
    assert summary.total_quantity_sold == 0


def test_monthly_summary_filters_records_and_dues(db, history, widget):
    month = sellers.monthly_summary(db, "Acme", "2026-10")

    assert month.month == "2026-10"
    assert month.record_count == 1
    assert month.total_sales == Decimal("60.00")
    assert month.total_quantity_sold == 10
    assert month.total_due_amount == Decimal("0.00")
    assert [p.product_id for p in month.products_sold] == [widget.id]
    assert [e.shop_name for e in month.due_entries] == ["Night Market"]
    assert month.dues_added == Decimal("4.50")

    september = sellers.monthly_summary(db, "Acme", "2026-09")
    assert september.total_sales == Decimal("74.00")
    assert september.total_due_amount == Decimal("20.00")
    assert september.dues_added == Decimal("25.00")


def test_empty_month_is_not_an_error(db, history):
    month = sellers.monthly_summary(db, "Acme", "2025-01")
    assert month.record_count == 0
    assert month.products_sold == []
    assert month.dues_added == Decimal("0.00")


@pytest.mark.parametrize("bad", ["2026-13", "2026-1", "26-10", "", "2026/10"])
def test_monthly_summary_rejects_bad_month(db, bad):
    with pytest.raises(ValidationError):
        sellers.monthly_summary(db, "Acme", bad)


def test_sellers_overview(db, history):
    overview = sellers.sellers_overview(db)

    assert [(r.seller_name, r.total_records, r.total_quantity) for r in overview.sellers] == [
        ("Acme", 2, 22),
        ("Bolt", 1, 1),
    ]
    assert overview.total_system_sales == Decimal("139.00")


def test_accumulator_keeps_first_name_snapshot():
    from types import SimpleNamespace

    acc = sellers.ProductSalesAccumulator()
    acc.add(SimpleNamespace(product_id=1, product_name="Old", quantity=2, total_price=Decimal("3.00")))
    acc.add(SimpleNamespace(product_id=1, product_name="New", quantity=1, total_price=Decimal("1.00")))

    (entry,) = acc.results()
    assert entry.product_name == "Old"
    assert entry.total_quantity == 3
    assert entry.average_price == Decimal("1.33")
