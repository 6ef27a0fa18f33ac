from decimal import Decimal

import pytest

from helpers import line
from models.sales import SalesRecord, Seller
from services import product_ledger, sales
from utils.errors import InsufficientStock, InvalidAmount, NotFound, ValidationError


def test_sale_splits_cash_and_due(db, widget, sale_day):
    record = sales.create_sale(
        db, seller_name="Acme", items=[line(widget, 30, "5.00")],
        total_due_amount="50.00", sale_date=sale_day,
    )

    assert record.total_sales_amount == Decimal("150.00")
    assert record.total_due_amount == Decimal("50.00")
    assert record.cash_sale_amount == Decimal("100.00")
    assert record.cash_sale_amount + record.total_due_amount == record.total_sales_amount
    assert record.items[0].product_name == "Widget"
    assert record.items[0].total_price == Decimal("150.00")
    assert product_ledger.remaining(db, widget.id) == 70


def test_oversized_sale_is_rejected_and_stock_unchanged(db, widget, sale_day):
    sales.create_sale(db, seller_name="Acme", items=[line(widget, 30)], sale_date=sale_day)

    with pytest.raises(InsufficientStock) as err:
        sales.create_sale(db, seller_name="Acme", items=[line(widget, 71)], sale_date=sale_day)

    assert err.value.available == 70
    assert err.value.requested == 71
    assert err.value.product_name == "Widget"
    assert product_ledger.remaining(db, widget.id) == 70
    assert db.query(SalesRecord).count() == 1


def test_one_bad_line_rejects_whole_sale(db, widget, gadget, sale_day):
    with pytest.raises(InsufficientStock):
        sales.create_sale(
            db, seller_name="Acme", items=[line(widget, 10), line(gadget, 11)], sale_date=sale_day
        )

    assert product_ledger.remaining(db, widget.id) == 100
    assert product_ledger.remaining(db, gadget.id) == 10
    assert db.query(SalesRecord).count() == 0
    assert db.query(Seller).count() == 0


def test_lines_for_same_product_are_checked_together(db, gadget, sale_day):
    with pytest.raises(InsufficientStock) as err:
        sales.create_sale(db, seller_name="Acme", items=[line(gadget, 6), line(gadget, 5)], sale_date=sale_day)
    assert err.value.requested == 11
    assert err.value.available == 10

    record = sales.create_sale(db, seller_name="Acme", items=[line(gadget, 6), line(gadget, 4)], sale_date=sale_day)
    assert [i.quantity for i in record.items] == [6, 4]
    assert product_ledger.remaining(db, gadget.id) == 0


def test_unknown_product_is_not_found(db, widget, sale_day):
    with pytest.raises(NotFound) as err:
        sales.create_sale(db, seller_name="Acme", items=[line(widget, 1), line(999, 1, "1.00")], sale_date=sale_day)
    assert err.value.details["product_id"] == 999
    assert product_ledger.remaining(db, widget.id) == 100


def test_due_cannot_exceed_total(db, widget, sale_day):
    with pytest.raises(InvalidAmount):
        sales.create_sale(
            db, seller_name="Acme", items=[line(widget, 2, "5.00")], total_due_amount="10.01", sale_date=sale_day
        )
    assert product_ledger.remaining(db, widget.id) == 100


def test_full_credit_sale_has_zero_cash(db, widget, sale_day):
    record = sales.create_sale(
        db, seller_name="Acme", items=[line(widget, 2, "5.00")], total_due_amount="10.00", sale_date=sale_day
    )
    assert record.cash_sale_amount == Decimal("0.00")


def test_client_total_must_match(db, widget, sale_day):
    with pytest.raises(InvalidAmount) as err:
        sales.create_sale(
            db, seller_name="Acme", items=[line(widget, 3, "5.00")],
            total_sales_amount="14.00", sale_date=sale_day,
        )
    assert err.value.field == "total_sales_amount"

    record = sales.create_sale(
        db, seller_name="Acme", items=[line(widget, 3, "5.00")],
        total_sales_amount="15", sale_date=sale_day,
    )
    assert record.total_sales_amount == Decimal("15.00")


def test_totals_have_no_rounding_drift(db, widget, gadget, sale_day):
    record = sales.create_sale(
        db, seller_name="Acme",
        items=[line(widget, 3, "0.10"), line(gadget, 7, "0.70"), line(widget, 1, "0.20")],
        total_due_amount="1.33", sale_date=sale_day,
    )
    assert record.total_sales_amount == Decimal("5.40")
    assert record.cash_sale_amount == Decimal("4.07")
    assert record.cash_sale_amount + record.total_due_amount == record.total_sales_amount


@pytest.mark.parametrize("seller", ["", "   "])
def test_seller_name_required(db, widget, sale_day, seller):
    with pytest.raises(ValidationError):
        sales.create_sale(db, seller_name=seller, items=[line(widget, 1)], sale_date=sale_day)


def test_items_required(db, sale_day):
    with pytest.raises(ValidationError):
        sales.create_sale(db, seller_name="Acme", items=[], sale_date=sale_day)


def test_seller_registered_once(db, widget, sale_day):
    sales.create_sale(db, seller_name=" Acme ", items=[line(widget, 1)], sale_date=sale_day)
    sales.create_sale(db, seller_name="Acme", items=[line(widget, 1)], sale_date=sale_day)

    assert [s.name for s in db.query(Seller).all()] == ["Acme"]
    assert [r.seller_name for r in sales.list_sales(db)] == ["Acme", "Acme"]


def test_list_sales_filters_by_seller(db, widget, sale_day):
    a = sales.create_sale(db, seller_name="Acme", items=[line(widget, 1)], sale_date=sale_day)
    b = sales.create_sale(db, seller_name="Bolt", items=[line(widget, 1)], sale_date=sale_day)

    assert [r.id for r in sales.list_sales(db)] == [b.id, a.id]
    assert [r.id for r in sales.list_sales(db, seller="Acme")] == [a.id]
    assert sales.get_sale(db, b.id).seller_name == "Bolt"
    with pytest.raises(NotFound):
        sales.get_sale(db, 1000)
