from datetime import date
from decimal import Decimal

import pytest

from models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from services import product_ledger, purchase_orders
from utils.errors import AlreadyDelivered, NotFound, ValidationError


def test_create_order_is_pending_with_snapshot(db, widget):
    order = purchase_orders.create_order(
        db, product_id=widget.id, quantity=10, buying_price="1.25", today=date(2026, 10, 2)
    )

    assert order.status == PurchaseOrderStatus.PENDING
    assert order.product_name == "Widget"
    assert order.total_cost == Decimal("12.50")
    assert order.order_date == date(2026, 10, 2)
    assert order.delivery_date is None
    # Creating an order does not touch stock
    assert product_ledger.remaining(db, widget.id) == 100


def test_create_order_for_unknown_product(db):
    with pytest.raises(NotFound):
        purchase_orders.create_order(db, product_id=404, quantity=1, buying_price=1)
    assert db.query(PurchaseOrder).count() == 0


@pytest.mark.parametrize("quantity, price", [(0, 1), (-3, 1), (1, -1)])
def test_create_order_rejects_bad_input(db, widget, quantity, price):
    with pytest.raises(ValidationError):
        purchase_orders.create_order(db, product_id=widget.id, quantity=quantity, buying_price=price)


def test_product_name_snapshot_survives_rename(db, widget):
    order = purchase_orders.create_order(db, product_id=widget.id, quantity=1, buying_price=2)
    product_ledger.update_product(db, widget.id, name="Renamed")
    assert purchase_orders.get_order(db, order.id).product_name == "Widget"


def test_mark_delivered_adds_quantity_once(db, widget):
    order = purchase_orders.create_order(db, product_id=widget.id, quantity=40, buying_price="1.90")

    delivered = purchase_orders.mark_delivered(db, order.id, today=date(2026, 10, 5))
    assert delivered.status == PurchaseOrderStatus.DELIVERED
    assert delivered.delivery_date == date(2026, 10, 5)

    with pytest.raises(AlreadyDelivered):
        purchase_orders.mark_delivered(db, order.id)

    db.refresh(widget)
    assert widget.delivered_quantity == 140
    assert widget.remaining_quantity == 140
    assert purchase_orders.get_order(db, order.id).delivery_date == date(2026, 10, 5)


def test_mark_delivered_unknown_order(db):
    with pytest.raises(NotFound):
        purchase_orders.mark_delivered(db, 9)


def test_delivery_for_deleted_product_leaves_order_pending(db, widget):
    order = purchase_orders.create_order(db, product_id=widget.id, quantity=5, buying_price=2)
    product_ledger.delete_product(db, widget.id)

    with pytest.raises(NotFound):
        purchase_orders.mark_delivered(db, order.id)

    assert purchase_orders.get_order(db, order.id).status == PurchaseOrderStatus.PENDING


def test_list_orders_by_status(db, widget, gadget):
    first = purchase_orders.create_order(db, product_id=widget.id, quantity=1, buying_price=2)
    second = purchase_orders.create_order(db, product_id=gadget.id, quantity=2, buying_price=7)
    purchase_orders.mark_delivered(db, first.id)

    assert [o.id for o in purchase_orders.list_orders(db)] == [second.id, first.id]
    assert [o.id for o in purchase_orders.list_orders(db, status=PurchaseOrderStatus.PENDING)] == [second.id]
    assert [o.id for o in purchase_orders.list_orders(db, status="delivered")] == [first.id]


def test_order_delivered_elsewhere_after_read_is_not_applied(db, session_factory, widget, monkeypatch):
    order = purchase_orders.create_order(db, product_id=widget.id, quantity=25, buying_price=2)
    read_order = purchase_orders.get_order

    def read_then_deliver_in_other_session(session, order_id):
        loaded = read_order(session, order_id)
        other = session_factory()
        try:
            other.query(PurchaseOrder).filter(PurchaseOrder.id == order_id).update(
                {PurchaseOrder.status: PurchaseOrderStatus.DELIVERED}, synchronize_session=False
            )
            other.commit()
        finally:
            other.close()
        return loaded

    monkeypatch.setattr(purchase_orders, "get_order", read_then_deliver_in_other_session)

    with pytest.raises(AlreadyDelivered):
        purchase_orders.mark_delivered(db, order.id)

    db.refresh(widget)
    assert widget.delivered_quantity == 100
