# backend/services/purchase_orders.py
import logging
from datetime import date
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from database import unit_of_work
from models.purchase_order import PurchaseOrder, PurchaseOrderStatus
from services import product_ledger
from utils.errors import AlreadyDelivered, NotFound, ValidationError
from utils.money import MAX_AMOUNT, MAX_QUANTITY, Number, line_total, to_money

logger = logging.getLogger(__name__)


def create_order(
    db: Session, *, product_id: int, quantity: int, buying_price: Number, today: Optional[date] = None
) -> PurchaseOrder:
    if quantity is None or not 1 <= quantity <= MAX_QUANTITY:
        raise ValidationError(f"Quantity must be between 1 and {MAX_QUANTITY}", field="quantity")
    price = to_money(buying_price, field="buying_price")
    if not 0 <= price <= MAX_AMOUNT:
        raise ValidationError(f"Buying price must be between 0 and {MAX_AMOUNT}", field="buying_price")

    product = product_ledger.get_product(db, product_id)

    order = PurchaseOrder(
        product_id=product.id,
        product_name=product.name,
        quantity=quantity,
        buying_price=price,
        total_cost=line_total(quantity, price),
        status=PurchaseOrderStatus.PENDING,
        order_date=today or date.today(),
    )
    with unit_of_work(db):
        db.add(order)
    db.refresh(order)
    logger.info("Purchase order %s created: %s x %s", order.id, order.quantity, order.product_name)
    return order


def get_order(db: Session, order_id: int) -> PurchaseOrder:
    order = db.query(PurchaseOrder).filter(PurchaseOrder.id == order_id).first()
    if not order:
        raise NotFound("Purchase order not found", field="order_id", order_id=order_id)
    return order


def list_orders(db: Session, status: Optional[PurchaseOrderStatus] = None) -> List[PurchaseOrder]:
    query = db.query(PurchaseOrder)
    if status:
        query = query.filter(PurchaseOrder.status == PurchaseOrderStatus(status))
    return query.order_by(PurchaseOrder.created_at.desc(), PurchaseOrder.id.desc()).all()


def mark_delivered(db: Session, order_id: int, today: Optional[date] = None) -> PurchaseOrder:
    """
    Flip a pending order to delivered and add its quantity to the product.

    Both writes share one transaction. The status flip is conditional on the
    order still being pending, so a second (or concurrent) call cannot add
    the same quantity twice.
    """
    order = get_order(db, order_id)
    if order.status == PurchaseOrderStatus.DELIVERED:
        raise AlreadyDelivered("Order already delivered", field="status", order_id=order.id)

    with unit_of_work(db):
        result = db.execute(
            update(PurchaseOrder)
            .where(PurchaseOrder.id == order.id, PurchaseOrder.status == PurchaseOrderStatus.PENDING)
            .values(status=PurchaseOrderStatus.DELIVERED, delivery_date=today or date.today())
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            raise AlreadyDelivered("Order already delivered", field="status", order_id=order.id)
        product_ledger.apply_delivery(db, order.product_id, order.quantity)

    db.refresh(order)
    logger.info("Purchase order %s delivered, +%s to product %s", order.id, order.quantity, order.product_id)
    return order
