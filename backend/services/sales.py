# backend/services/sales.py
"""
Sales Recorder.

A sale is validated in full before anything is written: every product must
exist, the summed quantity per product must fit its remaining stock, and the
due part cannot exceed the recomputed total. Only then are the record, its
items, the sold counters and the seller registry written, in one
transaction.
"""
import logging
from collections import OrderedDict
from datetime import date
from typing import Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from database import unit_of_work
from models.product import Product
from models.sales import SalesItem, SalesRecord, Seller
from services import product_ledger
from utils.errors import InsufficientStock, InvalidAmount, NotFound, ValidationError
from utils.money import MAX_QUANTITY, Number, line_total, money_sum, to_money

logger = logging.getLogger(__name__)


def _validate_lines(items: Sequence) -> None:
    if not items:
        raise ValidationError("At least one item is required", field="items")
    for idx, item in enumerate(items):
        if item.quantity is None or item.quantity < 1:
            raise ValidationError("Quantity must be at least 1", field=f"items[{idx}].quantity")
        if item.quantity > MAX_QUANTITY:
            raise ValidationError("Quantity is too large", field=f"items[{idx}].quantity")
        if to_money(item.selling_price, field=f"items[{idx}].selling_price") < 0:
            raise ValidationError("Selling price cannot be negative", field=f"items[{idx}].selling_price")


def _resolve_products(db: Session, items: Sequence) -> Dict[int, Product]:
    products: Dict[int, Product] = {}
    for item in items:
        if item.product_id in products:
            continue
        product = db.query(Product).filter(Product.id == item.product_id).first()
        if not product:
            raise NotFound(
                f"Product not found: {item.product_id}", field="items", product_id=item.product_id
            )
        products[item.product_id] = product
    return products


def _requested_per_product(items: Sequence) -> "OrderedDict[int, int]":
    # Lines for the same product are checked against stock together
    requested: "OrderedDict[int, int]" = OrderedDict()
    for item in items:
        requested[item.product_id] = requested.get(item.product_id, 0) + item.quantity
    return requested


def create_sale(
    db: Session,
    *,
    seller_name: str,
    items: Sequence,
    total_due_amount: Number = 0,
    sale_date: Optional[date] = None,
    total_sales_amount: Optional[Number] = None,
) -> SalesRecord:
    """
    ``items`` are objects with ``product_id``, ``quantity`` and
    ``selling_price``. ``total_sales_amount`` is optional; when given it must
    match the total computed from the items.
    """
    seller = (seller_name or "").strip()
    if not seller:
        raise ValidationError("Seller name is required", field="seller_name")
    _validate_lines(items)

    products = _resolve_products(db, items)
    requested = _requested_per_product(items)
    for product_id, qty in requested.items():
        product = products[product_id]
        available = product.remaining_quantity
        if qty > available:
            logger.warning("Sale by %s rejected: %s requested of %s, %s available", seller, qty, product.name, available)
            raise InsufficientStock(product.id, product.name, available, qty)

    lines = [
        SalesItem(
            position=idx,
            product_id=item.product_id,
            product_name=products[item.product_id].name,
            quantity=item.quantity,
            selling_price=to_money(item.selling_price),
            total_price=line_total(item.quantity, item.selling_price),
        )
        for idx, item in enumerate(items)
    ]
    total = money_sum(line.total_price for line in lines)

    if total_sales_amount is not None and to_money(total_sales_amount, field="total_sales_amount") != total:
        raise InvalidAmount(
            f"Total sales amount {to_money(total_sales_amount)} does not match items total {total}",
            field="total_sales_amount", supplied=str(to_money(total_sales_amount)), computed=str(total),
        )

    due = to_money(total_due_amount or 0, field="total_due_amount")
    if due < 0:
        raise InvalidAmount("Due amount cannot be negative", field="total_due_amount")
    if due > total:
        raise InvalidAmount(
            f"Due amount {due} exceeds total sales amount {total}",
            field="total_due_amount", due=str(due), total=str(total),
        )

    record = SalesRecord(
        seller_name=seller,
        items=lines,
        total_sales_amount=total,
        total_due_amount=due,
        cash_sale_amount=total - due,
        date=sale_date or date.today(),
    )

    with unit_of_work(db):
        db.add(record)
        db.flush()
        for product_id, qty in requested.items():
            product_ledger.apply_sale(db, product_id, qty)
        register_seller(db, seller)

    db.refresh(record)
    logger.info("Sales record %s by %s: total %s, due %s", record.id, seller, total, due)
    return record


def register_seller(db: Session, seller_name: str) -> None:
    """Add the seller to the registry if it is new. Does not commit."""
    exists = db.query(Seller).filter(Seller.name == seller_name).first()
    if not exists:
        db.add(Seller(name=seller_name))
        logger.info("New seller registered: %s", seller_name)


def get_sale(db: Session, record_id: int) -> SalesRecord:
    record = db.query(SalesRecord).filter(SalesRecord.id == record_id).first()
    if not record:
        raise NotFound("Sales record not found", field="record_id", record_id=record_id)
    return record


def list_sales(db: Session, seller: Optional[str] = None) -> List[SalesRecord]:
    query = db.query(SalesRecord)
    if seller:
        query = query.filter(SalesRecord.seller_name == seller)
    return query.order_by(SalesRecord.created_at.desc(), SalesRecord.id.desc()).all()
