# backend/services/product_ledger.py
"""
Product Ledger: owns the stock counters of every product.

``apply_delivery`` and ``apply_sale`` only stage their UPDATE inside the
caller's transaction; the purchase order tracker and the sales recorder
commit them together with their own rows (see ``database.unit_of_work``).
"""
import logging
from typing import List, Optional

from sqlalchemy import update
from sqlalchemy.orm import Session

from database import unit_of_work
from models.product import Product
from utils.errors import InsufficientStock, NotFound, ValidationError
from utils.money import MAX_AMOUNT, MAX_QUANTITY, Number, to_money

logger = logging.getLogger(__name__)


def _require_name(name: Optional[str]) -> str:
    clean = (name or "").strip()
    if not clean:
        raise ValidationError("Product name is required", field="name")
    if len(clean) > 100:
        raise ValidationError("Product name cannot exceed 100 characters", field="name")
    return clean


def _require_price(value: Number, field: str):
    price = to_money(value, field=field)
    if price < 0:
        raise ValidationError(f"{field} cannot be negative", field=field)
    if price > MAX_AMOUNT:
        raise ValidationError(f"{field} is too large", field=field)
    return price


def create_product(
    db: Session, *, name: str, initial_stock: int, buying_price: Number, selling_price: Number
) -> Product:
    if initial_stock is None or not 0 <= initial_stock <= MAX_QUANTITY:
        raise ValidationError(f"Initial stock must be between 0 and {MAX_QUANTITY}", field="initial_stock")

    product = Product(
        name=_require_name(name),
        initial_stock=initial_stock,
        delivered_quantity=initial_stock, # delivered stock starts at the initial stock
        sold_quantity=0,
        buying_price=_require_price(buying_price, "buying_price"),
        selling_price=_require_price(selling_price, "selling_price"),
    )
    with unit_of_work(db):
        db.add(product)
    db.refresh(product)
    logger.info("Product %s created (%s, initial stock %s)", product.id, product.name, product.initial_stock)
    return product


def get_product(db: Session, product_id: int) -> Product:
    product = db.query(Product).filter(Product.id == product_id).first()
    if not product:
        raise NotFound("Product not found", field="product_id", product_id=product_id)
    return product


def list_products(db: Session, name: Optional[str] = None) -> List[Product]:
    query = db.query(Product)
    if name:
        query = query.filter(Product.name.ilike(f"%{name}%"))
    return query.order_by(Product.created_at.desc(), Product.id.desc()).all()


def update_product(
    db: Session,
    product_id: int,
    *,
    name: Optional[str] = None,
    buying_price: Optional[Number] = None,
    selling_price: Optional[Number] = None,
) -> Product:
    """Rename or reprice a product. Stock counters are not editable here."""
    product = get_product(db, product_id)
    with unit_of_work(db):
        if name is not None:
            product.name = _require_name(name)
        if buying_price is not None:
            product.buying_price = _require_price(buying_price, "buying_price")
        if selling_price is not None:
            product.selling_price = _require_price(selling_price, "selling_price")
    db.refresh(product)
    logger.info("Product %s updated", product.id)
    return product


def delete_product(db: Session, product_id: int) -> None:
    product = get_product(db, product_id)
    with unit_of_work(db):
        db.delete(product)
    logger.info("Product %s deleted", product_id)


def remaining(db: Session, product_id: int) -> int:
    """Delivered minus sold; a missing product has nothing remaining."""
    product = db.query(Product).filter(Product.id == product_id).first()
    return product.remaining_quantity if product else 0


def apply_delivery(db: Session, product_id: int, quantity: int) -> Product:
    product = get_product(db, product_id)
    if quantity is None or quantity <= 0:
        raise ValidationError("Delivered quantity must be positive", field="quantity")

    db.execute(
        update(Product)
        .where(Product.id == product_id)
        .values(delivered_quantity=Product.delivered_quantity + quantity)
        .execution_options(synchronize_session=False)
    )
    db.refresh(product)
    return product


def apply_sale(db: Session, product_id: int, quantity: int) -> Product:
    product = get_product(db, product_id)
    if quantity is None or quantity <= 0:
        raise ValidationError("Sold quantity must be positive", field="quantity")

    # The availability check and the increment are one statement, so two
    # concurrent sales cannot both take the last units.
    result = db.execute(
        update(Product)
        .where(
            Product.id == product_id,
            Product.delivered_quantity - Product.sold_quantity >= quantity,
        )
        .values(sold_quantity=Product.sold_quantity + quantity)
        .execution_options(synchronize_session=False)
    )
    db.refresh(product)
    if result.rowcount != 1:
        logger.warning(
            "Sale of %s x product %s rejected, %s available", quantity, product_id, product.remaining_quantity
        )
        raise InsufficientStock(product.id, product.name, product.remaining_quantity, quantity)
    return product
