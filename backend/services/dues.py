# backend/services/dues.py
import logging
from datetime import date
from decimal import Decimal
from typing import List, Optional

from sqlalchemy.orm import Session

from database import unit_of_work
from models.due import DueEntry
from utils.errors import InvalidAmount, NotFound, ValidationError
from utils.money import MAX_AMOUNT, Number, money_sum, to_money

logger = logging.getLogger(__name__)


def create_due(
    db: Session, *, seller_name: str, shop_name: str, due_amount: Number, date_added: Optional[date] = None
) -> DueEntry:
    seller = (seller_name or "").strip()
    shop = (shop_name or "").strip()
    if not seller:
        raise ValidationError("Seller name is required", field="seller_name")
    if not shop:
        raise ValidationError("Shop name is required", field="shop_name")
    amount = to_money(due_amount, field="due_amount")
    if amount > MAX_AMOUNT:
        raise InvalidAmount("Due amount is too large", field="due_amount", due_amount=str(amount))
    if amount <= 0:
        raise InvalidAmount("Due amount must be greater than 0", field="due_amount", due_amount=str(amount))

    entry = DueEntry(
        seller_name=seller, shop_name=shop, due_amount=amount, date_added=date_added or date.today()
    )
    with unit_of_work(db):
        db.add(entry)
    db.refresh(entry)
    logger.info("Due %s added: %s owes %s to %s", entry.id, entry.shop_name, amount, seller)
    return entry


def settle_due(db: Session, due_id: int) -> None:
    """Mark a due as paid. The entry is removed, no paid history is kept."""
    entry = db.query(DueEntry).filter(DueEntry.id == due_id).first()
    if not entry:
        raise NotFound("Due entry not found", field="due_id", due_id=due_id)
    amount, seller = entry.due_amount, entry.seller_name
    with unit_of_work(db):
        db.delete(entry)
    logger.info("Due %s of %s settled for %s", due_id, amount, seller)


def list_dues(db: Session, seller: Optional[str] = None) -> List[DueEntry]:
    query = db.query(DueEntry)
    if seller:
        query = query.filter(DueEntry.seller_name == seller)
    return query.order_by(DueEntry.created_at.desc(), DueEntry.id.desc()).all()


def dues_for_seller(db: Session, seller_name: str) -> List[DueEntry]:
    return list_dues(db, seller=seller_name) if seller_name else []


def total_due_for_seller(db: Session, seller_name: str) -> Decimal:
    return money_sum(entry.due_amount for entry in dues_for_seller(db, seller_name))
