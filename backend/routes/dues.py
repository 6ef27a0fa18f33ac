# backend/routes/dues.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services import dues as due_ledger
from schemas.due import DueEntryCreate, DueEntryList, DueEntryOut, SellerDues

router = APIRouter(prefix="/dues", tags=["Dues"])


@router.get("", response_model=DueEntryList)
def list_dues(
    seller: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    entries = due_ledger.list_dues(db, seller=seller)
    return {"items": [DueEntryOut.model_validate(e) for e in entries], "count": len(entries)}


# Always an aggregate, empty when the seller owes nothing
@router.get("/sellers/{name}", response_model=SellerDues)
def seller_dues(name: str, db: Session = Depends(get_db)):
    entries = due_ledger.dues_for_seller(db, name)
    return SellerDues(
        seller_name=name,
        total_due=due_ledger.total_due_for_seller(db, name),
        due_entries=[DueEntryOut.model_validate(e) for e in entries],
    )


@router.post("", response_model=DueEntryOut, status_code=201)
def create_due(payload: DueEntryCreate, db: Session = Depends(get_db)):
    entry = due_ledger.create_due(
        db,
        seller_name=payload.seller_name,
        shop_name=payload.shop_name,
        due_amount=payload.due_amount,
        date_added=payload.date_added,
    )
    return DueEntryOut.model_validate(entry)


# Mark as paid: the entry is removed
@router.delete("/{due_id}")
def settle_due(due_id: int, db: Session = Depends(get_db)):
    due_ledger.settle_due(db, due_id)
    return {"success": True, "message": "Due entry marked as paid and removed"}
