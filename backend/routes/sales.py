# backend/routes/sales.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services import sales as sales_recorder
from schemas.sales import SalesRecordCreate, SalesRecordList, SalesRecordOut

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.get("", response_model=SalesRecordList)
def list_sales(
    seller: Optional[str] = Query(None, description="Exact seller name"),
    db: Session = Depends(get_db),
):
    records = sales_recorder.list_sales(db, seller=seller)
    return {"items": [SalesRecordOut.model_validate(r) for r in records], "count": len(records)}


@router.post("", response_model=SalesRecordOut, status_code=201)
def create_sale(payload: SalesRecordCreate, db: Session = Depends(get_db)):
    record = sales_recorder.create_sale(
        db,
        seller_name=payload.seller_name,
        items=payload.items,
        total_due_amount=payload.total_due_amount,
        sale_date=payload.date,
        total_sales_amount=payload.total_sales_amount,
    )
    return SalesRecordOut.model_validate(record)


@router.get("/{record_id}", response_model=SalesRecordOut)
def get_sale(record_id: int, db: Session = Depends(get_db)):
    return SalesRecordOut.model_validate(sales_recorder.get_sale(db, record_id))
