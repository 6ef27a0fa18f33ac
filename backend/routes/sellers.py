# backend/routes/sellers.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services import sellers as aggregator
from schemas.seller import MonthlySummaryOut, SellerList, SellerSummaryOut, SellersOverviewOut
from utils.errors import NotFound

router = APIRouter(prefix="/sellers", tags=["Sellers"])


@router.get("", response_model=SellerList)
def list_sellers(db: Session = Depends(get_db)):
    names = aggregator.list_sellers(db)
    return {"items": names, "count": len(names)}


@router.get("/overview", response_model=SellersOverviewOut)
def sellers_overview(db: Session = Depends(get_db)):
    return SellersOverviewOut.model_validate(aggregator.sellers_overview(db))


@router.get("/{name}", response_model=SellerSummaryOut)
def seller_summary(name: str, db: Session = Depends(get_db)):
    summary = aggregator.seller_summary(db, name)
    if not summary.sales_records:
        raise NotFound("No sales records found for this seller", field="name", seller_name=name)
    return SellerSummaryOut.model_validate(summary)


@router.get("/{name}/monthly", response_model=MonthlySummaryOut)
def seller_monthly_summary(
    name: str,
    month: str = Query(..., description="YYYY-MM"),
    db: Session = Depends(get_db),
):
    # An empty month is a normal answer, not a 404
    return MonthlySummaryOut.model_validate(aggregator.monthly_summary(db, name, month))
