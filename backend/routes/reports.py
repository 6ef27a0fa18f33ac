# routes/reports.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database import get_db
from services import reports
from schemas.reports import OrderHistoryOut, StockReportOut

router = APIRouter(prefix="/reports", tags=["Reports"])

# -----------------------------
# 1) Stock analytics
# -----------------------------
@router.get("/stock", response_model=StockReportOut)
def report_stock(db: Session = Depends(get_db)):
    return StockReportOut.model_validate(reports.stock_report(db))

# -----------------------------
# 2) Delivered purchase orders
# -----------------------------
@router.get("/order-history", response_model=OrderHistoryOut)
def report_order_history(db: Session = Depends(get_db)):
    return OrderHistoryOut.model_validate(reports.order_history(db))
