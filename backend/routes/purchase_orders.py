# backend/routes/purchase_orders.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from models.purchase_order import PurchaseOrderStatus
from services import purchase_orders
from schemas.purchase_order import PurchaseOrderCreate, PurchaseOrderList, PurchaseOrderOut

router = APIRouter(prefix="/purchase-orders", tags=["Purchase orders"])


@router.get("", response_model=PurchaseOrderList)
def list_purchase_orders(
    status: Optional[PurchaseOrderStatus] = Query(None),
    db: Session = Depends(get_db),
):
    orders = purchase_orders.list_orders(db, status=status)
    return {"items": [PurchaseOrderOut.model_validate(o) for o in orders], "count": len(orders)}


@router.post("", response_model=PurchaseOrderOut, status_code=201)
def create_purchase_order(payload: PurchaseOrderCreate, db: Session = Depends(get_db)):
    order = purchase_orders.create_order(
        db, product_id=payload.product_id, quantity=payload.quantity, buying_price=payload.buying_price
    )
    return PurchaseOrderOut.model_validate(order)


@router.get("/{order_id}", response_model=PurchaseOrderOut)
def get_purchase_order(order_id: int, db: Session = Depends(get_db)):
    return PurchaseOrderOut.model_validate(purchase_orders.get_order(db, order_id))


# Receive the goods: pending -> delivered, stock goes up by the order quantity
@router.put("/{order_id}/deliver", response_model=PurchaseOrderOut)
def deliver_purchase_order(order_id: int, db: Session = Depends(get_db)):
    return PurchaseOrderOut.model_validate(purchase_orders.mark_delivered(db, order_id))
