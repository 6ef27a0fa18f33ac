# backend/routes/products.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from database import get_db
from services import product_ledger
import schemas.product as product_schemas

router = APIRouter(prefix="/products", tags=["Products"])


def _to_out(product) -> product_schemas.ProductOut:
    return product_schemas.ProductOut.model_validate(product)


# =========================
# PRODUCT LIST
# =========================
@router.get("", response_model=product_schemas.ProductList)
def list_products(
    name: Optional[str] = Query(None, description="Filter by name fragment"),
    db: Session = Depends(get_db),
):
    products = product_ledger.list_products(db, name=name)
    return {"items": [_to_out(p) for p in products], "count": len(products)}


# =========================
# CREATE
# =========================
@router.post("", response_model=product_schemas.ProductOut, status_code=201)
def create_product(payload: product_schemas.ProductCreate, db: Session = Depends(get_db)):
    product = product_ledger.create_product(
        db,
        name=payload.name,
        initial_stock=payload.initial_stock,
        buying_price=payload.buying_price,
        selling_price=payload.selling_price,
    )
    return _to_out(product)


# =========================
# SINGLE PRODUCT
# =========================
@router.get("/{product_id}", response_model=product_schemas.ProductOut)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return _to_out(product_ledger.get_product(db, product_id))


@router.get("/{product_id}/remaining", response_model=product_schemas.RemainingOut)
def get_remaining(product_id: int, db: Session = Depends(get_db)):
    # Unknown products report 0 rather than 404
    return {"product_id": product_id, "remaining_quantity": product_ledger.remaining(db, product_id)}


@router.put("/{product_id}", response_model=product_schemas.ProductOut)
def update_product(
    product_id: int, payload: product_schemas.ProductUpdate, db: Session = Depends(get_db)
):
    product = product_ledger.update_product(
        db, product_id,
        name=payload.name,
        buying_price=payload.buying_price,
        selling_price=payload.selling_price,
    )
    return _to_out(product)


@router.delete("/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product_ledger.delete_product(db, product_id)
    return {"success": True, "message": "Product deleted successfully"}
