# tests/helpers.py
from decimal import Decimal

from schemas.sales import SalesItemCreate


def line(product, quantity, price=None):
    """Sale line for ``product``; defaults to the product's selling price."""
    return SalesItemCreate(
        product_id=product.id if hasattr(product, "id") else product,
        quantity=quantity,
        selling_price=Decimal(str(price)) if price is not None else product.selling_price,
    )
