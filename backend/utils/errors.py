# backend/utils/errors.py
from typing import Any, Dict, Optional


class LedgerError(Exception):
    """Base class for business failures raised by the services layer.

    Each subclass carries the HTTP status it maps to, so routes never
    translate errors themselves; the handlers in ``main.py`` render
    ``to_dict()`` as the response body.
    """

    status_code = 400
    kind = "LedgerError"

    def __init__(self, message: str, field: Optional[str] = None, **details: Any):
        super().__init__(message)
        self.message = message
        self.field = field
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "kind": self.kind,
            "message": self.message,
            "field": self.field,
            "details": self.details,
        }


class ValidationError(LedgerError):
    kind = "ValidationError"


class NotFound(LedgerError):
    status_code = 404
    kind = "NotFound"


class InsufficientStock(LedgerError):
    kind = "InsufficientStock"

    def __init__(self, product_id: int, product_name: str, available: int, requested: int):
        super().__init__(
            f"Insufficient stock for {product_name}. Available: {available}, Requested: {requested}",
            field="items",
            product_id=product_id,
            product_name=product_name,
            available=available,
            requested=requested,
        )
        self.product_id = product_id
        self.product_name = product_name
        self.available = available
        self.requested = requested


class InvalidAmount(LedgerError):
    kind = "InvalidAmount"


class AlreadyDelivered(LedgerError):
    kind = "AlreadyDelivered"


class StorageError(LedgerError):
    status_code = 500
    kind = "StorageError"
