# backend/utils/money.py
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Iterable, Optional, Union

from utils.errors import ValidationError

CENT = Decimal("0.01")

# Column limits: Numeric(12, 2) for money, 32-bit INTEGER for counts and ids
MAX_AMOUNT = Decimal("9999999999.99")
MAX_QUANTITY = 2**31 - 1
MAX_ID = MAX_QUANTITY

Number = Union[Decimal, int, float, str]


def to_money(value: Number, field: Optional[str] = None) -> Decimal:
    """Quantize to cents. Floats go through ``str`` to avoid binary noise.

    Values that cannot be represented (too many digits, NaN, infinity,
    unparsable strings) raise ``ValidationError``.
    """
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
        if not amount.is_finite():
            raise InvalidOperation(value)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError(f"Not a valid amount: {value}", field=field, value=str(value)) from None


def line_total(quantity: int, unit_price: Number) -> Decimal:
    return to_money(Decimal(quantity) * to_money(unit_price))


def money_sum(values: Iterable[Number]) -> Decimal:
    return to_money(sum((to_money(v) for v in values), Decimal("0")))
