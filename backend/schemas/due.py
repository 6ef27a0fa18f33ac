# backend/schemas/due.py
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal
from datetime import date, datetime
from typing import List, Optional

from utils.money import MAX_AMOUNT


class DueEntryCreate(BaseModel):
    seller_name: str = Field(..., min_length=1)
    shop_name: str = Field(..., min_length=1)
    due_amount: Decimal = Field(..., le=MAX_AMOUNT) # Positivity is checked by the due ledger
    date_added: date


class DueEntryOut(BaseModel):
    id: int
    seller_name: str
    shop_name: str
    due_amount: float
    date_added: date
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DueEntryList(BaseModel):
    items: List[DueEntryOut]
    count: int


# Outstanding dues of one seller
class SellerDues(BaseModel):
    seller_name: str
    total_due: float
    due_entries: List[DueEntryOut]
