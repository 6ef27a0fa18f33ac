# backend/models/due.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, CheckConstraint, func
from database import Base

# Outstanding credit a seller extended to a shop. Deleted when paid.
class DueEntry(Base):
    __tablename__ = "due_entries"

    id = Column(Integer, primary_key=True, index=True)
    seller_name = Column(String, nullable=False, index=True)
    shop_name = Column(String, nullable=False)
    due_amount = Column(Numeric(12, 2), CheckConstraint("due_amount > 0"), nullable=False)
    date_added = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
