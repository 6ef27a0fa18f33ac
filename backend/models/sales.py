# backend/models/sales.py
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, ForeignKey, CheckConstraint, func
from sqlalchemy.orm import relationship
from database import Base

# A multi-line sale made by one seller. Append-only once committed.
class SalesRecord(Base):
    __tablename__ = "sales_records"

    id = Column(Integer, primary_key=True, index=True)
    seller_name = Column(String, nullable=False, index=True)

    total_sales_amount = Column(Numeric(12, 2), CheckConstraint("total_sales_amount >= 0"), nullable=False)
    total_due_amount = Column(Numeric(12, 2), CheckConstraint("total_due_amount >= 0"), nullable=False, default=0)
    cash_sale_amount = Column(Numeric(12, 2), CheckConstraint("cash_sale_amount >= 0"), nullable=False)

    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    items = relationship(
        "SalesItem", back_populates="record",
        cascade="all, delete-orphan", order_by="SalesItem.position",
    )

class SalesItem(Base):
    __tablename__ = "sales_items"

    id = Column(Integer, primary_key=True, index=True)
    record_id = Column(Integer, ForeignKey("sales_records.id"), nullable=False, index=True)
    position = Column(Integer, nullable=False, default=0) # Keeps the line order of the request

    product_id = Column(Integer, nullable=False, index=True) # Checked at write time only
    product_name = Column(String(100), nullable=False) # Snapshot taken at sale time
    quantity = Column(Integer, CheckConstraint("quantity >= 1"), nullable=False)
    selling_price = Column(Numeric(12, 2), CheckConstraint("selling_price >= 0"), nullable=False)
    total_price = Column(Numeric(12, 2), CheckConstraint("total_price >= 0"), nullable=False)

    record = relationship("SalesRecord", back_populates="items")

# Seller registry, filled the first time a sale names a seller
class Seller(Base):
    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
