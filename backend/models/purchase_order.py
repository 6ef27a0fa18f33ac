# backend/models/purchase_order.py
import enum
from sqlalchemy import Column, Integer, String, Numeric, Date, DateTime, Enum, CheckConstraint, func
from database import Base

# Purchase order lifecycle: pending -> delivered, exactly once
class PurchaseOrderStatus(str, enum.Enum):
    PENDING = "pending"
    DELIVERED = "delivered"

# Restock request. On delivery its quantity is added to the product's delivered counter.
class PurchaseOrder(Base):
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, nullable=False, index=True) # Checked at write time only
    product_name = Column(String(100), nullable=False) # Snapshot taken at order time

    quantity = Column(Integer, CheckConstraint("quantity >= 1"), nullable=False)
    buying_price = Column(Numeric(12, 2), CheckConstraint("buying_price >= 0"), nullable=False)
    total_cost = Column(Numeric(12, 2), CheckConstraint("total_cost >= 0"), nullable=False) # Persisted, never recomputed

    status = Column(
        Enum(PurchaseOrderStatus, values_callable=lambda e: [m.value for m in e]),
        nullable=False, default=PurchaseOrderStatus.PENDING, index=True,
    )
    order_date = Column(Date, nullable=False)
    delivery_date = Column(Date, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

