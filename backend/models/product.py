# backend/models/product.py
from sqlalchemy import Column, Integer, String, Numeric, DateTime, CheckConstraint, func
from database import Base

# Model Product
# Single source of truth for stock counters and price points.
# remaining/cost/value/profit are derived on read, never stored.
class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("sold_quantity <= delivered_quantity", name="ck_products_sold_le_delivered"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)

    # Stock counters. initial_stock records the original intent and never changes.
    initial_stock = Column(Integer, CheckConstraint("initial_stock >= 0"), nullable=False)
    delivered_quantity = Column(Integer, CheckConstraint("delivered_quantity >= 0"), nullable=False, default=0)
    sold_quantity = Column(Integer, CheckConstraint("sold_quantity >= 0"), nullable=False, default=0)

    # Prices in dollars, two decimal places.
    buying_price = Column(Numeric(12, 2), CheckConstraint("buying_price >= 0"), nullable=False)
    selling_price = Column(Numeric(12, 2), CheckConstraint("selling_price >= 0"), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    @property
    def remaining_quantity(self) -> int:
        return (self.delivered_quantity or 0) - (self.sold_quantity or 0)

    @property
    def buying_cost(self):
        return (self.delivered_quantity or 0) * self.buying_price

    @property
    def sales_value(self):
        return (self.sold_quantity or 0) * self.selling_price

    @property
    def profit_loss(self):
        return (self.selling_price - self.buying_price) * (self.sold_quantity or 0)
