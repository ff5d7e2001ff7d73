from sqlalchemy import Column, Integer, String, Text, Float, Boolean, DateTime, Index
from sqlalchemy.sql import func
from app.db.session import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    price_per_kg = Column(Float, nullable=False)
    image_url = Column(String, nullable=False)
    stock_quantity = Column(Float, nullable=False, default=0)  # kg
    in_stock = Column(Boolean, nullable=False, default=True)
    seller_name = Column(String, nullable=False)
    category = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    __table_args__ = (
        Index("idx_products_name", "name"),
        Index("idx_products_category", "category"),
        Index("idx_products_in_stock", "in_stock"),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', stock={self.stock_quantity})>"
