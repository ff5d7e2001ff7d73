from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime
from app.models.order import OrderStatus
from app.schemas.product import ProductOut

class OrderCreate(BaseModel):
    delivery_address: str = Field(alias="deliveryAddress")

    class Config:
        populate_by_name = True

    @field_validator("delivery_address")
    @classmethod
    def address_required(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Delivery address is required")
        return value

class OrderItemOut(BaseModel):
    id: int
    order_id: int
    product_id: int
    quantity: float
    price_at_purchase: float
    created_at: Optional[datetime] = None
    product: ProductOut

    class Config:
        from_attributes = True

class OrderOut(BaseModel):
    id: int
    user_id: int
    total_amount: float
    status: OrderStatus
    delivery_address: str
    estimated_delivery: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    items: List[OrderItemOut]

    class Config:
        from_attributes = True