from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from app.schemas.product import ProductOut

class CartItemCreate(BaseModel):
    product_id: int = Field(alias="productId")
    quantity: float = Field(default=1, gt=0)

    class Config:
        populate_by_name = True

class CartItemUpdate(BaseModel):
    # 0 removes the line
    quantity: float = Field(ge=0)

class CartItemOut(BaseModel):
    id: int
    user_id: int
    product_id: int
    quantity: float
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    product: ProductOut

    class Config:
        from_attributes = True

class CartSummary(BaseModel):
    items: List[CartItemOut]
    total_items: float = Field(serialization_alias="totalItems")
    total_price: float = Field(serialization_alias="totalPrice")

class WishlistItemCreate(BaseModel):
    product_id: int = Field(alias="productId")

    class Config:
        populate_by_name = True

class MoveToCartRequest(BaseModel):
    quantity: float = Field(default=1, gt=0)

class WishlistItemOut(BaseModel):
    id: int
    user_id: int
    product_id: int
    created_at: Optional[datetime] = None
    product: ProductOut

    class Config:
        from_attributes = True
