from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime

# 👇 What the API returns for a product
class ProductOut(BaseModel):
    id: int
    name: str
    description: str
    price_per_kg: float
    image_url: str
    stock_quantity: float
    in_stock: bool
    seller_name: str
    category: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# 👇 Catalog query options, all optional
class ProductFilters(BaseModel):
    search: Optional[str] = None
    category: Optional[str] = None
    in_stock: Optional[bool] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    sort_by: Optional[Literal["name", "price", "stock"]] = None
    sort_order: Literal["asc", "desc"] = "asc"

# 👇 One page of the catalog
class ProductPage(BaseModel):
    items: List[ProductOut]
    total: int
    page: int
    page_size: int = Field(serialization_alias="pageSize")
    total_pages: int = Field(serialization_alias="totalPages")

# 👇 Partial update, only the fields that were sent are written
class ProductUpdate(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    price_per_kg: Optional[float] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    stock_quantity: Optional[float] = Field(default=None, ge=0)
    seller_name: Optional[str] = None
    category: Optional[str] = None
