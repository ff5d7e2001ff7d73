from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import Literal, Optional

from app.core.config import settings
from app.crud import product as crud_product
from app.db.deps import get_db
from app.schemas.product import ProductFilters, ProductOut, ProductPage
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("")
def list_products(
    search: Optional[str] = None,
    category: Optional[str] = None,
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    sort_by: Optional[Literal["name", "price", "stock"]] = Query(None, alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query("asc", alias="sortOrder"),
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db),
):
    filters = ProductFilters(
        search=search or None,
        category=category or None,
        in_stock=in_stock,
        min_price=min_price,
        max_price=max_price,
        sort_by=sort_by,
        sort_order=sort_order,
    )
    try:
        result = crud_product.get_products(db, filters, page=page, page_size=page_size)
    except Exception as e:
        logger.error(f"Products fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch products")

    return {"success": True, "data": ProductPage.model_validate(result, from_attributes=True)}

@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    try:
        categories = crud_product.get_categories(db)
    except Exception as e:
        logger.error(f"Categories fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch categories")
    return {"success": True, "data": categories}

@router.get("/featured")
def list_featured(limit: int = Query(8, ge=1, le=50), db: Session = Depends(get_db)):
    try:
        products = crud_product.get_featured_products(db, limit=limit)
    except Exception as e:
        logger.error(f"Featured products fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch featured products")
    return {"success": True, "data": [ProductOut.model_validate(p) for p in products]}

@router.get("/search")
def quick_search(
    q: str = Query(..., min_length=1),
    limit: int = Query(10, ge=1, le=50),
    db: Session = Depends(get_db),
):
    try:
        products = crud_product.search_products(db, q, limit=limit)
    except Exception as e:
        logger.error(f"Product search error: {e}")
        raise HTTPException(status_code=500, detail="Failed to search products")
    return {"success": True, "data": [ProductOut.model_validate(p) for p in products]}

@router.get("/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    try:
        product = crud_product.get_product_by_id(db, product_id)
    except Exception as e:
        logger.error(f"Product fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch product")

    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return {"success": True, "data": ProductOut.model_validate(product)}
