import math
from typing import List, Optional
from sqlalchemy import case, func, or_
from sqlalchemy.orm import Session
from app.models.product import Product
from app.schemas.product import ProductFilters, ProductUpdate

SORT_COLUMNS = {
    "name": Product.name,
    "price": Product.price_per_kg,
    "stock": Product.stock_quantity,
}

#  Get one product
def get_product_by_id(db: Session, product_id: int) -> Optional[Product]:
    return db.query(Product).filter(Product.id == product_id).first()

#  Filtered, sorted, paginated catalog
def get_products(db: Session, filters: Optional[ProductFilters] = None, page: int = 1, page_size: int = 12) -> dict:
    filters = filters or ProductFilters()
    query = db.query(Product)

    if filters.search:
        pattern = f"%{filters.search}%"
        query = query.filter(or_(Product.name.ilike(pattern), Product.description.ilike(pattern)))
    if filters.category:
        query = query.filter(Product.category == filters.category)
    if filters.in_stock is not None:
        query = query.filter(Product.in_stock == filters.in_stock)
    if filters.min_price is not None:
        query = query.filter(Product.price_per_kg >= filters.min_price)
    if filters.max_price is not None:
        query = query.filter(Product.price_per_kg <= filters.max_price)

    total = query.count()

    column = SORT_COLUMNS[filters.sort_by or "name"]
    order = column.desc() if filters.sort_order == "desc" else column.asc()
    items = (
        query.order_by(order, Product.id.asc())
        .offset((page - 1) * page_size)
        .limit(page_size)
        .all()
    )

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": math.ceil(total / page_size),
    }

def get_categories(db: Session) -> List[str]:
    rows = db.query(Product.category).distinct().order_by(Product.category).all()
    return [row.category for row in rows]

def search_products(db: Session, query: str, limit: int = 10) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.name.ilike(f"%{query}%"))
        .order_by(Product.name.asc())
        .limit(limit)
        .all()
    )

def get_featured_products(db: Session, limit: int = 8) -> List[Product]:
    return (
        db.query(Product)
        .filter(Product.in_stock.is_(True))
        .order_by(func.random())
        .limit(limit)
        .all()
    )

#  Update product, keeps in_stock in line with stock_quantity
def update_product(db: Session, product_id: int, data: ProductUpdate) -> Optional[Product]:
    product = get_product_by_id(db, product_id)
    if not product:
        return None

    update_data = data.model_dump(exclude_unset=True, exclude_none=True)
    for key, value in update_data.items():
        setattr(product, key, value)

    if "stock_quantity" in update_data:
        product.in_stock = product.stock_quantity > 0

    db.commit()
    db.refresh(product)
    return product

def update_stock(db: Session, product_id: int, quantity: float) -> bool:
    updated = (
        db.query(Product)
        .filter(Product.id == product_id)
        .update(
            {
                Product.stock_quantity: quantity,
                Product.in_stock: quantity > 0,
                Product.updated_at: func.now(),
            },
            synchronize_session=False,
        )
    )
    db.commit()
    return updated > 0

# The stock helpers below only stage their UPDATE; the caller owns the commit
# so they can run inside a larger transaction.

def decrease_stock(db: Session, product_id: int, amount: float) -> bool:
    """
    Take `amount` off the product's stock if at least that much is left.
    Returns False (and changes nothing) when stock is short or the product is unknown.
    """
    updated = (
        db.query(Product)
        .filter(Product.id == product_id, Product.stock_quantity >= amount)
        .update(
            {
                Product.stock_quantity: Product.stock_quantity - amount,
                Product.in_stock: case((Product.stock_quantity - amount > 0, True), else_=False),
                Product.updated_at: func.now(),
            },
            synchronize_session=False,
        )
    )
    return updated > 0

def restore_stock(db: Session, product_id: int, amount: float) -> bool:
    updated = (
        db.query(Product)
        .filter(Product.id == product_id)
        .update(
            {
                Product.stock_quantity: Product.stock_quantity + amount,
                Product.in_stock: True,
                Product.updated_at: func.now(),
            },
            synchronize_session=False,
        )
    )
    return updated > 0
