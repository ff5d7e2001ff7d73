from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import ProductNotFoundError
from app.models.models import CartItem
from app.models.product import Product

def get_cart_item(db: Session, user_id: int, product_id: int) -> Optional[CartItem]:
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id, CartItem.product_id == product_id)
        .first()
    )

def get_cart_items(db: Session, user_id: int) -> List[CartItem]:
    return (
        db.query(CartItem)
        .options(joinedload(CartItem.product))
        .filter(CartItem.user_id == user_id)
        .order_by(CartItem.created_at.desc(), CartItem.id.desc())
        .all()
    )

def get_cart_summary(db: Session, user_id: int) -> dict:
    items = get_cart_items(db, user_id)
    total_items = sum(item.quantity for item in items)
    total_price = sum(item.quantity * item.product.price_per_kg for item in items)
    return {
        "items": items,
        "total_items": total_items,
        "total_price": round(total_price, 2),
    }

def stage_add_item(db: Session, user_id: int, product_id: int, quantity: float = 1) -> CartItem:
    """Merge `quantity` into the (user, product) row without committing."""
    item = get_cart_item(db, user_id, product_id)
    if item:
        item.quantity = item.quantity + quantity
    else:
        item = CartItem(user_id=user_id, product_id=product_id, quantity=quantity)
        db.add(item)
    db.flush()
    return item

def add_item(db: Session, user_id: int, product_id: int, quantity: float = 1) -> int:
    if db.get(Product, product_id) is None:
        raise ProductNotFoundError(product_id)
    item = stage_add_item(db, user_id, product_id, quantity)
    db.commit()
    return item.id

def update_quantity(db: Session, user_id: int, product_id: int, quantity: float) -> bool:
    if quantity <= 0:
        return remove_item(db, user_id, product_id)

    item = get_cart_item(db, user_id, product_id)
    if not item:
        return False
    item.quantity = quantity
    db.commit()
    return True

def remove_item(db: Session, user_id: int, product_id: int) -> bool:
    removed = (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id, CartItem.product_id == product_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed > 0

def stage_clear_cart(db: Session, user_id: int) -> int:
    return (
        db.query(CartItem)
        .filter(CartItem.user_id == user_id)
        .delete(synchronize_session=False)
    )

def clear_cart(db: Session, user_id: int) -> int:
    removed = stage_clear_cart(db, user_id)
    db.commit()
    return removed

def get_item_count(db: Session, user_id: int) -> float:
    return (
        db.query(func.coalesce(func.sum(CartItem.quantity), 0))
        .filter(CartItem.user_id == user_id)
        .scalar()
    )
