from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from app.core.exceptions import ProductNotFoundError
from app.models.models import WishlistItem
from app.models.product import Product
from app.crud import cart as crud_cart
import logging

logger = logging.getLogger(__name__)

def get_wishlist_item(db: Session, user_id: int, product_id: int) -> Optional[WishlistItem]:
    return (
        db.query(WishlistItem)
        .filter(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
        .first()
    )

def get_wishlist(db: Session, user_id: int) -> List[WishlistItem]:
    return (
        db.query(WishlistItem)
        .options(joinedload(WishlistItem.product))
        .filter(WishlistItem.user_id == user_id)
        .order_by(WishlistItem.created_at.desc(), WishlistItem.id.desc())
        .all()
    )

def add_item(db: Session, user_id: int, product_id: int) -> int:
    if db.get(Product, product_id) is None:
        raise ProductNotFoundError(product_id)

    existing = get_wishlist_item(db, user_id, product_id)
    if existing:
        return existing.id

    item = WishlistItem(user_id=user_id, product_id=product_id)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item.id

def remove_item(db: Session, user_id: int, product_id: int) -> bool:
    removed = (
        db.query(WishlistItem)
        .filter(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed > 0

def is_in_wishlist(db: Session, user_id: int, product_id: int) -> bool:
    return get_wishlist_item(db, user_id, product_id) is not None

def move_to_cart(db: Session, user_id: int, product_id: int, quantity: float = 1) -> bool:
    """
    Move a wishlist entry into the cart as one transaction: the cart row is
    created or topped up and the wishlist row is deleted, or neither happens.
    Returns False if the product is not in the user's wishlist.
    """
    try:
        removed = (
            db.query(WishlistItem)
            .filter(WishlistItem.user_id == user_id, WishlistItem.product_id == product_id)
            .delete(synchronize_session=False)
        )
        if not removed:
            db.rollback()
            return False
        crud_cart.stage_add_item(db, user_id, product_id, quantity)
        db.commit()
    except Exception:
        db.rollback()
        logger.exception(f"Move to cart failed for user {user_id}, product {product_id}")
        raise
    return True

def clear_wishlist(db: Session, user_id: int) -> int:
    removed = (
        db.query(WishlistItem)
        .filter(WishlistItem.user_id == user_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    return removed
