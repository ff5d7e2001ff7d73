from fastapi import APIRouter, Body, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional
from app.core.exceptions import ProductNotFoundError
from app.core.security import Authenticated
from app.crud import wishlist as crud_wishlist
from app.db.deps import get_current_user, get_db
from app.schemas.cart import MoveToCartRequest, WishlistItemCreate, WishlistItemOut
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("")
def get_wishlist(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    try:
        items = crud_wishlist.get_wishlist(db, current.user_id)
    except Exception as e:
        logger.error(f"Wishlist fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch wishlist")
    return {"success": True, "data": [WishlistItemOut.model_validate(item) for item in items]}

@router.post("")
def add_to_wishlist(
    data: WishlistItemCreate,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        item_id = crud_wishlist.add_item(db, current.user_id, data.product_id)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except Exception as e:
        db.rollback()
        logger.error(f"Wishlist add error: {e}")
        raise HTTPException(status_code=500, detail="Failed to add item to wishlist")

    return {"success": True, "message": "Item added to wishlist", "data": {"itemId": item_id}}

@router.get("/{product_id}")
def check_wishlist(
    product_id: int,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        in_wishlist = crud_wishlist.is_in_wishlist(db, current.user_id, product_id)
    except Exception as e:
        logger.error(f"Wishlist check error: {e}")
        raise HTTPException(status_code=500, detail="Failed to check wishlist")
    return {"success": True, "data": {"inWishlist": in_wishlist}}

@router.delete("/{product_id}")
def remove_from_wishlist(
    product_id: int,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        removed = crud_wishlist.remove_item(db, current.user_id, product_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Wishlist remove error: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove item from wishlist")

    if not removed:
        raise HTTPException(status_code=404, detail="Item not found in wishlist")
    return {"success": True, "message": "Item removed from wishlist"}

@router.post("/{product_id}/move-to-cart")
def move_to_cart(
    product_id: int,
    data: Optional[MoveToCartRequest] = Body(None),
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    quantity = data.quantity if data else 1
    try:
        moved = crud_wishlist.move_to_cart(db, current.user_id, product_id, quantity)
    except Exception as e:
        logger.error(f"Move to cart error: {e}")
        raise HTTPException(status_code=500, detail="Failed to move item to cart")

    if not moved:
        raise HTTPException(status_code=404, detail="Item not found in wishlist")
    return {"success": True, "message": "Item moved to cart"}
