from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.core.exceptions import ProductNotFoundError
from app.core.security import Authenticated
from app.crud import cart as crud_cart
from app.db.deps import get_current_user, get_db
from app.schemas.cart import CartItemCreate, CartItemUpdate, CartSummary
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("")
def get_cart(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    try:
        summary = crud_cart.get_cart_summary(db, current.user_id)
    except Exception as e:
        logger.error(f"Cart fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch cart")
    return {"success": True, "data": CartSummary.model_validate(summary, from_attributes=True)}

@router.get("/count")
def get_cart_count(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    try:
        count = crud_cart.get_item_count(db, current.user_id)
    except Exception as e:
        logger.error(f"Cart count error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch cart count")
    return {"success": True, "data": {"count": count}}

@router.post("")
def add_to_cart(
    data: CartItemCreate,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        item_id = crud_cart.add_item(db, current.user_id, data.product_id, data.quantity)
    except ProductNotFoundError:
        raise HTTPException(status_code=404, detail="Product not found")
    except Exception as e:
        db.rollback()
        logger.error(f"Cart add error: {e}")
        raise HTTPException(status_code=500, detail="Failed to add item to cart")

    return {"success": True, "message": "Item added to cart", "data": {"itemId": item_id}}

@router.put("/{product_id}")
def update_cart_item(
    product_id: int,
    data: CartItemUpdate,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        updated = crud_cart.update_quantity(db, current.user_id, product_id, data.quantity)
    except Exception as e:
        db.rollback()
        logger.error(f"Cart update error: {e}")
        raise HTTPException(status_code=500, detail="Failed to update cart")

    if not updated:
        raise HTTPException(status_code=404, detail="Item not found in cart")
    return {"success": True, "message": "Cart updated"}

@router.delete("/{product_id}")
def remove_cart_item(
    product_id: int,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        removed = crud_cart.remove_item(db, current.user_id, product_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Cart remove error: {e}")
        raise HTTPException(status_code=500, detail="Failed to remove item from cart")

    if not removed:
        raise HTTPException(status_code=404, detail="Item not found in cart")
    return {"success": True, "message": "Item removed from cart"}

@router.delete("")
def clear_cart(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    try:
        count = crud_cart.clear_cart(db, current.user_id)
    except Exception as e:
        db.rollback()
        logger.error(f"Cart clear error: {e}")
        raise HTTPException(status_code=500, detail="Failed to clear cart")
    return {"success": True, "message": f"Cart cleared ({count} items removed)"}
