from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.core.exceptions import InsufficientStockError
from app.core.security import Authenticated
from app.crud import cart as crud_cart
from app.crud import order as crud_order
from app.db.deps import get_current_user, get_db
from app.schemas.order import OrderCreate, OrderOut
from app.services.order_service import OrderService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

def get_owned_order(db: Session, order_id: int, user_id: int):
    order = crud_order.get_order_with_items(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    if order.user_id != user_id:
        raise HTTPException(status_code=403, detail="Unauthorized")
    return order

@router.get("")
def list_my_orders(db: Session = Depends(get_db), current: Authenticated = Depends(get_current_user)):
    try:
        orders = crud_order.get_user_orders(db, current.user_id)
    except Exception as e:
        logger.error(f"Orders fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch orders")
    return {"success": True, "data": [OrderOut.model_validate(order) for order in orders]}

@router.post("", status_code=status.HTTP_201_CREATED)
def place_order(
    data: OrderCreate,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        cart_items = crud_cart.get_cart_items(db, current.user_id)
    except Exception as e:
        logger.error(f"Cart fetch error during checkout: {e}")
        raise HTTPException(status_code=500, detail="Failed to create order")

    if not cart_items:
        raise HTTPException(status_code=400, detail="Cart is empty")

    try:
        order_id = OrderService.create_from_cart(db, current.user_id, cart_items, data.delivery_address)
    except InsufficientStockError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Order creation error: {e}")
        raise HTTPException(status_code=500, detail="Failed to create order")

    order = crud_order.get_order_with_items(db, order_id)
    return {
        "success": True,
        "message": "Order placed successfully",
        "data": OrderOut.model_validate(order),
    }

@router.get("/{order_id}")
def get_order(
    order_id: int,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    try:
        order = get_owned_order(db, order_id, current.user_id)
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Order fetch error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch order")
    return {"success": True, "data": OrderOut.model_validate(order)}

@router.post("/{order_id}/cancel")
def cancel_order(
    order_id: int,
    db: Session = Depends(get_db),
    current: Authenticated = Depends(get_current_user),
):
    get_owned_order(db, order_id, current.user_id)

    try:
        cancelled = OrderService.cancel_order(db, order_id)
    except Exception as e:
        logger.error(f"Order cancel error: {e}")
        raise HTTPException(status_code=500, detail="Failed to cancel order")

    if not cancelled:
        raise HTTPException(status_code=400, detail="Order cannot be cancelled")

    order = crud_order.get_order_with_items(db, order_id)
    return {"success": True, "message": "Order cancelled", "data": OrderOut.model_validate(order)}
