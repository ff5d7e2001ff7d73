from datetime import datetime
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from sqlalchemy.sql import func
from app.models.order import Order, OrderItem, OrderStatus, TERMINAL_STATUSES

def get_order_by_id(db: Session, order_id: int) -> Optional[Order]:
    return db.query(Order).filter(Order.id == order_id).first()

def get_order_with_items(db: Session, order_id: int) -> Optional[Order]:
    return (
        db.query(Order)
        .options(joinedload(Order.items).joinedload(OrderItem.product))
        .filter(Order.id == order_id)
        .first()
    )

def get_user_orders(db: Session, user_id: int) -> List[Order]:
    return (
        db.query(Order)
        .options(joinedload(Order.items).joinedload(OrderItem.product))
        .filter(Order.user_id == user_id)
        .order_by(Order.created_at.desc(), Order.id.desc())
        .all()
    )

# Staging helpers: they flush but never commit, the order lifecycle owns the transaction

def stage_order(
    db: Session,
    user_id: int,
    total_amount: float,
    delivery_address: str,
    estimated_delivery: Optional[datetime],
    status: OrderStatus = OrderStatus.processing,
) -> Order:
    order = Order(
        user_id=user_id,
        total_amount=total_amount,
        status=status,
        delivery_address=delivery_address,
        estimated_delivery=estimated_delivery,
    )
    db.add(order)
    db.flush()  # flush so order.id is available
    return order

def stage_order_item(db: Session, order_id: int, product_id: int, quantity: float, price_at_purchase: float) -> OrderItem:
    item = OrderItem(
        order_id=order_id,
        product_id=product_id,
        quantity=quantity,
        price_at_purchase=price_at_purchase,
    )
    db.add(item)
    return item

def stage_status(db: Session, order_id: int, status: OrderStatus) -> bool:
    updated = (
        db.query(Order)
        .filter(Order.id == order_id)
        .update({Order.status: status, Order.updated_at: func.now()}, synchronize_session=False)
    )
    return updated > 0

def stage_cancel(db: Session, order_id: int) -> bool:
    """Mark the order cancelled unless it already reached a terminal status."""
    updated = (
        db.query(Order)
        .filter(Order.id == order_id, Order.status.notin_(list(TERMINAL_STATUSES)))
        .update(
            {Order.status: OrderStatus.cancelled, Order.updated_at: func.now()},
            synchronize_session=False,
        )
    )
    return updated > 0
