import random
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from app.core.exceptions import EmptyCartError, InsufficientStockError
from app.crud import cart as crud_cart
from app.crud import order as crud_order
from app.crud import product as crud_product
from app.models.models import CartItem
from app.models.order import OrderStatus, TERMINAL_STATUSES
import logging

logger = logging.getLogger(__name__)

# pending -> processing -> shipped -> delivered, cancelled from any non-terminal state
ALLOWED_TRANSITIONS = {
    OrderStatus.pending: {OrderStatus.processing, OrderStatus.cancelled},
    OrderStatus.processing: {OrderStatus.shipped, OrderStatus.cancelled},
    OrderStatus.shipped: {OrderStatus.delivered, OrderStatus.cancelled},
    OrderStatus.delivered: set(),
    OrderStatus.cancelled: set(),
}

MIN_DELIVERY_DAYS = 3
MAX_DELIVERY_DAYS = 5


class OrderService:
    """Order placement, cancellation and status changes"""

    @staticmethod
    def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
        return OrderStatus(target) in ALLOWED_TRANSITIONS[OrderStatus(current)]

    @staticmethod
    def calculate_total(lines: Sequence[tuple]) -> float:
        return round(sum(quantity * price for _, quantity, price in lines), 2)

    @staticmethod
    def estimate_delivery(now: Optional[datetime] = None) -> datetime:
        now = now or datetime.now(timezone.utc)
        return now + timedelta(days=random.randint(MIN_DELIVERY_DAYS, MAX_DELIVERY_DAYS))

    @staticmethod
    def create_from_cart(db: Session, user_id: int, cart_items: List[CartItem], delivery_address: str) -> int:
        """
        Turn a cart snapshot into an order.

        Inserts the order and its items, takes the ordered quantities off
        stock and empties the user's cart in a single transaction. Prices come
        from the snapshot passed in, not from a fresh read of the products.
        Raises InsufficientStockError (after rolling back) if any line asks for
        more than is left.
        """
        if not cart_items:
            raise EmptyCartError(user_id)

        # (product_id, quantity, price, name) captured before anything is written
        lines = [
            (item.product_id, item.quantity, item.product.price_per_kg, item.product.name)
            for item in cart_items
        ]
        total_amount = OrderService.calculate_total([line[:3] for line in lines])
        estimated_delivery = OrderService.estimate_delivery()

        try:
            order = crud_order.stage_order(
                db,
                user_id=user_id,
                total_amount=total_amount,
                delivery_address=delivery_address,
                estimated_delivery=estimated_delivery,
                status=OrderStatus.processing,
            )
            order_id = order.id

            for product_id, quantity, price, name in lines:
                crud_order.stage_order_item(db, order_id, product_id, quantity, price)
                if not crud_product.decrease_stock(db, product_id, quantity):
                    raise InsufficientStockError(product_id, quantity, name)

            crud_cart.stage_clear_cart(db, user_id)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Order {order_id} placed by user {user_id}: {len(lines)} items, total {total_amount}")
        return order_id

    @staticmethod
    def cancel_order(db: Session, order_id: int) -> bool:
        """Cancel a non-terminal order and put its quantities back on stock."""
        order = crud_order.get_order_with_items(db, order_id)
        if not order or order.status in TERMINAL_STATUSES:
            return False

        restock = [(item.product_id, item.quantity) for item in order.items]

        try:
            # 0 rows: the order reached a terminal status after it was read
            if not crud_order.stage_cancel(db, order_id):
                db.rollback()
                return False
            for product_id, quantity in restock:
                crud_product.restore_stock(db, product_id, quantity)
            db.commit()
        except Exception:
            db.rollback()
            raise

        logger.info(f"Order {order_id} cancelled, {len(restock)} items restocked")
        return True

    @staticmethod
    def update_status(db: Session, order_id: int, status: OrderStatus) -> bool:
        # Legality is the caller's business, see can_transition
        updated = crud_order.stage_status(db, order_id, OrderStatus(status))
        db.commit()
        return updated
