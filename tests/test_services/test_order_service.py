import threading
from datetime import datetime, timedelta, timezone

import pytest

from app.core.exceptions import EmptyCartError, InsufficientStockError
from app.crud import cart as crud_cart
from app.crud import order as crud_order
from app.crud import product as crud_product
from app.models.order import Order, OrderItem, OrderStatus
from app.services.order_service import OrderService

from conftest import product_by_name


def place_order(db, user_id, address="1 Main St"):
    return OrderService.create_from_cart(db, user_id, crud_cart.get_cart_items(db, user_id), address)


def test_checkout_freezes_price_and_moves_stock(db, user):
    carrots = product_by_name(db, "Organic Carrots")
    crud_cart.add_item(db, user.id, carrots.id, 3)

    order_id = place_order(db, user.id)

    order = crud_order.get_order_with_items(db, order_id)
    assert order.total_amount == 8.97
    assert order.status == OrderStatus.processing
    assert order.delivery_address == "1 Main St"
    assert len(order.items) == 1
    assert order.items[0].quantity == 3
    assert order.items[0].price_at_purchase == 2.99
    assert product_by_name(db, "Organic Carrots").stock_quantity == 197
    assert crud_cart.get_cart_items(db, user.id) == []


def test_later_price_change_does_not_touch_placed_order(db, user):
    carrots = product_by_name(db, "Organic Carrots")
    crud_cart.add_item(db, user.id, carrots.id, 2)
    order_id = place_order(db, user.id)

    carrots.price_per_kg = 9.99
    db.commit()

    order = crud_order.get_order_with_items(db, order_id)
    assert order.items[0].price_at_purchase == 2.99
    assert order.total_amount == 5.98


def test_multi_line_total_is_rounded(db, user):
    crud_cart.add_item(db, user.id, product_by_name(db, "Organic Carrots").id, 0.333)  # 0.99567
    crud_cart.add_item(db, user.id, product_by_name(db, "Yellow Onions").id, 2)  # 2.98

    order_id = place_order(db, user.id)

    assert crud_order.get_order_by_id(db, order_id).total_amount == 3.98


def test_empty_cart_is_rejected(db, user):
    with pytest.raises(EmptyCartError):
        place_order(db, user.id)

    assert db.query(Order).count() == 0


def test_insufficient_stock_rolls_everything_back(db, user):
    carrots = product_by_name(db, "Organic Carrots")
    artichokes = product_by_name(db, "Artichokes")  # 40 kg left
    crud_cart.add_item(db, user.id, carrots.id, 2)
    crud_cart.add_item(db, user.id, artichokes.id, 41)

    with pytest.raises(InsufficientStockError) as exc_info:
        place_order(db, user.id)

    assert "Artichokes" in str(exc_info.value)
    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0
    assert product_by_name(db, "Organic Carrots").stock_quantity == 200
    assert product_by_name(db, "Artichokes").stock_quantity == 40
    assert len(crud_cart.get_cart_items(db, user.id)) == 2


def test_fault_mid_checkout_persists_nothing(db, user, monkeypatch):
    crud_cart.add_item(db, user.id, product_by_name(db, "Organic Carrots").id, 1)
    crud_cart.add_item(db, user.id, product_by_name(db, "Yellow Onions").id, 1)
    real_decrease_stock = crud_product.decrease_stock
    calls = []

    def fail_on_second_line(db, product_id, amount):
        calls.append(product_id)
        if len(calls) == 2:
            raise RuntimeError("connection lost")
        return real_decrease_stock(db, product_id, amount)

    monkeypatch.setattr(crud_product, "decrease_stock", fail_on_second_line)

    with pytest.raises(RuntimeError):
        place_order(db, user.id)

    assert db.query(Order).count() == 0
    assert db.query(OrderItem).count() == 0
    assert product_by_name(db, "Organic Carrots").stock_quantity == 200
    assert product_by_name(db, "Yellow Onions").stock_quantity == 300
    assert len(crud_cart.get_cart_items(db, user.id)) == 2


def test_checkout_selling_out_clears_in_stock(db, user):
    artichokes = product_by_name(db, "Artichokes")
    crud_cart.add_item(db, user.id, artichokes.id, 40)

    place_order(db, user.id)

    artichokes = product_by_name(db, "Artichokes")
    assert artichokes.stock_quantity == 0
    assert artichokes.in_stock is False


def test_cancel_restores_stock(db, user):
    artichokes = product_by_name(db, "Artichokes")
    crud_cart.add_item(db, user.id, artichokes.id, 40)
    order_id = place_order(db, user.id)

    assert OrderService.cancel_order(db, order_id) is True

    artichokes = product_by_name(db, "Artichokes")
    assert artichokes.stock_quantity == 40
    assert artichokes.in_stock is True
    assert crud_order.get_order_by_id(db, order_id).status == OrderStatus.cancelled


def test_cancel_is_refused_for_terminal_orders(db, user):
    crud_cart.add_item(db, user.id, product_by_name(db, "Organic Carrots").id, 1)
    order_id = place_order(db, user.id)
    assert OrderService.cancel_order(db, order_id) is True

    assert OrderService.cancel_order(db, order_id) is False
    assert product_by_name(db, "Organic Carrots").stock_quantity == 200


def test_cancel_is_refused_once_delivered(db, user):
    crud_cart.add_item(db, user.id, product_by_name(db, "Organic Carrots").id, 1)
    order_id = place_order(db, user.id)
    OrderService.update_status(db, order_id, OrderStatus.delivered)

    assert OrderService.cancel_order(db, order_id) is False
    assert product_by_name(db, "Organic Carrots").stock_quantity == 199


def test_cancel_unknown_order(db):
    assert OrderService.cancel_order(db, 12345) is False


def test_orders_listed_newest_first(db, user, other_user):
    carrots = product_by_name(db, "Organic Carrots")
    crud_cart.add_item(db, user.id, carrots.id, 1)
    first = place_order(db, user.id)
    crud_cart.add_item(db, user.id, carrots.id, 1)
    second = place_order(db, user.id)
    crud_cart.add_item(db, other_user.id, carrots.id, 1)
    place_order(db, other_user.id)

    orders = crud_order.get_user_orders(db, user.id)

    assert [o.id for o in orders] == [second, first]


@pytest.mark.parametrize(
    "current, target, allowed",
    [
        (OrderStatus.pending, OrderStatus.processing, True),
        (OrderStatus.processing, OrderStatus.shipped, True),
        (OrderStatus.shipped, OrderStatus.delivered, True),
        (OrderStatus.shipped, OrderStatus.cancelled, True),
        (OrderStatus.processing, OrderStatus.delivered, False),
        (OrderStatus.delivered, OrderStatus.cancelled, False),
        (OrderStatus.cancelled, OrderStatus.processing, False),
    ],
)
def test_can_transition(current, target, allowed):
    assert OrderService.can_transition(current, target) is allowed


def test_calculate_total():
    assert OrderService.calculate_total([(1, 3, 2.99)]) == 8.97
    assert OrderService.calculate_total([]) == 0


def test_estimated_delivery_is_three_to_five_days_out():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)

    for _ in range(20):
        delta = OrderService.estimate_delivery(now) - now
        assert timedelta(days=3) <= delta <= timedelta(days=5)


def test_concurrent_cancels_restock_once(db, user, session_factory, monkeypatch):
    artichokes = product_by_name(db, "Artichokes")
    crud_cart.add_item(db, user.id, artichokes.id, 10)
    order_id = place_order(db, user.id)
    assert product_by_name(db, "Artichokes").stock_quantity == 30

    # Both callers read the order as cancellable before either writes
    barrier = threading.Barrier(2, timeout=10)
    real_get_order_with_items = crud_order.get_order_with_items

    def read_then_wait(session, oid):
        order = real_get_order_with_items(session, oid)
        barrier.wait()
        return order

    monkeypatch.setattr(crud_order, "get_order_with_items", read_then_wait)
    results = []
    errors = []

    def cancel():
        session = session_factory()
        try:
            results.append(OrderService.cancel_order(session, order_id))
        except Exception as e:
            errors.append(e)
        finally:
            session.close()

    threads = [threading.Thread(target=cancel) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert sorted(results) == [False, True]
    assert product_by_name(db, "Artichokes").stock_quantity == 40
    assert crud_order.get_order_by_id(db, order_id).status == OrderStatus.cancelled
