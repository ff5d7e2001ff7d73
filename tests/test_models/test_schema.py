import pytest
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError

from app.models.models import CartItem, User

from conftest import product_by_name


def test_foreign_keys_are_enforced(db):
    assert db.execute(text("PRAGMA foreign_keys")).scalar() == 1

    db.add(CartItem(user_id=424242, product_id=1, quantity=1))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_one_cart_row_per_user_and_product(db, user):
    carrots = product_by_name(db, "Organic Carrots")
    db.add(CartItem(user_id=user.id, product_id=carrots.id, quantity=1))
    db.commit()

    db.add(CartItem(user_id=user.id, product_id=carrots.id, quantity=2))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_email_is_unique(db, user):
    db.add(
        User(
            first_name="Copy",
            last_name="Cat",
            email=user.email,
            mobile="1",
            country_id=1,
            password_hash="x",
        )
    )
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_user_relationships(db, user):
    carrots = product_by_name(db, "Organic Carrots")
    db.add(CartItem(user_id=user.id, product_id=carrots.id, quantity=1.25))
    db.commit()
    db.refresh(user)

    assert [item.product.name for item in user.cart_items] == ["Organic Carrots"]
    assert user.wishlist_items == []
