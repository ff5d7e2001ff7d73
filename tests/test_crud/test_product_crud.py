from app.crud import country as crud_country
from app.crud import product as crud_product
from app.db.init_db import init_db
from app.db.seed import COUNTRIES, PRODUCTS
from app.models.models import Country
from app.models.product import Product
from app.schemas.product import ProductFilters, ProductUpdate

from conftest import product_by_name


def test_seed_is_idempotent(db, engine, session_factory):
    assert db.query(Product).count() == len(PRODUCTS)

    seeded = init_db(engine, session_factory)

    assert seeded == {"countries": 0, "products": 0}
    assert db.query(Product).count() == len(PRODUCTS)
    assert db.query(Country).count() == len(COUNTRIES)


def test_seeded_in_stock_flag_matches_quantity(db):
    for product in db.query(Product).all():
        assert product.in_stock == (product.stock_quantity > 0)
    assert product_by_name(db, "Fresh Corn").in_stock is False


def test_default_page_is_sorted_by_name(db):
    result = crud_product.get_products(db)

    names = [p.name for p in result["items"]]
    assert len(names) == 12
    assert names == sorted(names)
    assert result["total"] == len(PRODUCTS)
    assert result["page"] == 1
    assert result["page_size"] == 12
    assert result["total_pages"] == 5


def test_last_page_holds_the_remainder(db):
    result = crud_product.get_products(db, page=5, page_size=12)

    assert len(result["items"]) == len(PRODUCTS) - 4 * 12


def test_filter_by_category(db):
    result = crud_product.get_products(db, ProductFilters(category="Leafy Greens"), page_size=50)

    assert result["total"] == 8
    assert {p.category for p in result["items"]} == {"Leafy Greens"}


def test_search_matches_name_or_description(db):
    result = crud_product.get_products(db, ProductFilters(search="potato"), page_size=50)

    names = {p.name for p in result["items"]}
    assert names == {"Sweet Potatoes", "Russet Potatoes", "Red Potatoes"}


def test_filter_out_of_stock(db):
    result = crud_product.get_products(db, ProductFilters(in_stock=False))

    assert [p.name for p in result["items"]] == ["Fresh Corn"]


def test_price_bounds_and_sorting(db):
    filters = ProductFilters(min_price=2, max_price=3, sort_by="price", sort_order="desc")
    result = crud_product.get_products(db, filters, page_size=50)

    prices = [p.price_per_kg for p in result["items"]]
    assert prices
    assert all(2 <= price <= 3 for price in prices)
    assert prices == sorted(prices, reverse=True)


def test_sort_by_stock_ascending(db):
    result = crud_product.get_products(db, ProductFilters(sort_by="stock"), page_size=3)

    assert result["items"][0].name == "Fresh Corn"


def test_empty_result_is_not_an_error(db):
    result = crud_product.get_products(db, ProductFilters(search="dragonfruit"))

    assert result["items"] == []
    assert result["total"] == 0
    assert result["total_pages"] == 0


def test_categories_are_distinct_and_sorted(db):
    categories = crud_product.get_categories(db)

    assert categories == sorted(set(categories))
    assert len(categories) == 9
    assert "Root Vegetables" in categories


def test_featured_products_are_in_stock(db):
    featured = crud_product.get_featured_products(db, limit=8)

    assert len(featured) == 8
    assert all(p.in_stock for p in featured)


def test_update_product_recomputes_in_stock(db):
    carrots = product_by_name(db, "Organic Carrots")

    updated = crud_product.update_product(db, carrots.id, ProductUpdate(stock_quantity=0))
    assert updated.in_stock is False

    updated = crud_product.update_product(db, carrots.id, ProductUpdate(stock_quantity=5, price_per_kg=3.5))
    assert updated.in_stock is True
    assert updated.price_per_kg == 3.5


def test_update_unknown_product_returns_none(db):
    assert crud_product.update_product(db, 999999, ProductUpdate(name="Ghost")) is None


def test_decrease_stock_refuses_to_oversell(db):
    artichokes = product_by_name(db, "Artichokes")  # 40 kg

    assert crud_product.decrease_stock(db, artichokes.id, 41) is False
    assert crud_product.decrease_stock(db, artichokes.id, 40) is True
    db.commit()

    db.refresh(artichokes)
    assert artichokes.stock_quantity == 0
    assert artichokes.in_stock is False


def test_update_stock_sets_flag(db):
    corn = product_by_name(db, "Fresh Corn")

    assert crud_product.update_stock(db, corn.id, 25) is True

    db.refresh(corn)
    assert corn.stock_quantity == 25
    assert corn.in_stock is True


def test_country_lookup_by_code(db):
    country = crud_country.get_country_by_code(db, "gb")

    assert country.name == "United Kingdom"
    assert country.phone_code == "+44"
    assert crud_country.get_country_by_id(db, country.id).code == "GB"
    assert crud_country.get_country_by_code(db, "ZZ") is None
