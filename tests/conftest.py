# tests/conftest.py - shared fixtures: a fresh seeded SQLite file per test

import os

# Settings are read at import time
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest
from fastapi.testclient import TestClient

from app.crud import user as crud_user
from app.db.init_db import init_db
from app.db.session import create_db_engine, create_session_factory
from app.main import create_app
from app.models.product import Product
from app.schemas.schemas import UserRegister

PASSWORD = "supersecret1"


def make_user(db, email, first_name="Test"):
    return crud_user.create_user(
        db,
        UserRegister(
            firstName=first_name,
            lastName="Shopper",
            email=email,
            mobile="5550100",
            countryId=1,
            password=PASSWORD,
            confirmPassword=PASSWORD,
        ),
    )


def product_by_name(db, name):
    return db.query(Product).populate_existing().filter(Product.name == name).one()


def register(client, email, first_name="Test"):
    return client.post(
        "/api/auth/register",
        json={
            "firstName": first_name,
            "lastName": "Shopper",
            "email": email,
            "mobile": "5550100",
            "countryId": 1,
            "password": PASSWORD,
            "confirmPassword": PASSWORD,
        },
    )


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite:///{tmp_path / 'veggie-test.db'}"


@pytest.fixture
def engine(database_url):
    engine = create_db_engine(database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = create_session_factory(engine)
    init_db(engine, factory)
    return factory


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def user(db):
    return make_user(db, "alice@example.com", "Alice")


@pytest.fixture
def other_user(db):
    return make_user(db, "bob@example.com", "Bob")


@pytest.fixture
def app(database_url):
    return create_app(database_url)


@pytest.fixture
def client(app):
    with TestClient(app) as client:
        yield client


@pytest.fixture
def auth_client(client):
    """Client holding the session cookie of a freshly registered user."""
    response = register(client, "alice@example.com", "Alice")
    assert response.status_code == 201
    return client


@pytest.fixture
def second_client(client):
    """Separate cookie jar on the same running app, logged in as another user."""
    other = TestClient(client.app)
    response = register(other, "bob@example.com", "Bob")
    assert response.status_code == 201
    return other


@pytest.fixture
def fresh_session(client):
    """Session on the app's own engine, for checking what the API persisted."""
    session = client.app.state.session_factory()
    yield session
    session.close()
