# tests/conftest.py

import logging

import pytest
from fastapi.testclient import TestClient

from products_api.db import Database
from products_api.main import create_app

# Suppress noisy logs from SQLAlchemy/FastAPI during tests for cleaner output
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
logging.getLogger("fastapi").setLevel(logging.WARNING)


@pytest.fixture
def database():
    # In-memory SQLite shared across the TestClient worker threads.
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def db_session(database):
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(database):
    app = create_app(database, frontend_url="")
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_product(client):
    def _create(name="Product 1", price=100, availability=True):
        response = client.post(
            "/api/products",
            json={"name": name, "price": price, "availability": availability},
        )
        assert response.status_code == 201
        return response.json()["data"]

    return _create
