# tests/test_repository.py

import pytest
from pydantic import ValidationError
from sqlalchemy.orm import Session

from products_api import repository
from products_api.db import Database
from products_api.repository import ProductNotFound


def test_create_assigns_id_and_default_availability(db_session: Session):
    product = repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})

    assert product.id is not None
    assert product.availability is True
    assert product.price == 49.5


def test_records_are_immutable(db_session: Session):
    product = repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})

    with pytest.raises(ValidationError):
        product.price = 1


def test_list_orders_by_id_descending(db_session: Session):
    created = [
        repository.create_product(db_session, {"name": f"Product {i}", "price": i + 1})
        for i in range(3)
    ]

    listed = repository.list_products(db_session)

    assert [p.id for p in listed] == [p.id for p in reversed(created)]


def test_get_missing_returns_none(db_session: Session):
    assert repository.get_product(db_session, 999) is None


def test_update_overwrites_only_given_fields(db_session: Session):
    product = repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})

    updated = repository.update_product(db_session, product.id, {"price": 59.0})

    assert updated.id == product.id
    assert updated.name == "Keyboard"
    assert updated.price == 59.0
    assert repository.get_product(db_session, product.id) == updated


def test_update_rejects_unknown_field(db_session: Session):
    product = repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})

    with pytest.raises(ValueError):
        repository.update_product(db_session, product.id, {"id": 42})


def test_mutations_on_missing_product_raise(db_session: Session):
    with pytest.raises(ProductNotFound):
        repository.update_product(db_session, 999, {"price": 1})
    with pytest.raises(ProductNotFound):
        repository.toggle_availability(db_session, 999)
    with pytest.raises(ProductNotFound):
        repository.delete_product(db_session, 999)


def test_toggle_availability_negates_stored_value(db_session: Session):
    product = repository.create_product(
        db_session, {"name": "Keyboard", "price": 49.5, "availability": False}
    )

    assert repository.toggle_availability(db_session, product.id).availability is True
    assert repository.toggle_availability(db_session, product.id).availability is False


def test_delete_removes_row(db_session: Session):
    product = repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})

    repository.delete_product(db_session, product.id)

    assert repository.get_product(db_session, product.id) is None


def test_reset_products_empties_table(database: Database, db_session: Session):
    repository.create_product(db_session, {"name": "Keyboard", "price": 49.5})
    db_session.close()

    repository.reset_products(database)

    with database.SessionLocal() as session:
        assert repository.list_products(session) == []
