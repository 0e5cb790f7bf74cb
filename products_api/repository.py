# products_api/repository.py

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from .db import Database
from .models import Product
from .schemas import ProductResponse

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "price", "availability")


class ProductNotFound(Exception):
    """Raised when a mutation targets a product id that is not stored."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} not found")
        self.product_id = product_id


def _to_record(db_product: Product) -> ProductResponse:
    return ProductResponse.model_validate(db_product)


def _get_row(db: Session, product_id: int) -> Optional[Product]:
    # Session.get serves a row already loaded in this session without another query.
    return db.get(Product, product_id)


def _get_row_or_raise(db: Session, product_id: int) -> Product:
    db_product = _get_row(db, product_id)
    if db_product is None:
        raise ProductNotFound(product_id)
    return db_product


def _commit(db: Session, db_product: Product) -> ProductResponse:
    try:
        db.add(db_product)
        db.commit()
        db.refresh(db_product)
    except Exception:
        db.rollback()
        raise
    return _to_record(db_product)


def list_products(db: Session) -> List[ProductResponse]:
    products = db.query(Product).order_by(Product.id.desc()).all()
    logger.debug(f"Product Service: Retrieved {len(products)} products.")
    return [_to_record(product) for product in products]


def get_product(db: Session, product_id: int) -> Optional[ProductResponse]:
    db_product = _get_row(db, product_id)
    if db_product is None:
        return None
    return _to_record(db_product)


def create_product(db: Session, fields: Dict[str, Any]) -> ProductResponse:
    values = {key: fields[key] for key in UPDATABLE_FIELDS if fields.get(key) is not None}
    values.setdefault("availability", True)
    record = _commit(db, Product(**values))
    logger.info(
        f"Product Service: Product '{record.name}' (ID: {record.id}) created successfully."
    )
    return record


def update_product(db: Session, product_id: int, fields: Dict[str, Any]) -> ProductResponse:
    """Overwrite only the given fields of an existing product."""
    db_product = _get_row_or_raise(db, product_id)
    for key, value in fields.items():
        if key not in UPDATABLE_FIELDS:
            raise ValueError(f"Cannot update product field '{key}'")
        setattr(db_product, key, value)
    record = _commit(db, db_product)
    logger.info(f"Product Service: Product {product_id} updated successfully.")
    return record


def toggle_availability(db: Session, product_id: int) -> ProductResponse:
    db_product = _get_row_or_raise(db, product_id)
    db_product.availability = not db_product.availability
    record = _commit(db, db_product)
    logger.info(
        f"Product Service: Product {product_id} availability set to {record.availability}."
    )
    return record


def delete_product(db: Session, product_id: int) -> None:
    db_product = _get_row_or_raise(db, product_id)
    try:
        db.delete(db_product)
        db.commit()
    except Exception:
        db.rollback()
        raise
    logger.info(f"Product Service: Product {product_id} deleted successfully.")


def reset_products(database: Database) -> None:
    """Drop and recreate every table, leaving an empty products table."""
    database.drop_tables()
    database.create_tables()
    logger.info("Product Service: Database cleared successfully.")
