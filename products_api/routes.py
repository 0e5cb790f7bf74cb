# products_api/routes.py

import logging

from fastapi import APIRouter, Depends, Path, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from . import repository
from .db import get_db
from .schemas import (
    ErrorResponse,
    MessageEnvelope,
    ProductCreate,
    ProductEnvelope,
    ProductListEnvelope,
    ProductUpdate,
    ValidationErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Products"])

NOT_FOUND_MESSAGE = "Product not found"

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Product not found"}}
BAD_ID = {400: {"model": ValidationErrorResponse, "description": "Bad request - Invalid product ID"}}
BAD_DATA = {400: {"model": ValidationErrorResponse, "description": "Bad request - Invalid product data"}}


def product_not_found(product_id: int) -> JSONResponse:
    logger.warning(f"Product Service: Product with ID {product_id} not found.")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"error": NOT_FOUND_MESSAGE}
    )


@router.get(
    "",
    response_model=ProductListEnvelope,
    summary="Get all products from the database",
    description="Retrieve a list of products, newest first",
)
def get_products(db: Session = Depends(get_db)):
    products = repository.list_products(db)
    return {"data": products}


@router.get(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**NOT_FOUND, **BAD_ID},
    summary="Get a product by ID",
)
def get_product_by_id(
    id: int = Path(..., description="The product ID"),
    db: Session = Depends(get_db),
):
    logger.info(f"Product Service: Fetching product with ID: {id}")
    product = repository.get_product(db, id)
    if product is None:
        return product_not_found(id)
    return {"data": product}


@router.post(
    "",
    response_model=ProductEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=BAD_DATA,
    summary="Create a new product",
    description="Returns the created product",
)
def create_product(product: ProductCreate, db: Session = Depends(get_db)):
    logger.info(f"Product Service: Creating product: {product.name}")
    created = repository.create_product(db, product.model_dump(exclude_none=True))
    return {"data": created}


@router.put(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**NOT_FOUND, **BAD_DATA},
    summary="Update a product by ID",
    description="Returns the updated product",
)
def update_product(
    product: ProductUpdate,
    id: int = Path(..., description="The product ID"),
    db: Session = Depends(get_db),
):
    logger.info(f"Product Service: Updating product with ID: {id}")
    if repository.get_product(db, id) is None:
        return product_not_found(id)
    updated = repository.update_product(db, id, product.model_dump())
    return {"data": updated}


@router.patch(
    "/{id}",
    response_model=ProductEnvelope,
    responses={**NOT_FOUND, **BAD_ID},
    summary="Update the availability of a product by ID",
    description="Flips the stored availability and returns the updated product",
)
def update_availability(
    id: int = Path(..., description="The product ID"),
    db: Session = Depends(get_db),
):
    if repository.get_product(db, id) is None:
        return product_not_found(id)
    product = repository.toggle_availability(db, id)
    return {"data": product}


@router.delete(
    "/{id}",
    response_model=MessageEnvelope,
    responses={**NOT_FOUND, **BAD_ID},
    summary="Delete a product by ID",
    description="Returns a confirmation message",
)
def delete_product(
    id: int = Path(..., description="The product ID"),
    db: Session = Depends(get_db),
):
    logger.info(f"Product Service: Attempting to delete product with ID: {id}")
    if repository.get_product(db, id) is None:
        return product_not_found(id)
    repository.delete_product(db, id)
    return {"data": "Product deleted"}
