# products_api/schemas.py

import math
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import PydanticCustomError

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 100  # matches the products.name column

NAME_EMPTY = "Name cannot be empty"
PRICE_EMPTY = "Price cannot be empty"
AVAILABILITY_INVALID = "Availability must be either true or false"

# Messages for body fields that are absent altogether.
REQUIRED_MESSAGES = {
    "name": NAME_EMPTY,
    "price": PRICE_EMPTY,
    "availability": AVAILABILITY_INVALID,
}


def parse_availability(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value in ("true", "false"):
        return value == "true"
    raise PydanticCustomError("availability_invalid", AVAILABILITY_INVALID)


class ProductBase(BaseModel):
    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="The product name",
        examples=["Monitor Curvo 40 Pulgadas"],
    )
    price: float = Field(..., gt=0, description="The product price", examples=[399.99])

    @field_validator("name", mode="before")
    @classmethod
    def check_name(cls, value: Any) -> str:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("name_empty", NAME_EMPTY)
        if not isinstance(value, str):
            raise PydanticCustomError("name_type", "Name must be a string")
        if len(value) < NAME_MIN_LENGTH:
            raise PydanticCustomError(
                "name_too_short", f"Name must be at least {NAME_MIN_LENGTH} characters long"
            )
        if len(value) > NAME_MAX_LENGTH:
            raise PydanticCustomError(
                "name_too_long", f"Name must be at most {NAME_MAX_LENGTH} characters long"
            )
        return value

    @field_validator("price", mode="before")
    @classmethod
    def check_price(cls, value: Any) -> float:
        if value is None or (isinstance(value, str) and not value.strip()):
            raise PydanticCustomError("price_empty", PRICE_EMPTY)
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise PydanticCustomError("price_type", "Price must be a number")
        try:
            price = float(value)
        except ValueError:
            raise PydanticCustomError("price_type", "Price must be a number")
        if not math.isfinite(price):
            raise PydanticCustomError("price_type", "Price must be a number")
        if price <= 0:
            raise PydanticCustomError("price_not_positive", "Price must be greater than 0")
        return price


class ProductCreate(ProductBase):
    availability: Optional[bool] = Field(
        None, description="The product availability (defaults to true)", examples=[True]
    )

    @field_validator("availability", mode="before")
    @classmethod
    def check_availability(cls, value: Any) -> Optional[bool]:
        if value is None:
            return None
        return parse_availability(value)


class ProductUpdate(ProductBase):
    availability: bool = Field(..., description="The product availability", examples=[True])

    @field_validator("availability", mode="before")
    @classmethod
    def check_availability(cls, value: Any) -> bool:
        return parse_availability(value)


# Immutable value record handed out by the repository in place of live ORM rows.
class ProductResponse(BaseModel):
    id: int = Field(..., description="The product ID", examples=[1])
    name: str = Field(..., description="The product name")
    price: float = Field(..., description="The product price")
    availability: bool = Field(..., description="The product availability")

    model_config = ConfigDict(from_attributes=True, frozen=True)


class ProductEnvelope(BaseModel):
    data: ProductResponse


class ProductListEnvelope(BaseModel):
    data: List[ProductResponse]


class MessageEnvelope(BaseModel):
    data: str = Field(..., examples=["Product deleted"])


class ErrorResponse(BaseModel):
    error: str = Field(..., examples=["Product not found"])


class FieldError(BaseModel):
    type: str = "field"
    value: Optional[Any] = None
    msg: str
    path: str
    location: str


class ValidationErrorResponse(BaseModel):
    errors: List[FieldError]
