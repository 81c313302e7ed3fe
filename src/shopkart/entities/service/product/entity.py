"""Entity: Product."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, model_validator

from src.shopkart.entities.core._base import Entity

from .validation import (
    check_description,
    check_image_url,
    check_name,
    check_price,
    ensure_valid,
    validate_product_fields,
)


def _field_getter(data: Any):
    if isinstance(data, dict):
        return data.get
    return lambda key, default=None: getattr(data, key, default)


class Product(Entity):
    """Product entity representing an item in the catalog.

    Every instance satisfies the field constraints: construction runs all
    field checks and raises ProductValidationError listing each violation.
    After construction, fields change only through the ``update_*`` methods,
    which validate the new value before assigning it.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(description="Display name, 4 to 50 characters")
    description: str = Field(description="Short description, 10 to 100 characters")
    price: float = Field(description="Unit price, zero or more")
    image_url: str = Field(alias="imageUrl", description="Absolute URL of the product image")

    @model_validator(mode="before")
    @classmethod
    def _check_constraints(cls, data: Any) -> Any:
        get = _field_getter(data)
        ensure_valid(
            validate_product_fields(
                get("name"),
                get("description"),
                get("price"),
                get("imageUrl", get("image_url")),
            )
        )
        return data

    def update_name(self, new_name: str) -> None:
        ensure_valid(check_name(new_name))
        self.name = new_name

    def update_description(self, new_description: str) -> None:
        ensure_valid(check_description(new_description))
        self.description = new_description

    def update_price(self, new_price: float) -> None:
        ensure_valid(check_price(new_price))
        self.price = float(new_price)

    def update_image_url(self, new_image_url: str) -> None:
        ensure_valid(check_image_url(new_image_url))
        self.image_url = new_image_url

    def __eq__(self, other: Any) -> bool:
        """Compare products by identity and business attributes."""
        if not isinstance(other, Product):
            return False

        return (
            self.id == other.id
            and self.name == other.name
            and self.description == other.description
            and self.price == other.price
            and self.image_url == other.image_url
        )

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.description,
            self.price,
            self.image_url,
        ))


class ProductCreate(BaseModel):
    """Request payload for a new product.

    Fields are optional here so that missing values are reported by the
    product's own validation rather than by request parsing.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    description: str | None = None
    # Strict so JSON booleans are rejected; integers are still accepted
    price: StrictFloat | None = None
    image_url: str | None = Field(default=None, alias="imageUrl")

    def to_entity(self) -> Product:
        return Product(
            name=self.name,
            description=self.description,
            price=self.price,
            image_url=self.image_url,
        )
