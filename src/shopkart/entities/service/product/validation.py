"""Field validation rules for products.

Each check returns every violated constraint for its field, so callers can
report all problems at once instead of stopping at the first.
"""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

from src.shopkart.core.exceptions import FieldViolation, ProductValidationError

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 50
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 100
MIN_PRICE = 0.0
IMAGE_URL_SCHEMES = ["http", "https", "ftp", "file"]

_url_adapter = TypeAdapter(
    Annotated[AnyUrl, UrlConstraints(allowed_schemes=IMAGE_URL_SCHEMES)]
)


def _check_text(
    value: Any, field: str, label: str, min_length: int, max_length: int
) -> list[FieldViolation]:
    if value is None:
        return [FieldViolation(field, f"{label} is required.")]
    if not isinstance(value, str):
        return [FieldViolation(field, f"{label} must be a string.")]

    violations = []
    if not value.strip():
        violations.append(FieldViolation(field, f"{label} is required."))
    if not min_length <= len(value) <= max_length:
        violations.append(
            FieldViolation(
                field,
                f"{label} must be between {min_length} and {max_length} characters.",
            )
        )
    return violations


def check_name(value: Any) -> list[FieldViolation]:
    return _check_text(value, "name", "Product name", NAME_MIN_LENGTH, NAME_MAX_LENGTH)


def check_description(value: Any) -> list[FieldViolation]:
    return _check_text(
        value,
        "description",
        "Product description",
        DESCRIPTION_MIN_LENGTH,
        DESCRIPTION_MAX_LENGTH,
    )


def check_price(value: Any) -> list[FieldViolation]:
    if value is None:
        return [FieldViolation("price", "Product price is required.")]
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return [FieldViolation("price", "Product price must be a number.")]
    if not math.isfinite(value):
        return [FieldViolation("price", "Product price must be a finite number.")]
    if value < MIN_PRICE:
        return [
            FieldViolation(
                "price", "Product price must be greater than or equal to 0."
            )
        ]
    return []


def check_image_url(value: Any) -> list[FieldViolation]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return [FieldViolation("imageUrl", "Product image URL is required.")]

    invalid = FieldViolation(
        "imageUrl", "Please provide a valid image URL for the product image."
    )
    if not isinstance(value, str) or value != value.strip():
        return [invalid]
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        return [invalid]
    return []


def validate_product_fields(
    name: Any, description: Any, price: Any, image_url: Any
) -> list[FieldViolation]:
    """Run every field check and collect the violations in field order."""
    return [
        *check_name(name),
        *check_description(description),
        *check_price(price),
        *check_image_url(image_url),
    ]


def ensure_valid(violations: list[FieldViolation]) -> None:
    """Raise ProductValidationError if any violation was collected."""
    if violations:
        raise ProductValidationError(violations)
