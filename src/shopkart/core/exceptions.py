"""Domain-level exceptions.

Business rule violations are raised as subclasses of DomainException so the
HTTP layer and the CLI can translate them uniformly.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass


class DomainException(Exception):
    """Base class for all domain errors."""


@dataclass(frozen=True)
class FieldViolation:
    """A single broken field constraint."""

    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class ProductValidationError(DomainException):
    """Input violates one or more product field constraints."""

    def __init__(self, violations: Sequence[FieldViolation]) -> None:
        self.violations = list(violations)
        super().__init__(" ".join(v.message for v in self.violations))

    @classmethod
    def single(cls, field: str, message: str) -> ProductValidationError:
        return cls([FieldViolation(field, message)])


class ProductNotFoundError(DomainException):
    """A referenced product id or name has no matching record."""

    def __init__(self, message: str, key: object = None) -> None:
        self.key = key
        super().__init__(message)

    @classmethod
    def for_id(cls, product_id: int) -> ProductNotFoundError:
        return cls(f"Product with id {product_id} not found", product_id)

    @classmethod
    def for_name(cls, name: str) -> ProductNotFoundError:
        return cls(f"Product with name '{name}' not found", name)
