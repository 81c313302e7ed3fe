"""Data access for products.

ProductRepository is the gateway the service depends on. SqlProductRepository
implements it with one explicit SQLModel statement per operation and commits
after every write, so each call is atomic on its own.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from loguru import logger
from sqlmodel import Session, select

from src.shopkart.core.exceptions import ProductNotFoundError
from src.shopkart.core.lookup import Found, NotFound

from .entity import Product
from .table import ProductTable
from .validation import ensure_valid, validate_product_fields


class ProductRepository(ABC):
    """Storage gateway for Product entities."""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Insert a product without an id, or overwrite the stored one.

        Returns the stored product; a new product comes back with its id.
        """

    @abstractmethod
    def find_all(self) -> list[Product]:
        """Return every product, ordered by id."""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Found[Product] | NotFound:
        """Look a product up by id."""

    @abstractmethod
    def find_by_name(self, name: str) -> Found[Product] | NotFound:
        """Look a product up by exact name."""

    @abstractmethod
    def exists_by_id(self, product_id: int) -> bool:
        """Report whether a product with this id is stored."""

    @abstractmethod
    def delete_by_id(self, product_id: int) -> None:
        """Remove the product with this id, if any."""


class SqlProductRepository(ProductRepository):
    """Data-access layer for products backed by a SQLModel session."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, product: Product) -> Product:
        # Fields can be reassigned directly, so check again before writing
        ensure_valid(
            validate_product_fields(
                product.name, product.description, product.price, product.image_url
            )
        )

        if product.id is None:
            row = ProductTable(
                name=product.name,
                description=product.description,
                price=product.price,
                image_url=product.image_url,
            )
        else:
            row = self._session.get(ProductTable, product.id)
            if row is None:
                raise ProductNotFoundError.for_id(product.id)
            row.name = product.name
            row.description = product.description
            row.price = product.price
            row.image_url = product.image_url

        self._session.add(row)
        self._session.commit()
        self._session.refresh(row)
        logger.debug("Saved product row {}", row.id)
        return self._to_entity(row)

    def find_all(self) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.id)
        return [self._to_entity(row) for row in self._session.exec(statement)]

    def find_by_id(self, product_id: int) -> Found[Product] | NotFound:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return NotFound(product_id)
        return Found(self._to_entity(row))

    def find_by_name(self, name: str) -> Found[Product] | NotFound:
        # Names are not unique; the oldest match wins
        statement = (
            select(ProductTable)
            .where(ProductTable.name == name)
            .order_by(ProductTable.id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return NotFound(name)
        return Found(self._to_entity(row))

    def exists_by_id(self, product_id: int) -> bool:
        statement = select(ProductTable.id).where(ProductTable.id == product_id)
        return self._session.exec(statement).first() is not None

    def delete_by_id(self, product_id: int) -> None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return
        self._session.delete(row)
        self._session.commit()
        logger.debug("Deleted product row {}", product_id)

    @staticmethod
    def _to_entity(row: ProductTable) -> Product:
        return Product.model_validate(row, from_attributes=True)
