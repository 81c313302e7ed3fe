"""Business operations on the product catalog."""

from __future__ import annotations

from loguru import logger

from src.shopkart.core.exceptions import ProductNotFoundError, ProductValidationError
from src.shopkart.core.lookup import Found
from src.shopkart.entities.service.product.entity import Product
from src.shopkart.entities.service.product.repository import ProductRepository
from src.shopkart.entities.service.product.validation import (
    check_description,
    check_image_url,
    check_name,
    check_price,
    ensure_valid,
)


class ProductService:
    def __init__(self, repository: ProductRepository):
        self._repository = repository

    def create_product(self, product: Product | None) -> Product:
        """Persist a new product and return it with its assigned id.

        Raises:
            ProductValidationError: if ``product`` is None or already has an id.
        """
        if product is None:
            raise ProductValidationError.single("product", "Product is required.")
        if product.id is not None:
            raise ProductValidationError.single(
                "id", "A new product must not have an id."
            )

        created = self._repository.save(product)
        logger.info("Created product {} ({})", created.id, created.name)
        return created

    def get_all_products(self) -> list[Product]:
        return self._repository.find_all()

    def get_product_by_id(self, product_id: int) -> Product:
        result = self._repository.find_by_id(product_id)
        if isinstance(result, Found):
            return result.value

        logger.warning("Product {} not found", product_id)
        raise ProductNotFoundError.for_id(product_id)

    def get_product_by_name(self, name: str) -> Product:
        result = self._repository.find_by_name(name)
        if isinstance(result, Found):
            return result.value

        logger.warning("Product named {!r} not found", name)
        raise ProductNotFoundError.for_name(name)

    # Updates validate first, so invalid input never reaches the repository

    def update_product_price(self, product_id: int, new_price: float) -> Product:
        ensure_valid(check_price(new_price))
        product = self.get_product_by_id(product_id)
        product.update_price(new_price)
        return self._save_update(product, "price")

    def update_product_name(self, product_id: int, new_name: str) -> Product:
        ensure_valid(check_name(new_name))
        product = self.get_product_by_id(product_id)
        product.update_name(new_name)
        return self._save_update(product, "name")

    def update_product_description(
        self, product_id: int, new_description: str
    ) -> Product:
        ensure_valid(check_description(new_description))
        product = self.get_product_by_id(product_id)
        product.update_description(new_description)
        return self._save_update(product, "description")

    def update_product_image_url(self, product_id: int, new_image_url: str) -> Product:
        ensure_valid(check_image_url(new_image_url))
        product = self.get_product_by_id(product_id)
        product.update_image_url(new_image_url)
        return self._save_update(product, "imageUrl")

    def delete_product(self, product_id: int) -> bool:
        """Delete a product by id.

        Returns:
            True if the product existed and was removed, False otherwise.
        """
        if not self._repository.exists_by_id(product_id):
            logger.warning("Cannot delete product {}: not found", product_id)
            return False

        self._repository.delete_by_id(product_id)
        logger.info("Deleted product {}", product_id)
        return True

    def _save_update(self, product: Product, field: str) -> Product:
        updated = self._repository.save(product)
        logger.info("Updated {} of product {}", field, updated.id)
        return updated
