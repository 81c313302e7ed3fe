"""Entity package: Product."""

from .entity import Product, ProductCreate
from .repository import ProductRepository, SqlProductRepository
from .table import ProductTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductRepository",
    "ProductTable",
    "SqlProductRepository",
]
