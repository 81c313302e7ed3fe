"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: Domain model with business logic and validation
- table.py: Database persistence model
- repository.py: Data access layer
"""

from .service.product import Product, ProductRepository, ProductTable

__all__ = ["Product", "ProductRepository", "ProductTable"]
