"""Product database table model."""

from sqlmodel import Field

from src.shopkart.entities.core._base import EntityTable


class ProductTable(EntityTable, table=True):
    """Database persistence model for products.

    This represents how the Product entity is stored in the database.
    It's separate from the domain entity so persistence metadata such as
    the audit timestamps never leaks into the API.
    """

    __tablename__ = "products"

    name: str = Field(index=True, max_length=50)
    description: str = Field(max_length=100)
    price: float
    image_url: str
