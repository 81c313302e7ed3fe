"""Catalog management CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich.table import Table

from src.shopkart.core.exceptions import DomainException
from src.shopkart.core.services import DbManageService, ProductService
from src.shopkart.entities.service.product import (
    ProductCreate,
    SqlProductRepository,
)
from src.shopkart.runtime.context import get_config

from . import utils
from .utils import console

products_app = typer.Typer(help="Browse and edit the product catalog")


@contextmanager
def product_service() -> Iterator[ProductService]:
    with utils.database_service() as database_service:
        if get_config().database.create_tables:
            DbManageService(database_service).create_all()

        with database_service.session_scope() as session:
            yield ProductService(SqlProductRepository(session))


@products_app.command("list")
def list_products() -> None:
    """List every product in the catalog."""
    with product_service() as service:
        products = service.get_all_products()

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan", justify="right", no_wrap=True)
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Description")
    table.add_column("Price", style="magenta", justify="right", no_wrap=True)
    table.add_column("Image URL", style="blue")

    for product in products:
        table.add_row(
            str(product.id),
            product.name,
            product.description,
            f"{product.price:.2f}",
            product.image_url,
        )

    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@products_app.command("add")
def add_product(
    name: str = typer.Argument(..., help="Product name (4-50 characters)"),
    description: str = typer.Argument(
        ..., help="Product description (10-100 characters)"
    ),
    price: float = typer.Argument(..., help="Unit price, zero or more"),
    image_url: str = typer.Argument(..., help="Absolute URL of the product image"),
) -> None:
    """Add a product to the catalog."""
    try:
        product = ProductCreate(
            name=name, description=description, price=price, image_url=image_url
        ).to_entity()
        with product_service() as service:
            created = service.create_product(product)
    except DomainException as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print(
        f"[green]✅ Created product '{created.name}' with id {created.id}[/green]"
    )
