"""Main CLI application module."""

import typer

from .db_commands import db_app
from .product_commands import products_app
from .server_commands import serve

# Create the main CLI application
app = typer.Typer(
    help="Shopkart catalog service CLI",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Register command groups
app.add_typer(db_app, name="db")
app.add_typer(products_app, name="products")
app.command("serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
