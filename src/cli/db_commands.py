"""Database management CLI commands."""

import typer

from src.shopkart.runtime.init_db import init_db

from . import utils
from .utils import console

db_app = typer.Typer(help="Manage the catalog database")


@db_app.command("init")
def init_database() -> None:
    """Create all catalog tables."""
    try:
        with utils.database_service() as database_service:
            init_db(database_service)
    except Exception as e:
        console.print(f"[red]❌ Failed to initialize database: {e}[/red]")
        raise typer.Exit(code=1) from e

    console.print("[green]✅ Database tables created[/green]")
