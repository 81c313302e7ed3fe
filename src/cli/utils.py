"""Shared helpers for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

from src.shopkart.core.services import DbSessionService

console = Console()


@contextmanager
def database_service() -> Iterator[DbSessionService]:
    """Yield a database service built from the active configuration.

    The engine is disposed when the command finishes.
    """
    service = DbSessionService()
    try:
        yield service
    finally:
        service.dispose()
