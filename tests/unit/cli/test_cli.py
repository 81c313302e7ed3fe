from contextlib import contextmanager
from unittest.mock import MagicMock

import pytest
from typer.testing import CliRunner

from src.cli import app
from src.shopkart.core.services import DbSessionService

runner = CliRunner()


@pytest.fixture
def cli_database(database_service: DbSessionService, monkeypatch) -> DbSessionService:
    """Point every CLI command at the in-memory test database."""
    @contextmanager
    def _shared_database():
        yield database_service

    monkeypatch.setattr("src.cli.utils.database_service", _shared_database)
    return database_service


def test_help_lists_command_groups():
    result = runner.invoke(app, ["--help"])

    assert result.exit_code == 0
    assert "products" in result.stdout
    assert "db" in result.stdout


def test_db_init(cli_database):
    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    assert "Database tables created" in result.stdout


def test_products_list_empty(cli_database):
    result = runner.invoke(app, ["products", "list"])

    assert result.exit_code == 0
    assert "No products found" in result.stdout


def test_products_add_then_list(cli_database):
    added = runner.invoke(
        app,
        [
            "products",
            "add",
            "Desk Lamp",
            "Adjustable LED desk lamp",
            "34.5",
            "https://cdn.example.com/lamp.png",
        ],
    )
    assert added.exit_code == 0, added.stdout
    assert "Created product 'Desk Lamp' with id 1" in added.stdout

    listed = runner.invoke(app, ["products", "list"])
    assert listed.exit_code == 0
    assert "Desk Lamp" in listed.stdout
    assert "34.50" in listed.stdout


def test_products_add_invalid(cli_database):
    result = runner.invoke(
        app, ["products", "add", "ab", "Adjustable LED desk lamp", "10", "not a url"]
    )

    assert result.exit_code == 1
    assert "Product name must be between 4 and 50 characters." in result.stdout


def test_database_service_is_disposed_after_command(
    database_service: DbSessionService, monkeypatch
):
    dispose = MagicMock(wraps=database_service.dispose)
    monkeypatch.setattr(database_service, "dispose", dispose)
    monkeypatch.setattr("src.cli.utils.DbSessionService", lambda: database_service)

    result = runner.invoke(app, ["db", "init"])

    assert result.exit_code == 0
    dispose.assert_called_once_with()
