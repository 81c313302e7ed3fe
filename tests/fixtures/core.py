from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from src.shopkart.core.services import DbManageService, DbSessionService, ProductService
from src.shopkart.entities.service.product import Product, SqlProductRepository
from src.shopkart.runtime.config.config_data import (
    AppConfig,
    ConfigData,
    DatabaseConfig,
)

__all__ = [
    "catalog_config",
    "client",
    "database_service",
    "make_product",
    "product_service",
    "repository",
    "session",
    "valid_product_data",
]


@pytest.fixture
def catalog_config() -> ConfigData:
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite:///:memory:", environment_mode="test"),
    )


@pytest.fixture
def database_service(catalog_config: ConfigData) -> Generator[DbSessionService]:
    """A database service on a fresh in-memory database with tables created."""
    service = DbSessionService(catalog_config)
    DbManageService(service).create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def session(database_service: DbSessionService) -> Generator[Session]:
    session = database_service.get_session()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def repository(session: Session) -> SqlProductRepository:
    return SqlProductRepository(session)


@pytest.fixture
def product_service(repository: SqlProductRepository) -> ProductService:
    return ProductService(repository)


@pytest.fixture
def valid_product_data() -> dict[str, Any]:
    """Request body for a valid product, as a client would send it."""
    return {
        "name": "Test Product",
        "description": "This is a test product",
        "price": 99.99,
        "imageUrl": "https://example.com/image.jpg",
    }


@pytest.fixture
def make_product() -> Callable[..., Product]:
    def _make_product(**overrides: Any) -> Product:
        fields = {
            "name": "Desk Lamp",
            "description": "Adjustable LED desk lamp",
            "price": 34.5,
            "image_url": "https://cdn.example.com/lamp.png",
        }
        fields.update(overrides)
        return Product(**fields)

    return _make_product


@pytest.fixture
def client(
    database_service: DbSessionService, session: Session
) -> Generator[TestClient]:
    """TestClient bound to the in-memory database without running the lifespan."""
    from src.shopkart.api.http.app import app
    from src.shopkart.api.http.app_data import ApplicationDependencies
    from src.shopkart.api.http.deps import get_db_session

    def _get_db_session() -> Generator[Session]:
        yield session

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    app.dependency_overrides[get_db_session] = _get_db_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        del app.state.app_dependencies
