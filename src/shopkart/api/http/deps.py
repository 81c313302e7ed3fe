"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.shopkart.api.http.app_data import ApplicationDependencies
from src.shopkart.core.services import ProductService
from src.shopkart.entities.service.product import (
    ProductRepository,
    SqlProductRepository,
)


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a database session that lives for the duration of the request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    session = app_deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_product_repository(
    session: Session = Depends(get_db_session),
) -> ProductRepository:
    return SqlProductRepository(session)


def get_product_service(
    repository: ProductRepository = Depends(get_product_repository),
) -> ProductService:
    return ProductService(repository)
