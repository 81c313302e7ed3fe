"""Schema management for the catalog database."""

from loguru import logger
from sqlmodel import SQLModel

from .db_session import DbSessionService


class DbManageService:
    def __init__(self, db_session_service: DbSessionService):
        self._db = db_session_service

    def create_all(self) -> None:
        """Create all database tables."""
        from src.shopkart.entities.service.product.table import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._db.engine)
        logger.info("Database initialized with tables.")
