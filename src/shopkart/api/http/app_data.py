from dataclasses import dataclass

from src.shopkart.core.services import DbSessionService


@dataclass
class ApplicationDependencies:
    database_service: DbSessionService
