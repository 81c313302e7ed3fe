"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Request
from starlette.responses import JSONResponse

from src.shopkart.api.http.app_data import ApplicationDependencies
from src.shopkart.runtime.context import get_config

router = APIRouter(prefix="/health", tags=["health"])


def _database_type(app_deps: ApplicationDependencies) -> str:
    return app_deps.database_service.engine.dialect.name


@router.get("")
async def health() -> dict[str, str]:
    """Liveness probe: 200 OK as long as the process is running."""
    return {"status": "healthy", "service": get_config().app.name}


@router.get("/ready", response_model=None)
async def readiness(request: Request) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 200 when the database answers, 503 otherwise."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    config = get_config()

    try:
        db_healthy = app_deps.database_service.health_check()
        checks = {
            "database": {
                "status": "healthy" if db_healthy else "unhealthy",
                "type": _database_type(app_deps),
            }
        }
    except Exception as e:
        db_healthy = False
        checks = {"database": {"status": "unhealthy", "error": str(e)}}

    response = {
        "status": "ready" if db_healthy else "not_ready",
        "environment": config.app.environment,
        "checks": checks,
    }

    if not db_healthy:
        return JSONResponse(status_code=503, content=response)

    return response


@router.get("/database", response_model=None)
async def health_database(request: Request) -> dict[str, Any] | JSONResponse:
    """Database-specific health check with connection pool status."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies

    try:
        healthy = app_deps.database_service.health_check()
        pool_status = app_deps.database_service.get_pool_status()

        return {
            "status": "healthy" if healthy else "unhealthy",
            "type": _database_type(app_deps),
            "pool": pool_status,
        }
    except Exception as e:
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "error": str(e),
                "error_type": type(e).__name__,
            },
        )
