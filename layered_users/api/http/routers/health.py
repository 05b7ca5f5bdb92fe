"""Health check endpoints router for monitoring service availability."""

from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from layered_users.api.http.app_data import ApplicationDependencies
from layered_users.api.http.deps import get_app_dependencies

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health() -> dict[str, str]:
    """Liveness probe: 200 as long as the process is running."""
    return {"status": "healthy"}


@router.get("/ready", response_model=None)
def readiness(
    app_deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> dict[str, Any] | JSONResponse:
    """Readiness probe: 503 when the configured database is unreachable."""
    if app_deps.database is None:
        return {"status": "ready", "storage": "memory"}

    if not app_deps.database.health_check():
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "storage": "database"},
        )
    return {"status": "ready", "storage": "database"}
