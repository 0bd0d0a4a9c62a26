"""Health check routes."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from authcore.application.exceptions import StoreError


logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])


@router.get("/health", summary="Liveness probe")
async def health(request: Request) -> dict[str, str]:
    return {"status": "ok", "version": request.app.state.settings.version}


@router.get("/health/ready", summary="Readiness probe")
async def ready(request: Request) -> JSONResponse:
    """Check both backing stores."""
    checks: dict[str, str] = {}

    db_config = getattr(request.app.state, "db_config", None)
    if db_config is None:
        checks["database"] = "not configured"
    else:
        checks["database"] = "ok" if await db_config.health_check() else "unavailable"

    try:
        await request.app.state.session_store.ping()
        checks["session_store"] = "ok"
    except StoreError as e:
        logger.warning("Session store health check failed: %s", e.error_code)
        checks["session_store"] = "unavailable"

    healthy = all(value != "unavailable" for value in checks.values())
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "ok" if healthy else "degraded", "checks": checks},
    )
