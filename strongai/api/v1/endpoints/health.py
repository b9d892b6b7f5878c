"""Health check endpoints."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("")
async def health():
    """Simple liveness check."""
    return {"status": "ok"}


@router.get("/ready")
async def readiness(request: Request):
    """Readiness: app + local database connectivity."""
    gateway = request.app.state.gateway
    ping = getattr(gateway, "ping", None)
    if ping is None:
        return {"status": "ok", "database": "not configured"}
    try:
        await ping()
        return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.exception("Database readiness check failed")
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": str(e)},
        )
