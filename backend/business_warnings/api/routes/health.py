"""Health & Readiness Probes - liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 until the notice service is built (readiness)

Design Decisions:
    - Separate liveness/readiness: liveness restarts, readiness removes from load balancer
"""

import logging
from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "business-warnings-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check(request: Request):
    """Readiness probe - resolvers built and translations validated."""
    service = getattr(request.app.state, "notice_service", None)
    if service is None:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "notice_service_unavailable",
            },
        )
    return {
        "status": "ready",
        "checks": {"locales": [loc.value for loc in service.locales]},
    }
