# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints: health, readiness, metrics.
Pure HTTP layer, no business logic.
"""

from fastapi import APIRouter, HTTPException
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from member_directory.core.config import settings
from member_directory.core.dependencies import get_portal_client

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Shallow health check: confirms the process is alive."""
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}


@router.get("/health/ready")
async def readiness_check():
    """Deep health check: confirms the Portal API answers."""
    client = get_portal_client()
    if not client.configured:
        return {"status": "ok", "portal": "mock_data"}
    if await client.test_connection():
        return {"status": "ok", "portal": "connected"}
    raise HTTPException(status_code=503, detail="Portal API unreachable")


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics in OpenMetrics format."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
