# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Member Directory Service
========================
Looks up community members in the external Portal API for the staff
dashboards (recipient pickers for SMS / email / web announcements) and
mirrors bulletin posts onto the portal.

When the portal is unconfigured or unreachable, member lookups answer from a
small static sample set and flag it with ``meta.fallback = "mock_data"``.

Port: 8005
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from member_directory.controllers import bulletin_controller, member_controller, system_controller
from member_directory.core.config import settings
from member_directory.core.dependencies import close_portal_client, init_portal_client
from member_directory.core.logging import get_logger
from member_directory.middleware import MetricsMiddleware, RequestIDMiddleware
from member_directory.schemas import ErrorResponse

logger = get_logger(settings.SERVICE_NAME)


@asynccontextmanager
async def lifespan(application: FastAPI):
    """Build the shared Portal client at startup; close it on shutdown."""
    init_portal_client()
    if settings.portal().is_configured:
        logger.info("Portal API configured at %s", settings.PORTAL_API_URL)
    else:
        logger.warning("Portal API not configured, member lookups will serve mock data")
    yield
    await close_portal_client()
    logger.info("Portal HTTP client closed, shutting down")


app = FastAPI(
    title="Member Directory Service",
    description="Portal API member lookups with mock-data fallback, and bulletin sync.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={
        422: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    req_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": req_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": req_id},
    )


app.include_router(system_controller.router)
app.include_router(member_controller.router)
app.include_router(bulletin_controller.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level=settings.LOG_LEVEL.lower())
