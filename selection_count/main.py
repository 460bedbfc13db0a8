"""FastAPI app entry: config, logging, health, and the counting routes."""

from contextlib import asynccontextmanager
from typing import Any

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from selection_count.config.counting.static import get_active_profile_name, load_counting_profiles
from selection_count.config.logging import configure_logging, get_logger
from selection_count.config.settings import get_settings
from selection_count.controllers.routes.count import router as count_router

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: config, logging, and profile validation. Shutdown: log only."""
    settings = get_settings()
    configure_logging()
    logger.info("Application starting", extra={"app_name": settings.app_name, "environment": settings.environment})
    try:
        profiles = load_counting_profiles()
        logger.info("Counting profiles loaded", extra={"profiles": sorted(profiles)})
    except (OSError, ValueError) as e:
        logger.error("Failed to load counting profiles on startup", extra={"error": str(e)})
        # Don't fail startup; /ready reports it
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title="Selection Count Service",
    description="Word, character, and sentence counts for selected note text",
    version="1.0.0",
    lifespan=lifespan,
)
app.include_router(count_router)


@app.get("/health")
async def health() -> dict[str, Any]:
    """Liveness: service is up. Does not check configuration."""
    return {"status": "ok"}


@app.get("/ready")
async def ready() -> dict[str, Any]:
    """Readiness: counting profiles load and the active profile exists."""
    try:
        profiles = load_counting_profiles()
        active = get_active_profile_name()
    except (OSError, ValueError) as e:
        logger.warning("Counting profiles unavailable", extra={"error": type(e).__name__})
        return JSONResponse(content={"status": "degraded", "profiles": {"ok": False}}, status_code=503)
    ok = active in profiles
    body = {"status": "ok" if ok else "degraded", "profiles": {"ok": ok, "active": active}}
    return JSONResponse(content=body, status_code=200 if ok else 503)


@app.exception_handler(Exception)
async def global_exception_handler(_request: Request, exc: Exception):
    """Centralized error handling: no stack traces or internal details leak to the client."""
    logger.exception("Unhandled error", extra={"error": type(exc).__name__})
    return JSONResponse(
        content={"detail": "An internal error occurred."},
        status_code=500,
    )


def main() -> None:
    """Run the service with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "selection_count.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
