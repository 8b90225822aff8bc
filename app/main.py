from contextlib import asynccontextmanager
from datetime import datetime, timezone
from importlib.metadata import PackageNotFoundError, version as package_version

from fastapi import FastAPI, Request, Response

from app.assessments.admissions import get_reference_statistics
from app.core.config import settings
from app.core.errors import ReferenceDataError
from app.core.formatting import format_decimal
from app.core.logging import configure_logging, correlation_context, get_logger
from app.core.metrics import get_counters, get_metrics, timer
from app.i18n import preload_i18n_resources
from app.routers.exceptions import register_exception_handlers
from app.routers.schools import router as schools_router
from app.routers.score import router as score_router


configure_logging(environment=settings.environment)
logger = get_logger("admissions.app.main", component="app")

_app_start_time = datetime.now(timezone.utc)

try:
    APP_VERSION = package_version("admissions-competitiveness")
except PackageNotFoundError:  # running from a source checkout
    APP_VERSION = "0.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load reference statistics and i18n resources before serving.

    A malformed reference file aborts startup instead of failing on the first
    scoring request.
    """
    with timer("startup.reference_load"):
        reference = get_reference_statistics()
    logger.info(
        "startup_reference_ready",
        extra={"structured_data": {"reference_version": reference.version}},
    )
    if settings.i18n_preload_enabled:
        stats = preload_i18n_resources()
        logger.info("i18n_preload_complete", extra={"structured_data": stats})
    yield


app = FastAPI(title=settings.app_name, version=APP_VERSION, debug=settings.debug, lifespan=lifespan)
register_exception_handlers(app)

# Register routers at import time so tests see routes without requiring startup
app.include_router(score_router)
app.include_router(schools_router)


@app.middleware("http")
async def bind_correlation_id(request: Request, call_next):
    with correlation_context(request.headers.get("X-Request-ID")) as cid:
        response = await call_next(request)
        response.headers["X-Request-ID"] = cid
        return response


@app.get("/health")
def health():
    """Application status, uptime, reference data version and metrics summary."""
    now = datetime.now(timezone.utc)
    uptime = (now - _app_start_time).total_seconds()
    counters = get_counters()
    metrics = get_metrics()

    try:
        reference_version = get_reference_statistics().version
        overall_status = "healthy"
    except ReferenceDataError as exc:
        logger.error("health_check_reference_failed", extra={"structured_data": {"error": exc.message}})
        reference_version = None
        overall_status = "unhealthy"

    return {
        "status": overall_status,
        "version": APP_VERSION,
        "started_at": _app_start_time.isoformat(),
        "uptime_seconds": format_decimal(uptime, decimals=2),
        "environment": settings.environment,
        "reference_version": reference_version,
        "total_requests": int(sum(count for label, count in counters.items() if label.endswith(".requests"))),
        "metrics_summary": {
            "tracked_operations": len(metrics),
            "tracked_counters": len(counters),
        },
    }


@app.get("/", include_in_schema=False)
def root():
    """Lightweight index to avoid 404s and point to docs."""
    return {
        "name": settings.app_name,
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/favicon.ico", include_in_schema=False)
def favicon():
    """Empty favicon to prevent 404 noise in logs."""
    return Response(status_code=204)
