"""
PayCycle API

Payroll schedule date engine.

Endpoints:
    GET  /health                    - Liveness probe
    GET  /cycles                    - Cycle types and their date types
    POST /schedules                 - Generate one schedule
    POST /schedules/batch           - Generate many schedules
    POST /dates/adjust              - Adjust a date to a business day
    GET  /payrolls                  - Payrolls from the preloaded pack
    GET  /payrolls/{id}             - One preloaded payroll
    GET  /payrolls/{id}/schedule    - Schedule for a preloaded payroll
"""

import logging
import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import (
    PAYCYCLE_CORS_ORIGINS,
    PAYCYCLE_DOCS_ENABLED,
    PAYCYCLE_LOG_LEVEL,
    PAYCYCLE_PACK_PATH,
)
from api.routes import cycles, dates, payrolls, schedules
from api.schemas.responses import HealthResponse
from paycycle import __version__
from paycycle.exceptions import (
    InvalidConfigurationError,
    PayCycleError,
    PayrollNotFoundError,
)
from paycycle.logging_config import configure_logging
from paycycle.packs import PayrollPackLoader

# =============================================================================
# Logging Setup (Structured JSON)
# =============================================================================

configure_logging(PAYCYCLE_LOG_LEVEL)
logger = logging.getLogger("paycycle.api")

# Pack loader (payroll packs are trusted deployment files)
loader = PayrollPackLoader(strict_version=False)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Preload the payroll pack on startup, if one is configured."""
    if PAYCYCLE_PACK_PATH:
        try:
            pack = loader.load(PAYCYCLE_PACK_PATH)
        except PayCycleError as e:
            logger.error(
                "Failed to load payroll pack %s: %s",
                PAYCYCLE_PACK_PATH,
                e,
                extra={"path": PAYCYCLE_PACK_PATH, "error_code": e.code},
            )
            raise
        payrolls.set_pack(pack)
        logger.info("Serving %d payrolls from %s", len(pack.payrolls), PAYCYCLE_PACK_PATH)

    yield

    payrolls.set_pack(None)
    logger.info("Shutting down")


# Create app
app = FastAPI(
    title="PayCycle API",
    description="""
**Payroll schedule date engine.**

PayCycle computes EFT (pay) dates and processing dates for recurring payrolls,
adjusted around weekends and holidays.

## Quick Start

1. `GET /cycles` - See cycle types and their date types
2. `POST /schedules` - Generate a schedule
3. `POST /dates/adjust` - Adjust a single date
    """,
    version=__version__,
    docs_url="/docs" if PAYCYCLE_DOCS_ENABLED else None,
    redoc_url="/redoc" if PAYCYCLE_DOCS_ENABLED else None,
    openapi_url="/openapi.json" if PAYCYCLE_DOCS_ENABLED else None,
    lifespan=lifespan,
)

# CORS
if PAYCYCLE_CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=PAYCYCLE_CORS_ORIGINS,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

# Include routers
app.include_router(cycles.router)
app.include_router(schedules.router)
app.include_router(dates.router)
app.include_router(payrolls.router)


# =============================================================================
# Middleware
# =============================================================================

@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id
    start = time.time()

    response = await call_next(request)

    response.headers["X-Request-ID"] = request_id
    logger.debug(
        "%s %s -> %d",
        request.method,
        request.url.path,
        response.status_code,
        extra={
            "request_id": request_id,
            "path": request.url.path,
            "duration_ms": round((time.time() - start) * 1000, 2),
        },
    )
    return response


# =============================================================================
# Error Handling
# =============================================================================

def _status_for(error: PayCycleError) -> int:
    if isinstance(error, InvalidConfigurationError):
        return 422
    if isinstance(error, PayrollNotFoundError):
        return 404
    # UnboundedScanError and pack errors are server-side faults
    return 500


@app.exception_handler(PayCycleError)
async def paycycle_error_handler(request: Request, exc: PayCycleError):
    """Return engine errors as {code, message, details}."""
    status_code = _status_for(exc)
    log = logger.error if status_code >= 500 else logger.info
    log(
        "Request failed: %s",
        exc,
        extra={
            "request_id": getattr(request.state, "request_id", "unknown"),
            "error_code": exc.code,
            "path": request.url.path,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={
            "code": exc.code,
            "message": exc.message,
            "details": exc.details,
        },
    )


# =============================================================================
# Health Endpoints
# =============================================================================

@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Liveness probe."""
    return HealthResponse(
        status="healthy",
        service="PayCycle API",
        version=__version__,
        payrolls_loaded=len(payrolls.pack.payrolls) if payrolls.pack else 0,
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
