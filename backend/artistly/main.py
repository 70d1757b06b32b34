# backend/artistly/main.py

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse
from sqlalchemy import text
from starlette.middleware.gzip import GZipMiddleware

# Routers under artistly/api/
from .api import (
    api_artist,
    api_booking_request,
    api_category,
    api_onboarding,
    api_reference,
)
from .core.config import settings
from .core.observability import setup_logging
from .database import SessionLocal, engine
from .db_utils import seed_sample_data
from .middleware.security_headers import SecurityHeadersMiddleware
from .utils.status_logger import register_status_listeners

# Configure logging before creating any loggers
setup_logging()
logger = logging.getLogger(__name__)

_BOOT_TS = time.time()


@asynccontextmanager
async def lifespan(app: FastAPI):
    register_status_listeners()
    if settings.SEED_SAMPLE_DATA:
        seed_sample_data(engine)
    logger.info("Artistly API started")
    yield
    engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    default_response_class=ORJSONResponse,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials="*" not in settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1024)


@app.get("/healthz", tags=["health"])
def healthz():
    """Liveness plus a database ping."""
    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
    except Exception as exc:
        logger.warning("Health check database ping failed: %s", exc)
        return ORJSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "error", "error": str(exc)},
            headers={"Cache-Control": "no-store"},
        )
    return ORJSONResponse(
        content={"status": "ok", "uptime_s": round(time.time() - _BOOT_TS, 1)},
        headers={"Cache-Control": "no-store"},
    )


def _jsonable_errors(errors):
    # ``ctx`` may carry the raw exception object, which is not serialisable
    return [
        {key: value for key, value in err.items() if key != "ctx"}
        for err in errors
    ]


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return validation errors with details and log them for debugging."""
    errors = exc.errors()
    logger.warning("Validation error at %s: %s", request.url.path, errors)
    return ORJSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": _jsonable_errors(errors)},
    )


api_prefix = settings.API_V1_STR  # usually something like "/api/v1"

app.include_router(api_artist.router, prefix=f"{api_prefix}/artists", tags=["artists"])
app.include_router(api_category.router, prefix=f"{api_prefix}/categories", tags=["categories"])
app.include_router(api_reference.router, prefix=f"{api_prefix}/reference", tags=["reference"])
app.include_router(api_booking_request.router, prefix=f"{api_prefix}/booking-requests")
app.include_router(api_onboarding.router, prefix=f"{api_prefix}/onboarding")
