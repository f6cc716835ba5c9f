"""FastAPI app entry point for the tyre finder."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .api.deps import close_catalog_client
from .api.routes import rest_router, router
from .core.config import get_settings, validate_settings
from .core.logging import log_request, log_response, logger, setup_logging

settings = get_settings()
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown."""
    logger.info(f"Starting tyre finder (catalog: {settings.catalog_base_url})")
    for problem in validate_settings(settings):
        logger.warning(f"Configuration: {problem}")
    yield
    logger.info("Shutting down...")
    close_catalog_client()


app = FastAPI(
    title="Tyre Finder API",
    description="Vehicle cascade selection and tyre lookup with store availability",
    version="1.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    log_request(request.method, request.url.path, query=request.url.query or None)

    response = await call_next(request)

    duration_ms = (time.time() - start) * 1000
    log_response(request.method, request.url.path, response.status_code, duration_ms)
    return response


app.include_router(router, prefix="/api")
app.include_router(rest_router)


@app.get("/health")
async def health():
    return {"status": "ok", "service": "tyre-finder"}
