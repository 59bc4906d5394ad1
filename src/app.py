"""Storefront FastAPI application.

Serves the catalogue, reviews, checkout and admin endpoints. Before the
first request the startup phase migrates the legacy catalogue; if the store
cannot be reached the server refuses to start.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 3000 --reload
"""

import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from storefront.domain import storefront
from storefront.startup import StartupDecision, initialize
from storefront.utils.logging import bind_request_context, clear_request_context, get_logger

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# PROTEAN_ENV selects the domain.toml overlay (memory store by default,
# PostgreSQL under "production").
storefront.init()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    outcome = initialize(storefront)
    if outcome.decision is StartupDecision.ABORT:
        raise RuntimeError(f"Storefront cannot start: {outcome.reason}")

    logger.info(
        "Storefront ready",
        legacy_products=outcome.legacy_products,
        products_migrated=outcome.report.products_migrated,
        comments_migrated=outcome.report.comments_migrated,
        comments_seeded=outcome.report.comments_seeded,
    )
    yield


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Catalogue, verified reviews, checkout and order admin",
    lifespan=lifespan,
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context and tag log lines with a request id."""
    bind_request_context(request_id=request.headers.get("X-Request-ID", str(uuid.uuid4())))
    try:
        with storefront.domain_context():
            return await call_next(request)
    finally:
        clear_request_context()


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    admin_router,
    comment_router,
    order_router,
    page_router,
    product_router,
    register_error_handlers,
)

app.include_router(product_router)
app.include_router(comment_router)
app.include_router(order_router)
app.include_router(admin_router)
app.include_router(page_router)
register_error_handlers(app)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
