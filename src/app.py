"""Storefront FastAPI application.

Single-domain web server that processes commands synchronously via HTTP.
Each request runs inside the storefront domain context.

Usage:
    uvicorn app:app --app-dir src --host 0.0.0.0 --port 8000 --reload
"""

import asyncio
import os
from contextlib import asynccontextmanager, suppress

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from storefront.catalogue.fakestore import FakeStoreSeeder
from storefront.catalogue.seed import seed_catalogue
from storefront.domain import logger, storefront
from storefront.utils.logging import add_context, clear_context

# ---------------------------------------------------------------------------
# Domain initialization
# ---------------------------------------------------------------------------
# Initialized at module level so uvicorn workers share it.
storefront.init()


def _flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if _flag("SEED_CATALOGUE", True):
        with storefront.domain_context():
            seed_catalogue()

    # FakeStore enrichment never blocks startup
    app.state.seeding_task = None
    if _flag("SEED_FAKESTORE", False):
        app.state.seeding_task = FakeStoreSeeder(storefront).spawn()
        logger.info("fakestore_seeding_started")

    yield

    task = app.state.seeding_task
    if task is not None and not task.done():
        # The worker thread finishes its current request; only the wait is cancelled
        task.cancel()
        with suppress(asyncio.CancelledError):
            await task


# ---------------------------------------------------------------------------
# FastAPI app
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Storefront API",
    description="Catalogue, cart, wishlist, checkout and order history",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def domain_context_middleware(request: Request, call_next):
    """Push the storefront domain context for each request."""
    clear_context()
    add_context(method=request.method, path=request.url.path)
    with storefront.domain_context():
        response = await call_next(request)
    return response


# ---------------------------------------------------------------------------
# Routers
# ---------------------------------------------------------------------------
from storefront.api import (  # noqa: E402
    address_router,
    cart_router,
    category_router,
    order_router,
    product_router,
    register_error_handlers,
    wishlist_router,
)

register_error_handlers(app)

app.include_router(product_router)
app.include_router(category_router)
app.include_router(cart_router)
app.include_router(wishlist_router)
app.include_router(order_router)
app.include_router(address_router)


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------
@app.get("/health")
async def health():
    return JSONResponse(content={"status": "ok", "domain": storefront.name})
