# Copyright (c) 2025 Shiladitya Mallick
# This file is part of the LifeDash - Personal Tracking Dashboard project.
# Licensed under the MIT License - see the LICENSE file for details.


import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded

from lifedash import config
from lifedash.routers import (
    goals_router,
    healthz_router,
    life_balance_router,
    mood_router,
    projects_router,
    todos_router,
)
from lifedash.services.trackers import Trackers
from lifedash.utils.blob_store import BlobStore, FirebaseBlobStore, LocalBlobStore
from lifedash.utils.rate_limit_utils import build_limiter, enforce_rate_limit, rate_limit_exceeded_handler
from lifedash.utils.sync_gateway import SyncGateway

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)


def build_gateway() -> SyncGateway:
    if config.SYNC_BACKEND == "firestore":
        from lifedash.utils.firebase import get_firestore_client
        from lifedash.utils.firestore_gateway import FirestoreGateway
        return FirestoreGateway(get_firestore_client())

    from lifedash.utils.sql_gateway import SqlDocumentGateway
    gateway = SqlDocumentGateway()
    # Create DB tables in one go
    gateway.create_tables()
    return gateway


def build_blob_store() -> BlobStore:
    if config.BLOB_BACKEND == "firebase":
        from lifedash.utils.firebase import get_storage_bucket
        return FirebaseBlobStore(get_storage_bucket())
    return LocalBlobStore(config.BLOB_ROOT, config.BLOB_URL_PREFIX)


def create_app(gateway: Optional[SyncGateway] = None, blob_store: Optional[BlobStore] = None,
               rate_limit: Optional[str] = None) -> FastAPI:

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        trackers = Trackers(gateway or build_gateway(), blob_store or build_blob_store())
        trackers.start()
        app.state.trackers = trackers

        # 🖼️ Serve locally stored images
        if isinstance(trackers.blob_store, LocalBlobStore):
            app.mount(trackers.blob_store.url_prefix,
                      StaticFiles(directory=str(trackers.blob_store.root)), name="blobs")

        logger.info(f"🚀 LifeDash ready ({type(trackers.gateway).__name__})")
        yield
        trackers.stop()

    app = FastAPI(
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        title="LifeDash API",
        description="Personal tracking dashboard: projects, goals, mood, life balance and to-dos",
        version="1.0",
        dependencies=[Depends(enforce_rate_limit)],
    )

    app.state.limiter = build_limiter(rate_limit)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Include routers
    app.include_router(projects_router.router)
    app.include_router(goals_router.router)
    app.include_router(mood_router.router)
    app.include_router(life_balance_router.router)
    app.include_router(todos_router.router)
    app.include_router(healthz_router.router)

    @app.get("/")
    def read_root():
        return {"message": "Welcome to LifeDash - personal tracking dashboard backend"}

    return app


app = create_app()
