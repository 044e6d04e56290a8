"""
Tripbook API - Main Application Entry Point

Travel booking backend:
- Cookie sessions backed by an in-memory or Redis session store
- Role-gated bookings (admin / host / traveler), posts and admin revenue
- Pluggable persistence: JSON files or SQLAlchemy
- Structured logging with request correlation
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripbook.api.errors import register_exception_handlers
from tripbook.api.middleware import RequestLoggingMiddleware
from tripbook.api.router import api_router
from tripbook.core.config import get_settings
from tripbook.core.logging import get_logger, setup_logging
from tripbook.core.metrics import metrics_endpoint
from tripbook.core.sessions import create_session_store
from tripbook.db.storage import create_storage

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: build storage and session store, close them on exit."""
    setup_logging()
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
        storage=settings.STORAGE_BACKEND,
    )

    app.state.storage = create_storage(settings)
    app.state.session_store = await create_session_store(settings)
    logger.info("session_store_ready", backend=type(app.state.session_store).__name__)

    yield

    await app.state.session_store.close()
    await app.state.storage.close()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Travel booking API: destinations, bookings, posts and admin revenue",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "storage": settings.STORAGE_BACKEND,
    }


@app.get("/metrics", tags=["Health"], include_in_schema=False)
async def metrics():
    return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
