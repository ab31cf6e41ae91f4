"""
Hotel Listing API - Main Application Entry Point

Lists hotels and their rooms for users holding a paid, in-person,
hotel-inclusive ticket:
- JWT + session authentication on every hotel route
- Eligibility gate (enrollment -> ticket -> paid/in-person/hotel) before any read
- Structured logging with request correlation
- Prometheus metrics for gate decisions and hotel queries
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from hotel_api.core.config import get_settings
from hotel_api.core.errors import register_exception_handlers
from hotel_api.core.logging import setup_logging, get_logger
from hotel_api.core.metrics import metrics_endpoint
from hotel_api.api.router import api_router
from hotel_api.api.middleware import RequestLoggingMiddleware
from hotel_api.db.session import create_engine, create_session_factory

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifecycle: startup and shutdown hooks."""
    setup_logging(settings)
    logger = get_logger(__name__)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )

    engine = create_engine(settings)
    app.state.db_engine = engine
    app.state.session_factory = create_session_factory(engine)

    yield

    await engine.dispose()
    logger.info("application_shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="Hotel listings gated by ticket eligibility",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Custom middleware
app.add_middleware(RequestLoggingMiddleware)

register_exception_handlers(app)

# Routes
app.include_router(api_router)


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint for Docker and load balancers."""
    database = "unknown"
    engine = getattr(app.state, "db_engine", None)
    if engine is not None:
        try:
            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
            database = "ok"
        except (SQLAlchemyError, OSError):
            database = "unavailable"

    return {
        "status": "healthy" if database != "unavailable" else "degraded",
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "database": database,
    }


if settings.METRICS_ENABLED:
    @app.get("/metrics", tags=["Health"], include_in_schema=False)
    def metrics():
        return metrics_endpoint()


@app.get("/", tags=["Root"])
async def root():
    return {
        "message": f"Welcome to {settings.APP_NAME}",
        "version": settings.APP_VERSION,
        "docs": "/docs",
    }
