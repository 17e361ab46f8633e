"""
Catalog API - Main application entry point.

FastAPI application for product and category management.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from catalog_api.api.middleware import StructuredLoggingMiddleware
from catalog_api.api.v1.responses import validation_exception_handler
from catalog_api.api.v1.routers import categories_router, health_router, products_router
from catalog_api.core.config import logger, settings
from catalog_api.infrastructure.persistence import close_db, init_database, init_db


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events"""
    logger.info("Starting Catalog API...")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Version: {settings.version}")

    try:
        init_database(settings.db_url, echo=settings.db_echo)
        await init_db()
        logger.info("✓ Database initialized")
    except Exception as e:
        logger.error(f"Failed to initialize: {e}")
        raise

    yield

    logger.info("Shutting down Catalog API...")
    await close_db()


# Create FastAPI application
app = FastAPI(
    title="Catalog API",
    description="Product and category catalog with mediator pipeline",
    version=settings.version,
    lifespan=lifespan,
)

if settings.enable_cors:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(StructuredLoggingMiddleware)
app.add_exception_handler(RequestValidationError, validation_exception_handler)

# Include API routers
app.include_router(health_router)
app.include_router(products_router)
app.include_router(categories_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "catalog_api.main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
