"""
FastAPI application factory.

Creates and configures the main application instance.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from aqualedger.api.middleware import ErrorHandlerMiddleware, LoggingMiddleware
from aqualedger.api.middleware.error_handler import setup_exception_handlers
from aqualedger.api.routes import (
    cash_router,
    customers_router,
    expenses_router,
    health_router,
    inventory_router,
    sales_router,
    salesmen_router,
    schedule_router,
)
from aqualedger.config import configure_logging, get_logger, get_settings

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application lifespan handler.

    Migrates the ledger database and opens the connection pool on startup,
    closes the pool on shutdown.
    """
    settings = get_settings()

    logger.info(
        "application_starting",
        host=settings.api.host,
        port=settings.api.port,
        db_path=str(settings.storage.db_path),
    )

    try:
        from aqualedger.infrastructure.storage.sqlite import get_pool
        from aqualedger.infrastructure.storage.sqlite.migrations.migrator import run_migrations

        results = await run_migrations()
        if any(not r.success for r in results):
            raise RuntimeError("ledger database migration failed")
        logger.info("database_initialized", applied=len(results))

        await get_pool()
        logger.info("connection_pool_ready")

    except Exception as e:
        logger.error("database_init_failed", error=str(e))
        raise

    logger.info("application_started")

    yield

    logger.info("application_stopping")

    try:
        from aqualedger.infrastructure.storage.sqlite import close_pool

        await close_pool()

    except Exception as e:
        logger.warning("connection_pool_close_failed", error=str(e))

    logger.info("application_stopped")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    configure_logging()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Bottled-water distribution ledger: sales, empties, stock and cash",
        version=settings.app_version,
        docs_url="/docs" if settings.api.debug else None,
        redoc_url="/redoc" if settings.api.debug else None,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)
    app.add_middleware(ErrorHandlerMiddleware)

    if settings.api.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.api.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    setup_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(salesmen_router)
    app.include_router(customers_router)
    app.include_router(sales_router)
    app.include_router(inventory_router)
    app.include_router(expenses_router)
    app.include_router(cash_router)
    app.include_router(schedule_router)

    @app.get("/")
    async def root() -> dict[str, str]:
        return {
            "name": settings.app_name,
            "version": settings.app_version,
            "docs": "/docs",
        }

    return app


# Create app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "aqualedger.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.debug,
    )
