"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Settings placed in app.state by the app factory
    - Engine, repository, service and handler built once during lifespan
    - Dependency functions retrieve from request.app.state
"""

from contextlib import asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool

from product_api.config import Settings, create_db_engine
from product_api.handlers import ProductHandler
from product_api.logging_config import get_logger
from product_api.repositories import SqlProductRepository
from product_api.services import ProductService

logger = get_logger(__name__)


def get_settings_from_state(request: Request) -> Settings:
    """Dependency injection for Settings from app.state.

    Raises:
        RuntimeError: If settings were not attached by the app factory
    """
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        raise RuntimeError("Settings not initialized. Build the app with create_app().")
    return settings


def get_handler(request: Request) -> ProductHandler:
    """Dependency injection for ProductHandler from app.state.

    Args:
        request: FastAPI Request object

    Returns:
        The ProductHandler instance from app.state

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "product_handler", None)
    if handler is None:
        raise RuntimeError("ProductHandler not initialized. Check lifespan setup.")
    return handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for FastAPI app.

    Initializes all layers and stores in app.state:
    1. Engine (connection pool) - reused if the factory was given one
    2. Repository (data access)
    3. Service (business logic) - stored in app.state.product_service
    4. Handler (HTTP endpoints) - stored in app.state.product_handler

    Cleanup:
        Disposes an engine created here and removes services from app.state
    """
    settings: Settings = app.state.settings

    engine = getattr(app.state, "engine", None)
    owns_engine = engine is None
    if owns_engine:
        engine = create_db_engine(settings)
        app.state.engine = engine

    repository = SqlProductRepository.create(engine)
    product_service = ProductService.create(repository=repository)
    product_handler = ProductHandler(product_service=product_service)

    app.state.product_service = product_service
    app.state.product_handler = product_handler

    healthy = await run_in_threadpool(product_service.is_healthy)
    logger.info("product_api_started", dialect=engine.dialect.name, healthy=healthy)
    if settings.api_key is None:
        logger.warning("api_key_not_configured", detail="product routes are not protected")

    yield

    del app.state.product_handler
    del app.state.product_service
    if owns_engine:
        engine.dispose()
        del app.state.engine
    logger.info("product_api_stopped")


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[ProductHandler, Depends(get_handler)]
