"""FastAPI application factory and product routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, FastAPI, HTTPException, Request, Response, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from product_api import __version__
from product_api.api.auth import require_function_key
from product_api.api.dependencies import HandlerDep, lifespan
from product_api.config import Settings, get_settings
from product_api.dto import HealthCheckResponse, ServiceInfoResponse
from product_api.logging_config import configure_logging

DESCRIPTION = "CRUD API for products backed by a relational database"

# Product ids are SQL Server INT columns.
MAX_PRODUCT_ID = 2**31 - 1

products_router = APIRouter(
    prefix="/products",
    tags=["products"],
    dependencies=[Depends(require_function_key)],
)


def product_id_in_range(product_id: int) -> int:
    """Treat ids outside the INT column range like an unmatched route."""
    if product_id > MAX_PRODUCT_ID:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
    return product_id


ProductIdDep = Annotated[int, Depends(product_id_in_range)]


@products_router.get("", responses={200: {"content": {"application/json": {}}}})
async def get_products(handler: HandlerDep) -> Response:
    """Return every product as a JSON array."""
    return await handler.get_products()


@products_router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(request: Request, handler: HandlerDep) -> Response:
    """Create a product from a JSON body."""
    return await handler.create_product(await request.body())


@products_router.put("/{product_id:int}")
async def update_product(product_id: ProductIdDep, request: Request, handler: HandlerDep) -> Response:
    """Replace the mutable fields of an existing product."""
    return await handler.update_product(product_id, await request.body())


@products_router.delete("/{product_id:int}")
async def delete_product(product_id: ProductIdDep, handler: HandlerDep) -> Response:
    """Hard delete an existing product."""
    return await handler.delete_product(product_id)


def create_app(settings: Settings | None = None, engine: Engine | None = None) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Explicit configuration. If None, read from the environment.
        engine: Pre-built SQLAlchemy engine. If None, one is created at startup
            and disposed at shutdown.

    Returns:
        Configured FastAPI app
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level, settings.log_json)

    app = FastAPI(
        title="Product API",
        description=DESCRIPTION,
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    if engine is not None:
        app.state.engine = engine

    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/", response_model=ServiceInfoResponse)
    async def root() -> ServiceInfoResponse:
        """Root endpoint with API information."""
        return ServiceInfoResponse(
            name="Product API",
            version=__version__,
            description=DESCRIPTION,
            endpoints={
                "products": "/products",
                "health": "/health",
                "docs": "/docs",
            },
        )

    @app.get("/health", response_model=HealthCheckResponse)
    async def health(handler: HandlerDep, response: Response) -> HealthCheckResponse:
        """Health check endpoint."""
        result = await handler.health_check()
        if not result.database_healthy:
            response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
        return result

    app.include_router(products_router)
    return app


def main() -> None:
    """Run the API with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "product_api.api.app:create_app",
        factory=True,
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
    )


if __name__ == "__main__":
    main()
