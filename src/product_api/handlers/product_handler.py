"""HTTP handlers for product operations.

Handlers decode request bodies into DTOs, call the service in the
threadpool, and turn service Results into plain-text or JSON responses.
"""

from fastapi import status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import PlainTextResponse, Response
from pydantic import ValidationError

from product_api.dto import HealthCheckResponse, ProductRequest
from product_api.entities import ProductEntity
from product_api.logging_config import get_logger
from product_api.services import ErrorKind, ProductService, Result

logger = get_logger(__name__)

STATUS_BY_ERROR_KIND = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INFRASTRUCTURE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def parse_product(body: bytes) -> ProductEntity | None:
    """Decode a JSON request body into a product entity.

    Returns:
        The entity, or None if the body is not a JSON product object
    """
    try:
        return ProductRequest.model_validate_json(body).to_entity()
    except ValidationError:
        return None


def error_response(result: Result) -> PlainTextResponse:
    """Map a failed Result to its status code and client-safe message."""
    return PlainTextResponse(result.error or "", status_code=STATUS_BY_ERROR_KIND[result.kind])


class ProductHandler:
    """HTTP handlers for product operations.

    This handler delegates business logic to ProductService
    and handles HTTP-specific concerns like:
    - Decoding request bodies
    - Setting appropriate status codes
    - Catching anything the service did not classify

    Example:
        ```python
        handler = ProductHandler(product_service=service)

        @app.get("/products")
        async def get_products():
            return await handler.get_products()
        ```
    """

    def __init__(self, product_service: ProductService) -> None:
        """Initialize the product handler.

        Args:
            product_service: The product service for business logic (required).
        """
        self._products = product_service

    async def get_products(self) -> Response:
        """Handle GET /products requests."""
        logger.info("get_products_requested")
        try:
            result = await run_in_threadpool(self._products.list_products)
        except Exception:
            logger.exception("get_products_unhandled_error")
            return PlainTextResponse(
                "An error occurred while retrieving products.",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if result.is_failure:
            return error_response(result)
        return Response(result.unwrap(), status_code=status.HTTP_200_OK, media_type="application/json")

    async def create_product(self, body: bytes) -> Response:
        """Handle POST /products requests.

        The new identifier is exposed through the Location header.
        """
        logger.info("create_product_requested")
        try:
            result = await run_in_threadpool(self._products.create_product, parse_product(body))
        except Exception:
            logger.exception("create_product_unhandled_error")
            return PlainTextResponse(
                "An error occurred while creating the product.",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if result.is_failure:
            return error_response(result)
        return PlainTextResponse(
            "Product created successfully.",
            status_code=status.HTTP_201_CREATED,
            headers={"Location": f"/products/{result.unwrap()}"},
        )

    async def update_product(self, product_id: int, body: bytes) -> Response:
        """Handle PUT /products/{id} requests."""
        logger.info("update_product_requested", product_id=product_id)
        try:
            result = await run_in_threadpool(self._products.update_product, product_id, parse_product(body))
        except Exception:
            logger.exception("update_product_unhandled_error", product_id=product_id)
            return PlainTextResponse(
                "An error occurred while updating the product.",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if result.is_failure:
            return error_response(result)
        return PlainTextResponse("Product updated successfully.", status_code=status.HTTP_200_OK)

    async def delete_product(self, product_id: int) -> Response:
        """Handle DELETE /products/{id} requests."""
        logger.info("delete_product_requested", product_id=product_id)
        try:
            result = await run_in_threadpool(self._products.delete_product, product_id)
        except Exception:
            logger.exception("delete_product_unhandled_error", product_id=product_id)
            return PlainTextResponse(
                "An error occurred while deleting the product.",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        if result.is_failure:
            return error_response(result)
        return PlainTextResponse("Product deleted successfully.", status_code=status.HTTP_200_OK)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        is_healthy = await run_in_threadpool(self._products.is_healthy)

        return HealthCheckResponse(
            status="healthy" if is_healthy else "unhealthy",
            database_healthy=is_healthy,
        )
