"""Product service for core business logic.

Each operation validates, checks existence where needed, issues one
mutating statement through the store, and reports the outcome as a
Result. Database failures are logged here and surface as
ErrorKind.INFRASTRUCTURE; they never propagate to the caller.
"""

from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from sqlalchemy.exc import SQLAlchemyError

from product_api.entities import ProductEntity
from product_api.logging_config import get_logger
from product_api.protocols import ProductStore

from .result import ErrorKind, Result

logger = get_logger(__name__)

INVALID_PRODUCT_MESSAGE = "Invalid product data. Please check your request and try again."
EMPTY_PRODUCT_LIST = "[]"


def not_found_message(product_id: int) -> str:
    return f"Product with ID: {product_id} not found."


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ProductService:
    """Product CRUD orchestration.

    Depends on the ProductStore PROTOCOL, not a concrete repository.

    Example:
        ```python
        from product_api.repositories import SqlProductRepository
        from product_api.services import ProductService

        service = ProductService.create(repository=SqlProductRepository.create(engine))
        result = service.create_product(ProductEntity(product_name="Widget", price=9.99))
        ```
    """

    def __init__(
        self,
        repository: ProductStore,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the product service.

        Args:
            repository: Product storage backend (required).
            clock: Source of ModifiedDate timestamps. Defaults to UTC now.
        """
        self._repository = repository
        self._clock = clock or _utcnow

    @classmethod
    def create(
        cls,
        repository: ProductStore,
        clock: Callable[[], datetime] | None = None,
    ) -> "ProductService":
        """Factory method to create ProductService with sensible defaults."""
        return cls(repository=repository, clock=clock)

    def list_products(self) -> Result[str]:
        """Fetch every product as a JSON array text.

        Returns:
            Result holding the JSON text, ``[]`` if the database returned nothing
        """
        try:
            products_json = self._repository.list_as_json()
        except SQLAlchemyError:
            logger.exception("product_list_failed")
            return Result.failure(ErrorKind.INFRASTRUCTURE, "An error occurred while retrieving products.")

        return Result.ok(products_json or EMPTY_PRODUCT_LIST)

    def create_product(self, product: ProductEntity | None) -> Result[int]:
        """Validate and insert a product.

        Returns:
            Result holding the identifier assigned by the database
        """
        if product is None or not product.is_valid:
            logger.warning("invalid_product_data")
            return Result.failure(ErrorKind.VALIDATION, INVALID_PRODUCT_MESSAGE)

        try:
            product_id = self._repository.insert(product)
        except SQLAlchemyError:
            logger.exception("product_create_failed")
            return Result.failure(ErrorKind.INFRASTRUCTURE, "An error occurred while creating the product.")

        logger.info("product_created", product_id=product_id)
        return Result.ok(product_id)

    def update_product(self, product_id: int, product: ProductEntity | None) -> Result[int]:
        """Validate, check existence, then overwrite the product's mutable fields.

        The path identifier wins over any identifier carried by the payload.

        Returns:
            Result holding the updated identifier
        """
        if product is None or not product.is_valid:
            logger.warning("invalid_product_data", product_id=product_id)
            return Result.failure(ErrorKind.VALIDATION, INVALID_PRODUCT_MESSAGE)

        product = replace(product, id=product_id)

        try:
            if not self._repository.exists(product_id):
                logger.warning("product_not_found", product_id=product_id)
                return Result.failure(ErrorKind.NOT_FOUND, not_found_message(product_id))

            affected = self._repository.update(product, modified_at=self._clock())
        except SQLAlchemyError:
            logger.exception("product_update_failed", product_id=product_id)
            return Result.failure(ErrorKind.INFRASTRUCTURE, "An error occurred while updating the product.")

        # Deleted between the existence check and the update.
        if affected == 0:
            logger.warning("product_vanished_before_update", product_id=product_id)
            return Result.failure(ErrorKind.NOT_FOUND, not_found_message(product_id))

        logger.info("product_updated", product_id=product_id)
        return Result.ok(product_id)

    def delete_product(self, product_id: int) -> Result[int]:
        """Check existence, then hard delete the product.

        Returns:
            Result holding the deleted identifier
        """
        try:
            if not self._repository.exists(product_id):
                logger.warning("product_not_found", product_id=product_id)
                return Result.failure(ErrorKind.NOT_FOUND, not_found_message(product_id))

            affected = self._repository.delete(product_id)
        except SQLAlchemyError:
            logger.exception("product_delete_failed", product_id=product_id)
            return Result.failure(ErrorKind.INFRASTRUCTURE, "An error occurred while deleting the product.")

        if affected == 0:
            logger.warning("product_vanished_before_delete", product_id=product_id)
            return Result.failure(ErrorKind.NOT_FOUND, not_found_message(product_id))

        logger.info("product_deleted", product_id=product_id)
        return Result.ok(product_id)

    def is_healthy(self) -> bool:
        """Check if the underlying database is reachable."""
        return self._repository.health_check()

    @property
    def repository(self) -> ProductStore:
        """Get the underlying repository (for testing)."""
        return self._repository
