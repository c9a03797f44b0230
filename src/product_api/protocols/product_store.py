"""Product storage protocol.

Defines the interface for any relational backend that can hold products.
Each method runs in its own scoped connection; callers never see one.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from product_api.entities import ProductEntity


@runtime_checkable
class ProductStore(Protocol):
    """Protocol for product storage backends.

    Any type that implements these methods satisfies the protocol,
    no explicit inheritance needed.
    """

    def list_as_json(self) -> str | None:
        """Return all products serialized by the database as a JSON array.

        Returns:
            The JSON text, or None if the database produced no row
        """
        ...

    def insert(self, product: ProductEntity) -> int:
        """Insert a product.

        Returns:
            The identifier assigned by the database
        """
        ...

    def exists(self, product_id: int) -> bool:
        """Check whether a product with the given identifier exists."""
        ...

    def update(self, product: ProductEntity, modified_at: datetime) -> int:
        """Overwrite the mutable fields of the product keyed by ``product.id``.

        Returns:
            Number of rows affected
        """
        ...

    def delete(self, product_id: int) -> int:
        """Hard delete the product with the given identifier.

        Returns:
            Number of rows affected
        """
        ...

    def health_check(self) -> bool:
        """Check if the database is reachable."""
        ...
