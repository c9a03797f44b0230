"""Protocol interfaces for swappable implementations.

Usage:
    ```python
    from product_api.protocols import ProductStore

    store: ProductStore = SqlProductRepository.create(engine)
    ```
"""

from .product_store import ProductStore

__all__ = [
    "ProductStore",
]
