"""Product API - CRUD over a relational Product table.

This package provides a layered architecture:

Layers:
    - protocols: Interface contracts (ProductStore)
    - repositories: SQLAlchemy data access
    - services: Business logic returning Result values
    - handlers: HTTP endpoint handlers
    - dto: Data transfer objects (API contracts)
    - entities: Domain models (internal)

Usage:
    ```python
    from product_api.config import Settings, create_db_engine
    from product_api.repositories import SqlProductRepository
    from product_api.services import ProductService

    engine = create_db_engine(Settings())
    service = ProductService.create(repository=SqlProductRepository.create(engine))
    ```

For HTTP API:
    ```python
    from product_api.api.app import create_app

    app = create_app()
    ```
"""

__version__ = "0.1.0"

from product_api.config import Settings, create_db_engine, get_settings
from product_api.dto import ProductRequest
from product_api.entities import ProductEntity
from product_api.handlers import ProductHandler
from product_api.protocols import ProductStore
from product_api.repositories import SqlProductRepository
from product_api.services import ErrorKind, ProductService, Result

__all__ = [
    "__version__",
    # Configuration
    "Settings",
    "get_settings",
    "create_db_engine",
    # Protocols (interfaces)
    "ProductStore",
    # Services (business logic)
    "ProductService",
    "Result",
    "ErrorKind",
    # Handlers (HTTP)
    "ProductHandler",
    # Repositories (data access)
    "SqlProductRepository",
    # Entities (domain models)
    "ProductEntity",
    # DTOs (API contracts)
    "ProductRequest",
]
