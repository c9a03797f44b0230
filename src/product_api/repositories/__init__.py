"""Repository layer for data access.

This layer hides the relational database behind the ProductStore
protocol, so services can be tested against any implementation.
"""

from product_api.protocols import ProductStore

from .queries import SQL_SERVER_QUERIES, SQLITE_QUERIES, ProductQueries, queries_for_dialect
from .sql_product_repository import SqlProductRepository

__all__ = [
    "ProductStore",
    "ProductQueries",
    "SQL_SERVER_QUERIES",
    "SQLITE_QUERIES",
    "queries_for_dialect",
    "SqlProductRepository",
]
