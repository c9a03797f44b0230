"""Service layer for business logic.

Services depend on protocols (interfaces), not concrete implementations,
and report failures as Result values instead of raising.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .product_service import INVALID_PRODUCT_MESSAGE, ProductService, not_found_message
from .result import ErrorKind, Result

__all__ = [
    "ErrorKind",
    "INVALID_PRODUCT_MESSAGE",
    "ProductService",
    "Result",
    "not_found_message",
]
