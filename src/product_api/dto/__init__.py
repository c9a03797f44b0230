"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract.
Internal domain logic should use entities from the entities package.
"""

from .requests import ProductRequest
from .responses import HealthCheckResponse, ServiceInfoResponse

__all__ = [
    "ProductRequest",
    "HealthCheckResponse",
    "ServiceInfoResponse",
]
