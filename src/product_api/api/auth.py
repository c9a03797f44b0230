"""Function-level API key gate.

The key may arrive in the ``x-functions-key`` header or the ``code``
query parameter. With no key configured every request is let through.
"""

import secrets

from fastapi import HTTPException, Request, Security, status
from fastapi.security import APIKeyHeader, APIKeyQuery

from product_api.api.dependencies import get_settings_from_state

api_key_header = APIKeyHeader(name="x-functions-key", auto_error=False)
api_key_query = APIKeyQuery(name="code", auto_error=False)


def require_function_key(
    request: Request,
    header_key: str | None = Security(api_key_header),
    query_key: str | None = Security(api_key_query),
) -> None:
    """Reject the request with 401 unless it carries the configured key.

    Raises:
        HTTPException: If a key is configured and the supplied one is missing or wrong
    """
    expected = get_settings_from_state(request).api_key
    if expected is None:
        return

    supplied = header_key or query_key
    if supplied is None or not secrets.compare_digest(supplied.encode(), expected.encode()):
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
