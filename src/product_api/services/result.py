"""
Result Pattern Implementation
Services return these instead of raising, so the HTTP layer can map each
error kind to a status code deterministically.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """The three ways a product operation can fail."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    INFRASTRUCTURE = "infrastructure"


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Either a successful value or a failure with an error kind and message.

    Examples:
        result = Result.ok(42)
        if result.is_success:
            print(result.data)

        result = Result.failure(ErrorKind.NOT_FOUND, "Product with ID: 7 not found.")
        if result.is_failure:
            print(result.kind, result.error)
    """

    success: bool
    data: T | None = None
    kind: ErrorKind | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "Result[T]":
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str) -> "Result[T]":
        """Create a failure result.

        Args:
            kind: Which error class this failure belongs to
            error: Client-safe message describing the failure
        """
        return cls(success=False, kind=kind, error=error)

    @property
    def is_success(self) -> bool:
        return self.success

    @property
    def is_failure(self) -> bool:
        return not self.success

    def unwrap(self) -> T:
        """
        Get the data from a successful result.

        Raises:
            ValueError: If called on a failure result
        """
        if self.is_failure:
            raise ValueError(f"Cannot unwrap a failure result: {self.error}")
        return self.data  # type: ignore[return-value]

    def __bool__(self) -> bool:
        return self.is_success

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok(data={self.data!r})"
        return f"Result.failure(kind={self.kind!r}, error={self.error!r})"
