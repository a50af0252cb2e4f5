"""
Result type returned by every lookup.

A Result carries either a value or a GeoBaseError. Composed lookups chain
with flat_map so that the first failure short-circuits the rest of the
chain and reaches the caller unchanged.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from ..error import GeoBaseError

T = TypeVar('T')
U = TypeVar('U')


@dataclass(frozen=True)
class Result(Generic[T]):
    """Outcome of a lookup: a value on success, an error on failure."""

    ok: bool
    value: Optional[T] = None
    error: Optional[GeoBaseError] = None

    @classmethod
    def success(cls, value: T) -> 'Result[T]':
        """Create a successful result."""
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: GeoBaseError) -> 'Result[Any]':
        """Create a failed result carrying the given error."""
        return cls(ok=False, error=error)

    @property
    def is_success(self) -> bool:
        return self.ok

    @property
    def is_failure(self) -> bool:
        return not self.ok

    def get(self) -> T:
        """
        Return the value, raising the carried error on failure.

        Raises:
            GeoBaseError: The failure reason
        """
        if not self.ok:
            raise self.error
        return self.value

    def get_or_else(self, default: T) -> T:
        """Return the value, or default on failure."""
        return self.value if self.ok else default

    def map(self, transform: Callable[[T], U]) -> 'Result[U]':
        """Apply transform to the value of a successful result."""
        if not self.ok:
            return self
        return Result.success(transform(self.value))

    def flat_map(self, transform: Callable[[T], 'Result[U]']) -> 'Result[U]':
        """Chain a lookup that itself returns a Result."""
        if not self.ok:
            return self
        return transform(self.value)

    def __str__(self) -> str:
        if self.ok:
            return f"Success({self.value!r})"
        return f"Failure({self.error})"
