"""Result type for catalog operations that may succeed or fail."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Either a value or an error, never raised across the UI boundary."""

    value: T | None = None
    error: E | None = None

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: T) -> "Result[T, E]":
        return cls(value=value, error=None)

    @classmethod
    def failure(cls, error: E) -> "Result[T, E]":
        return cls(value=None, error=error)

    def unwrap(self) -> T:
        """Unwrap the value, raising if error."""
        if self.is_error:
            raise ValueError(f"Cannot unwrap error result: {self.error}")
        return self.value  # type: ignore

    def unwrap_or(self, default: T) -> T:
        return self.value if self.is_success else default  # type: ignore

    def unwrap_or_else(self, on_error: Callable[[E], T]) -> T:
        """Return the value, or hand the error to ``on_error`` and return its result."""
        if self.is_error:
            return on_error(self.error)  # type: ignore[arg-type]
        return self.value  # type: ignore
