from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Explicit success/failure carrier returned by fallible operations."""

    ok: bool
    value: T | None = None
    error: E | None = None

    @staticmethod
    def success(v: T) -> "Result[T, E]":
        return Result(ok=True, value=v)

    @staticmethod
    def failure(e: E) -> "Result[T, E]":
        return Result(ok=False, error=e)

    def unwrap(self) -> T:
        """Return the success value or raise the carried error."""
        if not self.ok:
            if self.error is None:
                raise ValueError("failure Result without error")
            raise self.error
        return self.value  # type: ignore[return-value]
