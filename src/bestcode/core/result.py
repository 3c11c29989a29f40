"""Two-variant result container returned by every fallible operation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

__all__ = ["Failure", "Result", "Success"]

T = TypeVar("T")
E = TypeVar("E", bound=BaseException)
D = TypeVar("D")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """Successful outcome carrying ``value``."""

    success: ClassVar[bool] = True

    value: T

    @property
    def data(self) -> T:
        return self.value

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: object) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """Failed outcome carrying ``error``."""

    success: ClassVar[bool] = False

    error: E

    def unwrap(self):
        """Raise the carried error."""

        raise self.error

    def unwrap_or(self, default: D) -> D:
        return default


Result = Union[Success[T], Failure[E]]
