"""Result type returned by the CLI validators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Validated option value, passed on to the command params."""

    value: T

    def is_failure(self) -> bool:
        return False


@dataclass(frozen=True)
class Failure:
    """Rejected option: message plus optional hints shown under it."""

    error: str
    details: dict[str, Any] | None = None

    def is_failure(self) -> bool:
        return True


Result = Union[Success[T], Failure]
