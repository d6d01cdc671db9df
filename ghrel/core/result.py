"""Result type for explicit error handling.

Fallible operations return ``Ok(value)`` or ``Err(error)`` instead of raising,
so the release pipeline can decide at each stage whether a failure is fatal.

Usage:
    def find(tag: str) -> Result[int, str]:
        if not tag:
            return Err("empty tag")
        return Ok(42)

    match find("v1.0.0"):
        case Ok(release_id):
            print(f"release {release_id}")
        case Err(error):
            print(f"error: {error}")

Callers narrow with ``isinstance(result, Err)`` or ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """Successful result holding ``value``."""

    value: T

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """Failed result holding ``error``."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


Result: TypeAlias = Ok[T] | Err[E]
