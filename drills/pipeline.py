"""Map-and-filter over a sequence in a single pass."""

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")
U = TypeVar("U")


def apply_pipeline(items: Iterable[T], func: Callable[[T], U | None]) -> list[U]:
    """Apply ``func`` to each item in order, keeping every result that is not ``None``."""
    return [result for item in items if (result := func(item)) is not None]