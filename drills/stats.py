"""Small numeric summaries over integer sequences."""

from collections.abc import Iterable, Sequence


def average_even(numbers: Iterable[int]) -> float | None:
    """Return the mean of the even numbers, or ``None`` if there are none."""
    evens = [n for n in numbers if n % 2 == 0]
    if not evens:
        return None
    return sum(evens) / len(evens)


def sliding_window_sum(values: Sequence[int], window: int) -> list[int]:
    """Return the sum of every run of ``window`` consecutive values.

    A window of zero or one longer than ``values`` yields an empty list.
    """
    items = list(values)
    if window == 0 or window > len(items):
        return []
    return [
        sum(items[start:start + window])
        for start in range(len(items) - window + 1)
    ]