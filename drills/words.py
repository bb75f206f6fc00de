"""Word counting and string list normalisation."""

from collections import Counter
from collections.abc import Iterable
from itertools import groupby


def word_tally(text: str) -> dict[str, int]:
    """Count lower-cased words, treating any non-alphanumeric character as a separator."""
    words = (
        "".join(chars).lower()
        for is_word, chars in groupby(text, key=str.isalnum)
        if is_word
    )
    return dict(Counter(words))


def normalize_and_sort(items: Iterable[str]) -> list[str]:
    """Strip and lower-case each item, drop blanks, and return them sorted without duplicates."""
    cleaned = {item.strip().lower() for item in items}
    cleaned.discard("")
    return sorted(cleaned)