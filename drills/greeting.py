"""Numbered greeting lines."""


def build_greeting(name: str, times: int) -> str:
    """Return ``times`` lines of ``[n] Hello, name!`` joined by newlines.

    Numbering starts at 1; zero repetitions give an empty string.
    """
    return "\n".join(f"[{count}] Hello, {name}!" for count in range(1, times + 1))