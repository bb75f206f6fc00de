"""Small, self-contained exercises: geometry, strings, statistics, parsing, task states, file sums and pipelines."""

__version__ = "0.1.0"