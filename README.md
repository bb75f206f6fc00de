# drills

A collection of small, focused functions, each solving one short exercise.
Nothing outside the standard library is needed.

## Installation

```
pip install .
```

To run the tests, install the test extra and run pytest:

```
pip install ".[test]"
pytest
```

## Modules

- `drills.geometry`: `rectangle_report(width, height)` returns `(area, perimeter, is_square)`. A negative side raises `ValueError`.
- `drills.greeting`: `build_greeting(name, times)` builds numbered lines such as `[1] Hello, Taro!`, joined by newlines. Zero repetitions give an empty string.
- `drills.stats`: `average_even(numbers)` gives the mean of the even numbers as a float, or `None` when there are none. `sliding_window_sum(values, window)` gives the sum of each run of `window` consecutive values; a window of zero, or one longer than `values`, gives an empty list.
- `drills.words`: `word_tally(text)` returns a dict counting lower-cased words, where any non-alphanumeric character separates words. `normalize_and_sort(items)` strips and lower-cases strings, drops empty ones, and returns them sorted with no duplicates.
- `drills.scores`: `parse_score_line(line)` turns `"12, 34,56"` into `[12, 34, 56]`. It raises `EmptyScoreLineError` for a blank line and `InvalidScoreTokenError` (with the offending text in its `token` attribute) for the first token that is not a 32-bit signed integer. Both are subclasses of `ParseScoreError`, itself a `ValueError`.
- `drills.tasks`: the frozen dataclasses `Todo(text)`, `Running(name, remaining)`, `Blocked(reason)` and `Done()` are all `TaskState`. `describe_task(state)` turns a state into text such as `TODO: Write docs` or `Running build (42s left)`; anything else raises `TypeError`.
- `drills.filesum`: `sum_file_numbers(path)` reads a UTF-8 file, adds up one integer per line and skips blank lines. A line that is not a 64-bit signed integer raises `ValueError` naming its 1-based line number; errors opening the file propagate as `OSError`.
- `drills.pipeline`: `apply_pipeline(items, func)` calls `func` on each item in order and keeps every result that is not `None`.

## Example

```python
from drills.geometry import rectangle_report
from drills.tasks import Running, describe_task

rectangle_report(3, 5)                               # (15, 16, False)
describe_task(Running(name="build", remaining=42))   # 'Running build (42s left)'
```

## What it does not do

The package is a library only: it installs no command-line tool, and each
function is meant to be imported and called from Python code.