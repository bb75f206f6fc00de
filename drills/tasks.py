"""Task states and their human-readable descriptions."""

from dataclasses import dataclass


class TaskState:
    """Base class of every task state."""

    __slots__ = ()


@dataclass(frozen=True)
class Todo(TaskState):
    """A task not yet started."""

    text: str


@dataclass(frozen=True)
class Running(TaskState):
    """A task in progress with the seconds it has left."""

    name: str
    remaining: int


@dataclass(frozen=True)
class Blocked(TaskState):
    """A task that cannot proceed, with the reason why."""

    reason: str


@dataclass(frozen=True)
class Done(TaskState):
    """A finished task."""


def describe_task(state: TaskState) -> str:
    """Return a one-line description of ``state``."""
    match state:
        case Todo(text=text):
            return f"TODO: {text}"
        case Running(name=name, remaining=remaining):
            return f"Running {name} ({remaining}s left)"
        case Blocked(reason=reason):
            return f"Blocked: {reason}"
        case Done():
            return "Done"
    raise TypeError(f"unknown task state: {state!r}")