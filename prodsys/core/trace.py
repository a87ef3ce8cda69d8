"""
Trace events emitted by the engines.

The engines never print. At each interesting point they hand an event to
an optional trace sink -- any callable taking one event. Rendering is the
sink's business: PrintTrace writes lines to stdout, RecordingTrace keeps
the events for later inspection.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from .values import format_value


@dataclass(frozen=True)
class FactSet:
    """An action wrote a fact into working memory."""
    name: str
    value: object

    def describe(self) -> str:
        return f"  fact set: {self.name} = {format_value(self.value)}"


@dataclass(frozen=True)
class RuleFired:
    name: str

    def describe(self) -> str:
        return f"rule fired: {self.name}"


@dataclass(frozen=True)
class ConflictSet:
    size: int

    def describe(self) -> str:
        return f"conflict set: {self.size} rule(s)"


@dataclass(frozen=True)
class GoalReached:
    iteration: int

    def describe(self) -> str:
        return f"goals reached at iteration {self.iteration}"


@dataclass(frozen=True)
class Halted:
    """Forward chaining stopped without reaching its goals."""
    iteration: int
    reason: str

    def describe(self) -> str:
        return f"halted at iteration {self.iteration}: {self.reason}"


@dataclass(frozen=True)
class GoalKnown:
    """Backward chaining found the goal already in working memory."""
    goal: str
    value: object

    def describe(self) -> str:
        return f"goal '{self.goal}' already known: {format_value(self.value)}"


@dataclass(frozen=True)
class CycleDetected:
    goal: str

    def describe(self) -> str:
        return f"cycle detected while proving: {self.goal}"


@dataclass(frozen=True)
class NoRuleFor:
    goal: str

    def describe(self) -> str:
        return f"no rule derives goal: {self.goal}"


@dataclass(frozen=True)
class RuleTried:
    name: str
    goal: str

    def describe(self) -> str:
        return f"trying rule '{self.name}' for goal: {self.goal}"


TraceSink = Callable[[object], None]


def emit(trace: Optional[TraceSink], event) -> None:
    if trace is not None:
        trace(event)


class PrintTrace:
    """Print each event on its own line."""

    def __call__(self, event) -> None:
        print(event.describe())


@dataclass
class RecordingTrace:
    """Collect events in order."""
    events: list = field(default_factory=list)

    def __call__(self, event) -> None:
        self.events.append(event)

    def of_type(self, event_type) -> list:
        return [e for e in self.events if isinstance(e, event_type)]
