"""
Conditions, actions, rules and rule sets.

Conditions and actions reference fixed fact names; there are no variables
and no pattern matching. A rule is a conjunction of conditions plus an
ordered list of actions:

    Rule("workstation",
         conditions=[Condition("task_type", "=", "work"),
                     Condition("multithreading_needed", "=", True)],
         actions=[Action("required_category", "workstation")],
         priority=3)

Rule, Condition and Action are immutable once built.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator

from .memory import WorkingMemory
from .trace import FactSet, RuleFired, TraceSink, emit
from .values import (
    ValueKind, kind_of, to_value,
    values_equal, compare_numbers, sequence_contains, format_value,
)


# ── Operators ────────────────────────────────────────────────────────────────
#
# Each operator takes (actual, expected) and is only ever called with a
# fact that is present in memory.

def _in(actual, expected) -> bool:
    if kind_of(expected) != ValueKind.SEQUENCE:
        return False
    return sequence_contains(expected, actual)


def _contains(actual, expected) -> bool:
    kind = kind_of(actual)
    if kind == ValueKind.TEXT and kind_of(expected) == ValueKind.TEXT:
        return expected in actual
    if kind == ValueKind.SEQUENCE:
        return sequence_contains(actual, expected)
    return False


def _both_text(actual, expected) -> bool:
    return kind_of(actual) == ValueKind.TEXT and kind_of(expected) == ValueKind.TEXT


def _starts_with(actual, expected) -> bool:
    return _both_text(actual, expected) and actual.startswith(expected)


def _ends_with(actual, expected) -> bool:
    return _both_text(actual, expected) and actual.endswith(expected)


def _matches(actual, expected) -> bool:
    if not _both_text(actual, expected):
        return False
    try:
        return re.fullmatch(expected, actual) is not None
    except re.error:
        return False


OPERATORS = {
    "=":          lambda a, e: values_equal(a, e),
    "!=":         lambda a, e: not values_equal(a, e),
    ">":          lambda a, e: compare_numbers(a, e) > 0,
    "<":          lambda a, e: compare_numbers(a, e) < 0,
    ">=":         lambda a, e: compare_numbers(a, e) >= 0,
    "<=":         lambda a, e: compare_numbers(a, e) <= 0,
    "in":         _in,
    "contains":   _contains,
    "startsWith": _starts_with,
    "endsWith":   _ends_with,
    "matches":    _matches,
    # Only reachable for present facts: an absent fact fails before dispatch.
    "exists":     lambda a, e: True,
    "not_exists": lambda a, e: False,
}


# ── Condition / Action ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Condition:
    """A predicate (fact_name, operator, expected) over working memory."""
    fact_name: str
    operator: str
    expected: object = None

    def __post_init__(self):
        if not self.fact_name:
            raise ValueError("Condition needs a fact name")
        object.__setattr__(self, "expected", to_value(self.expected))

    def evaluate(self, memory: WorkingMemory) -> bool:
        """
        True iff the fact is present and the operator holds.

        An absent fact is False for every operator, exists and not_exists
        included. So is a fact bound to None. An unrecognized operator is
        False.
        """
        actual = memory.get(self.fact_name)
        if actual is None:
            return False
        op = OPERATORS.get(self.operator)
        if op is None:
            return False
        return op(actual, self.expected)

    def __str__(self):
        return f"{self.fact_name} {self.operator} {format_value(self.expected)}"


@dataclass(frozen=True)
class Action:
    """Unconditionally set fact_name to value."""
    fact_name: str
    value: object = None

    def __post_init__(self):
        if not self.fact_name:
            raise ValueError("Action needs a fact name")
        object.__setattr__(self, "value", to_value(self.value))

    def execute(self, memory: WorkingMemory, trace: TraceSink = None) -> None:
        memory.set(self.fact_name, self.value)
        emit(trace, FactSet(self.fact_name, self.value))

    def __str__(self):
        return f"{self.fact_name} := {format_value(self.value)}"


# ── Rule / RuleSet ───────────────────────────────────────────────────────────

@dataclass(frozen=True, eq=False)
class Rule:
    """
    Ordered conditions (AND), ordered actions, integer priority.

    Identity, not name, distinguishes rules: the name is only a label and
    two rules may share one. Hence eq=False.
    """
    name: str
    conditions: tuple = ()
    actions: tuple = ()
    priority: int = 0

    def __post_init__(self):
        object.__setattr__(self, "conditions", tuple(self.conditions))
        object.__setattr__(self, "actions", tuple(self.actions))

    @property
    def specificity(self) -> int:
        return len(self.conditions)

    def is_applicable(self, memory: WorkingMemory) -> bool:
        return all(cond.evaluate(memory) for cond in self.conditions)

    def execute(self, memory: WorkingMemory, trace: TraceSink = None) -> None:
        emit(trace, RuleFired(self.name))
        for action in self.actions:
            action.execute(memory, trace)

    def produces(self, fact_name: str) -> bool:
        """Does any action of this rule target fact_name?"""
        return any(a.fact_name == fact_name for a in self.actions)

    def __repr__(self):
        return f"Rule({self.name!r}, priority={self.priority})"


class RuleSet:
    """Insertion-ordered rules. Order matters: it is the tie-break order."""

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules: list = []
        for rule in rules:
            self.add(rule)

    def add(self, rule: Rule) -> "RuleSet":
        self._rules.append(rule)
        return self

    def producing(self, fact_name: str) -> list:
        """Rules with an action targeting fact_name, in insertion order."""
        return [r for r in self._rules if r.produces(fact_name)]

    @property
    def rules(self) -> list:
        return list(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)
