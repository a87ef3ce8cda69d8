"""
Conflict resolution: pick one rule out of the conflict set.

The conflict set arrives in rule-set order. Ties under HIGHEST_PRIORITY and
MOST_SPECIFIC go to the earliest rule in that order. RANDOM draws from an
injected random.Random, so a fixed seed gives a reproducible firing order.
"""

import random
from enum import Enum
from typing import Optional, Sequence

from .rules import Rule
from .trace import ConflictSet, TraceSink, emit


class Strategy(Enum):
    FIRST_MATCH = "first_match"
    HIGHEST_PRIORITY = "highest_priority"
    MOST_SPECIFIC = "most_specific"
    RANDOM = "random"

    @classmethod
    def parse(cls, name: str) -> "Strategy":
        """Look a strategy up by name, case-insensitively."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            choices = ", ".join(s.name for s in cls)
            raise ValueError(f"Unknown strategy {name!r}; choose from {choices}") from None


def _earliest_max(rules: Sequence[Rule], key) -> Rule:
    # max() keeps the first of equal elements
    return max(rules, key=key)


def resolve_conflict(
    conflict_set: Sequence[Rule],
    strategy=Strategy.FIRST_MATCH,
    rng: Optional[random.Random] = None,
    trace: TraceSink = None,
) -> Rule:
    """
    Select one rule from a non-empty conflict set. Never mutates the input.

    Anything that is not a known Strategy falls back to FIRST_MATCH.
    """
    if not conflict_set:
        raise ValueError("Conflict set is empty")
    emit(trace, ConflictSet(len(conflict_set)))

    if strategy == Strategy.HIGHEST_PRIORITY:
        return _earliest_max(conflict_set, key=lambda r: r.priority)
    if strategy == Strategy.MOST_SPECIFIC:
        return _earliest_max(conflict_set, key=lambda r: r.specificity)
    if strategy == Strategy.RANDOM:
        if rng is None:
            rng = random.Random()
        return conflict_set[rng.randrange(len(conflict_set))]
    return conflict_set[0]
