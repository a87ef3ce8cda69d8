"""
Working memory: the single mutable state of an inference run.

A name missing from memory is "unknown". A name bound to None is
"explicitly unknown/false". The two behave differently in backward
chaining, so WorkingMemory never conflates them: get() cannot tell them
apart, has() can.
"""

from typing import Iterator, Mapping, Optional

from .values import to_value


class WorkingMemory:
    """Mapping from fact name to value, mutated in place. Keeps no history."""

    def __init__(self, facts: Optional[Mapping] = None):
        self._facts: dict = {}
        if facts:
            for name, value in facts.items():
                self.set(name, value)

    def set(self, name: str, value) -> None:
        if not name:
            raise ValueError("Fact name must be a non-empty string")
        self._facts[name] = to_value(value)

    def get(self, name: str):
        return self._facts.get(name)

    def has(self, name: str) -> bool:
        return name in self._facts

    def items(self):
        return self._facts.items()

    def snapshot(self) -> dict:
        """A plain dict copy; later mutations of memory don't show up in it."""
        return dict(self._facts)

    def __contains__(self, name) -> bool:
        return name in self._facts

    def __len__(self) -> int:
        return len(self._facts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._facts)

    def __repr__(self):
        return f"WorkingMemory({self._facts!r})"
