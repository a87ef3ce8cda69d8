"""
Fact values: a closed set of kinds.

A value held in working memory is exactly one of:
    Bool:      True / False
    Number:    int or float (never bool)
    Text:      str
    Sequence:  tuple of values (lists are normalized to tuples)
    Null:      None -- "explicitly unknown/false", distinct from an absent fact

Everything that compares values dispatches on ValueKind, so every operator
is defined for every pair of kinds.
"""

import math
from enum import Enum


class ValueKind(Enum):
    BOOL = "bool"
    NUMBER = "number"
    TEXT = "text"
    SEQUENCE = "sequence"
    NULL = "null"


def kind_of(value) -> ValueKind:
    """Classify a value. Raises TypeError for anything outside the variant."""
    if value is None:
        return ValueKind.NULL
    # bool before number: bool is an int subclass
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.TEXT
    if isinstance(value, tuple):
        return ValueKind.SEQUENCE
    raise TypeError(f"Unsupported fact value type: {type(value).__name__}")


def to_value(value):
    """
    Normalize a Python object into a fact value.

    Lists and tuples become tuples, recursively. Anything that is not a
    bool, number, string, sequence or None raises TypeError.
    """
    if isinstance(value, (list, tuple)):
        return tuple(to_value(v) for v in value)
    kind_of(value)
    return value


def values_equal(a, b) -> bool:
    """
    Structural equality within a kind.

    Values of different kinds are never equal: True != 1, "1" != 1.
    Numbers compare by numeric value, so 5 == 5.0.
    """
    ka, kb = kind_of(a), kind_of(b)
    if ka != kb:
        return False
    if ka == ValueKind.SEQUENCE:
        return len(a) == len(b) and all(values_equal(x, y) for x, y in zip(a, b))
    return a == b


def _as_float(x) -> float:
    # Ints beyond float range saturate to +/-inf instead of overflowing.
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf


def compare_numbers(a, b) -> int:
    """
    Three-way numeric comparison as floats.

    If either side is not a Number the result is 0, i.e. the operands are
    treated as equal: "abc" > 5 is False, "abc" >= 5 is True.

    The float ordering is total: NaN sorts above every number (and equal
    to itself), -0.0 sorts below 0.0.
    """
    if kind_of(a) != ValueKind.NUMBER or kind_of(b) != ValueKind.NUMBER:
        return 0
    x, y = _as_float(a), _as_float(b)
    x_nan, y_nan = math.isnan(x), math.isnan(y)
    if x_nan or y_nan:
        return int(x_nan) - int(y_nan)
    if x < y:
        return -1
    if x > y:
        return 1
    if x == 0:
        sx, sy = math.copysign(1.0, x), math.copysign(1.0, y)
        return (sx > sy) - (sx < sy)
    return 0


def sequence_contains(seq, value) -> bool:
    return any(values_equal(item, value) for item in seq)


def format_value(value) -> str:
    """Render a value the way the trace and reports print it."""
    kind = kind_of(value)
    if kind == ValueKind.NULL:
        return "null"
    if kind == ValueKind.BOOL:
        return "true" if value else "false"
    if kind == ValueKind.SEQUENCE:
        return "[" + ", ".join(format_value(v) for v in value) + "]"
    return str(value)
