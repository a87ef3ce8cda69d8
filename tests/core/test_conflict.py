"""
Tests for conflict resolution.

Core claims:
    - HIGHEST_PRIORITY / MOST_SPECIFIC break ties by earliest position
    - RANDOM is reproducible under a fixed seed
    - The conflict set is never mutated
"""

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from prodsys.core.rules import Condition, Rule
from prodsys.core.conflict import Strategy, resolve_conflict
from prodsys.core.trace import ConflictSet, RecordingTrace


# ── Helpers ──────────────────────────────────────────────────────────────────

def make_rule(name, priority=0, n_conditions=0) -> Rule:
    conds = [Condition(f"c{i}", "exists") for i in range(n_conditions)]
    return Rule(name, conditions=conds, priority=priority)


# ── Unit tests ───────────────────────────────────────────────────────────────

class TestStrategies:
    def test_first_match(self):
        rules = [make_rule("a", 1), make_rule("b", 9)]
        assert resolve_conflict(rules, Strategy.FIRST_MATCH) is rules[0]

    def test_highest_priority(self):
        rules = [make_rule("a", 1), make_rule("b", 9), make_rule("c", 3)]
        assert resolve_conflict(rules, Strategy.HIGHEST_PRIORITY) is rules[1]

    def test_highest_priority_tie_goes_to_earliest(self):
        rules = [make_rule("a", 1), make_rule("b", 5), make_rule("c", 5)]
        assert resolve_conflict(rules, Strategy.HIGHEST_PRIORITY) is rules[1]

    def test_most_specific(self):
        rules = [make_rule("a", 9, 1), make_rule("b", 0, 3), make_rule("c", 0, 3)]
        assert resolve_conflict(rules, Strategy.MOST_SPECIFIC) is rules[1]

    def test_negative_priorities(self):
        rules = [make_rule("a", -5), make_rule("b", -1)]
        assert resolve_conflict(rules, Strategy.HIGHEST_PRIORITY) is rules[1]

    @pytest.mark.parametrize("strategy", [None, "bogus", 42])
    def test_unknown_strategy_falls_back_to_first_match(self, strategy):
        rules = [make_rule("a", 1), make_rule("b", 9)]
        assert resolve_conflict(rules, strategy) is rules[0]

    def test_random_in_range(self):
        rules = [make_rule(str(i)) for i in range(5)]
        rng = random.Random(0)
        for _ in range(20):
            assert resolve_conflict(rules, Strategy.RANDOM, rng) in rules

    def test_random_without_rng_still_works(self):
        rules = [make_rule("a"), make_rule("b")]
        assert resolve_conflict(rules, Strategy.RANDOM) in rules

    def test_empty_conflict_set_rejected(self):
        with pytest.raises(ValueError):
            resolve_conflict([], Strategy.FIRST_MATCH)

    def test_emits_conflict_set_size(self):
        trace = RecordingTrace()
        resolve_conflict([make_rule("a"), make_rule("b")], trace=trace)
        assert trace.events == [ConflictSet(2)]


class TestStrategyParse:
    @pytest.mark.parametrize("name, expected", [
        ("highest_priority", Strategy.HIGHEST_PRIORITY),
        ("MOST_SPECIFIC", Strategy.MOST_SPECIFIC),
        (" random ", Strategy.RANDOM),
        ("First_Match", Strategy.FIRST_MATCH),
    ])
    def test_parse(self, name, expected):
        assert Strategy.parse(name) == expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Strategy.parse("lifo")


# ── Property-based tests ─────────────────────────────────────────────────────

priorities = st.lists(st.integers(min_value=-3, max_value=3), min_size=1, max_size=8)


class TestConflictProperties:

    @given(priorities)
    def test_priority_tie_break_is_earliest(self, prios):
        rules = [make_rule(f"r{i}", p) for i, p in enumerate(prios)]
        chosen = resolve_conflict(rules, Strategy.HIGHEST_PRIORITY)
        assert chosen is rules[prios.index(max(prios))]

    @given(st.lists(st.integers(min_value=0, max_value=3), min_size=1, max_size=8))
    def test_specificity_tie_break_is_earliest(self, counts):
        rules = [make_rule(f"r{i}", 0, n) for i, n in enumerate(counts)]
        chosen = resolve_conflict(rules, Strategy.MOST_SPECIFIC)
        assert chosen is rules[counts.index(max(counts))]

    @given(priorities, st.sampled_from(list(Strategy)))
    def test_input_not_mutated(self, prios, strategy):
        rules = [make_rule(f"r{i}", p) for i, p in enumerate(prios)]
        before = list(rules)
        resolve_conflict(rules, strategy, random.Random(1))
        assert rules == before

    @given(st.integers(min_value=1, max_value=8), st.integers())
    def test_random_reproducible_under_seed(self, n, seed):
        rules = [make_rule(f"r{i}") for i in range(n)]
        rng_a, rng_b = random.Random(seed), random.Random(seed)
        picks_a = [resolve_conflict(rules, Strategy.RANDOM, rng_a) for _ in range(10)]
        picks_b = [resolve_conflict(rules, Strategy.RANDOM, rng_b) for _ in range(10)]
        assert picks_a == picks_b
