"""
Backward chaining: goal-driven proof with cycle detection.

To prove a goal fact:
    1. If it is already in memory, its value decides (None -> no,
       bool -> itself, anything else -> yes).
    2. If it was already attempted in this proof, that's a cycle -> no.
    3. Otherwise try, in rule-set order, each rule with an action that
       writes the goal. The first rule whose conditions can all be proven
       has its actions executed, and the goal is proven.

Proving is not a pure query: a successful proof leaves the derived facts
in memory.

Conditions are proven by fact name alone. A condition "budget >= 50000"
counts as satisfied whenever "budget" itself can be proven, whatever its
value; the operator and expected value play no part here, unlike forward
chaining.
"""

from dataclasses import dataclass, field

from .memory import WorkingMemory
from .rules import RuleSet
from .trace import (
    CycleDetected, GoalKnown, NoRuleFor, RuleTried, TraceSink, emit,
)


@dataclass
class BackwardProof:
    """
    Outcome of a backward-chaining proof.

    visited:  goals that were expanded through rules (the cycle guard)
    fired:    names of rules executed as part of the proof, in order
    """
    goal: str
    proven: bool = False
    visited: set = field(default_factory=set)
    fired: list = field(default_factory=list)


def _prove_goal(
    goal: str,
    memory: WorkingMemory,
    rules: RuleSet,
    proof: BackwardProof,
    trace: TraceSink,
) -> bool:
    if memory.has(goal):
        value = memory.get(goal)
        emit(trace, GoalKnown(goal, value))
        if value is None:
            return False
        if isinstance(value, bool):
            return value
        return True

    # One visited set for the whole call tree: a goal is expanded at most once.
    if goal in proof.visited:
        emit(trace, CycleDetected(goal))
        return False
    proof.visited.add(goal)

    candidates = rules.producing(goal)
    if not candidates:
        emit(trace, NoRuleFor(goal))
        return False

    for rule in candidates:
        emit(trace, RuleTried(rule.name, goal))
        if all(_prove_goal(c.fact_name, memory, rules, proof, trace)
               for c in rule.conditions):
            rule.execute(memory, trace)
            proof.fired.append(rule.name)
            return True

    return False


def prove(
    memory: WorkingMemory,
    rules,
    goal: str,
    trace: TraceSink = None,
) -> BackwardProof:
    """Try to prove goal against memory. Returns the proof record."""
    if not isinstance(rules, RuleSet):
        rules = RuleSet(rules)
    proof = BackwardProof(goal=goal)
    proof.proven = _prove_goal(goal, memory, rules, proof, trace)
    return proof


def backward_chain(
    memory: WorkingMemory,
    rules,
    goal: str,
    trace: TraceSink = None,
) -> bool:
    """Backward chain on goal, mutating memory through executed rules."""
    return prove(memory, rules, goal, trace).proven
