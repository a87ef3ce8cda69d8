"""
Forward chaining: the data-driven main loop.

One iteration = collect the rules in the pool whose conditions hold, then
drain that conflict set one selection at a time: fire the chosen rule,
drop it from the pool for good, check the goals. When the conflict set is
drained without reaching the goals, the next iteration recomputes it
against the updated memory.

The pool only ever shrinks, so a run fires each rule at most once and
performs at most len(rules) firings. The iteration cap is a safety bound
on top of that.
"""

import random
from dataclasses import dataclass, field
from typing import Iterable, Optional

from .memory import WorkingMemory
from .conflict import Strategy, resolve_conflict
from .trace import GoalReached, Halted, TraceSink, emit


DEFAULT_MAX_ITERATIONS = 100


def goals_satisfied(goals: Iterable[str], memory: WorkingMemory) -> bool:
    """Every goal is present, not None, and True if it is a bool."""
    for goal in goals:
        value = memory.get(goal)
        if value is None or value is False:
            return False
    return True


@dataclass
class ForwardRun:
    """
    State of one forward-chaining run.

    pool:        rules that have not fired yet (a copy of the rule set)
    fired:       names of fired rules, in firing order
    history:     one entry per iteration
    """
    pool: list
    goals: frozenset
    strategy: Strategy = Strategy.FIRST_MATCH
    rng: Optional[random.Random] = None
    iteration: int = 0
    fired: list = field(default_factory=list)
    history: list = field(default_factory=list)
    halted: bool = False
    halt_reason: str = ""
    goals_reached: bool = False


def start_run(
    rules: Iterable,
    goals: Iterable[str],
    strategy=Strategy.FIRST_MATCH,
    rng: Optional[random.Random] = None,
) -> ForwardRun:
    if strategy == Strategy.RANDOM and rng is None:
        rng = random.Random()
    return ForwardRun(pool=list(rules), goals=frozenset(goals),
                      strategy=strategy, rng=rng)


def forward_step(
    run: ForwardRun,
    memory: WorkingMemory,
    trace: TraceSink = None,
) -> ForwardRun:
    """Execute one iteration of the forward-chaining loop."""
    if run.halted:
        return run

    run.iteration += 1
    applicable = [r for r in run.pool if r.is_applicable(memory)]
    entry = {
        "iteration": run.iteration,
        "conflict_set_size": len(applicable),
        "fired": [],
    }
    run.history.append(entry)

    if not applicable:
        run.halted = True
        run.halt_reason = "no applicable rules"
        emit(trace, Halted(run.iteration, run.halt_reason))
        return run

    while applicable:
        chosen = resolve_conflict(applicable, run.strategy, run.rng, trace)
        chosen.execute(memory, trace)
        # Rules compare by identity, so same-named rules stay separate.
        run.pool.remove(chosen)
        applicable.remove(chosen)
        run.fired.append(chosen.name)
        entry["fired"].append(chosen.name)

        if goals_satisfied(run.goals, memory):
            run.halted = True
            run.goals_reached = True
            run.halt_reason = "goals reached"
            emit(trace, GoalReached(run.iteration))
            return run

    return run


def run_forward(
    memory: WorkingMemory,
    rules: Iterable,
    goals: Iterable[str],
    strategy=Strategy.FIRST_MATCH,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: Optional[random.Random] = None,
    trace: TraceSink = None,
) -> ForwardRun:
    """
    Run forward chaining until the goals are reached, no rule applies, or
    max_iterations iterations have run. Returns the final ForwardRun.
    """
    run = start_run(rules, goals, strategy, rng)
    while run.iteration < max_iterations and not run.halted:
        forward_step(run, memory, trace)
    if not run.halted:
        run.halted = True
        run.halt_reason = "iteration cap reached"
        emit(trace, Halted(run.iteration, run.halt_reason))
    return run


def forward_chain(
    memory: WorkingMemory,
    rules: Iterable,
    goals: Iterable[str],
    strategy=Strategy.FIRST_MATCH,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    rng: Optional[random.Random] = None,
    trace: TraceSink = None,
) -> bool:
    """Forward chain over memory in place. True iff the goals were reached."""
    run = run_forward(memory, rules, goals, strategy, max_iterations, rng, trace)
    return run.goals_reached
