"""
ProductionSystem: working memory, rules and a strategy bundled together.

A convenience wrapper over forward_chain / backward_chain for the common
case of one session driving one memory:

    system = ProductionSystem(strategy=Strategy.HIGHEST_PRIORITY)
    for rule in rules:
        system.add_rule(rule)
    system.set_fact("task_type", "work")
    system.forward_chaining({"cpu_recommendation"})
"""

import random
from typing import Iterable, Optional

from .core.memory import WorkingMemory
from .core.rules import Rule, RuleSet
from .core.conflict import Strategy
from .core.forward import DEFAULT_MAX_ITERATIONS, ForwardRun, run_forward
from .core.backward import BackwardProof, prove
from .core.trace import FactSet, PrintTrace, emit


class ProductionSystem:
    def __init__(
        self,
        strategy: Strategy = Strategy.FIRST_MATCH,
        rng: Optional[random.Random] = None,
        max_iterations: int = DEFAULT_MAX_ITERATIONS,
        verbose: bool = True,
    ):
        self.memory = WorkingMemory()
        self.rules = RuleSet()
        self.strategy = strategy
        self.rng = rng
        self.max_iterations = max_iterations
        self.trace = PrintTrace() if verbose else None
        self.last_run: Optional[ForwardRun] = None
        self.last_proof: Optional[BackwardProof] = None

    def add_rule(self, rule: Rule) -> "ProductionSystem":
        self.rules.add(rule)
        return self

    def add_rules(self, rules: Iterable[Rule]) -> "ProductionSystem":
        for rule in rules:
            self.rules.add(rule)
        return self

    def set_fact(self, name: str, value) -> None:
        self.memory.set(name, value)
        emit(self.trace, FactSet(name, self.memory.get(name)))

    def set_strategy(self, strategy: Strategy) -> None:
        self.strategy = strategy

    def forward_chaining(self, goals: Iterable[str]) -> bool:
        self.last_run = run_forward(
            self.memory, self.rules, goals,
            strategy=self.strategy,
            max_iterations=self.max_iterations,
            rng=self.rng,
            trace=self.trace,
        )
        return self.last_run.goals_reached

    def backward_chaining(self, goal: str) -> bool:
        self.last_proof = prove(self.memory, self.rules, goal, trace=self.trace)
        return self.last_proof.proven
