"""
prodsys: a production-rule inference engine.

Facts live in a WorkingMemory; rules are conditions -> actions over fixed
fact names. Two ways to reason over them:

    forward_chain   data-driven: fire applicable rules (one conflict
                    resolution strategy picks among them) until the goals
                    hold or nothing applies
    backward_chain  goal-driven: prove one fact by recursively proving the
                    conditions of a rule that would set it

Usage:
    python -m prodsys --kb cpu_advisor
    python -m prodsys --kb cpu_advisor --mode forward --strategy most_specific
    python -m prodsys --mode backward --goal cpu_recommendation
"""

from .core.values import ValueKind, kind_of, to_value
from .core.memory import WorkingMemory
from .core.rules import Condition, Action, Rule, RuleSet
from .core.conflict import Strategy, resolve_conflict
from .core.forward import ForwardRun, forward_step, run_forward, forward_chain, goals_satisfied
from .core.backward import BackwardProof, prove, backward_chain
from .core.trace import PrintTrace, RecordingTrace
from .system import ProductionSystem
from .knowledge import KNOWLEDGE_BASES

__all__ = [
    "ValueKind", "kind_of", "to_value",
    "WorkingMemory",
    "Condition", "Action", "Rule", "RuleSet",
    "Strategy", "resolve_conflict",
    "ForwardRun", "forward_step", "run_forward", "forward_chain", "goals_satisfied",
    "BackwardProof", "prove", "backward_chain",
    "PrintTrace", "RecordingTrace",
    "ProductionSystem",
    "KNOWLEDGE_BASES",
]
