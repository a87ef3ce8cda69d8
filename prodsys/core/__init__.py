from .values import ValueKind, kind_of, to_value, values_equal, compare_numbers, format_value
from .memory import WorkingMemory
from .rules import OPERATORS, Condition, Action, Rule, RuleSet
from .conflict import Strategy, resolve_conflict
from .forward import (
    DEFAULT_MAX_ITERATIONS, ForwardRun, goals_satisfied,
    start_run, forward_step, run_forward, forward_chain,
)
from .backward import BackwardProof, prove, backward_chain
from .trace import (
    FactSet, RuleFired, ConflictSet, GoalReached, Halted,
    GoalKnown, CycleDetected, NoRuleFor, RuleTried,
    PrintTrace, RecordingTrace,
)

__all__ = [
    "ValueKind", "kind_of", "to_value", "values_equal", "compare_numbers", "format_value",
    "WorkingMemory",
    "OPERATORS", "Condition", "Action", "Rule", "RuleSet",
    "Strategy", "resolve_conflict",
    "DEFAULT_MAX_ITERATIONS", "ForwardRun", "goals_satisfied",
    "start_run", "forward_step", "run_forward", "forward_chain",
    "BackwardProof", "prove", "backward_chain",
    "FactSet", "RuleFired", "ConflictSet", "GoalReached", "Halted",
    "GoalKnown", "CycleDetected", "NoRuleFor", "RuleTried",
    "PrintTrace", "RecordingTrace",
]
