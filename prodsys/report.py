"""
Reporting utilities: working memory and run history.
"""

from .core.memory import WorkingMemory
from .core.forward import ForwardRun
from .core.backward import BackwardProof
from .core.values import format_value


def print_memory(memory: WorkingMemory):
    """Print every fact in working memory, in insertion order."""
    print(f"\n{'='*60}")
    print(f"Working memory ({len(memory)} facts):")
    print(f"{'='*60}")
    for name, value in memory.items():
        print(f"  {name} = {format_value(value)}")


def print_history(run: ForwardRun):
    """Print what fired at each forward-chaining iteration."""
    print(f"\n{'='*60}")
    print("Forward chaining history:")
    print(f"{'='*60}")
    for entry in run.history:
        fired = ", ".join(entry["fired"]) if entry["fired"] else "(nothing fired)"
        print(f"  Iteration {entry['iteration']} "
              f"[{entry['conflict_set_size']} applicable]: {fired}")
    outcome = "goals reached" if run.goals_reached else "goals NOT reached"
    print(f"  -> {outcome} ({run.halt_reason})")


def print_proof(proof: BackwardProof):
    print(f"\n{'='*60}")
    print(f"Backward chaining: {proof.goal}")
    print(f"{'='*60}")
    if proof.fired:
        for i, name in enumerate(proof.fired, 1):
            print(f"  {i}. {name}")
    print(f"  -> {'proven' if proof.proven else 'not proven'}")
