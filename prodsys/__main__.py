"""
CLI entry point. Run as: python -m prodsys --kb <name>
"""

import argparse
import json
import random

from .core.conflict import Strategy
from .core.forward import DEFAULT_MAX_ITERATIONS
from .core.values import to_value
from .knowledge import KNOWLEDGE_BASES, get_knowledge_base
from .report import print_memory, print_history, print_proof
from .system import ProductionSystem


def parse_fact(text: str) -> tuple:
    """
    Parse NAME=VALUE. VALUE is read as JSON (true, 42, [1, 2], null),
    and taken as a plain string when it isn't valid JSON.
    Objects are rejected with ValueError: they are not fact values.
    """
    name, sep, raw = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise ValueError(f"Expected NAME=VALUE, got {text!r}")
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    try:
        return name, to_value(value)
    except TypeError as e:
        raise ValueError(f"Bad value for fact {name!r}: {e}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Production-rule inference")
    parser.add_argument("--kb", choices=list(KNOWLEDGE_BASES.keys()),
                        default="cpu_advisor", help="Which knowledge base to load")
    parser.add_argument("--mode", choices=["forward", "backward", "both"],
                        default="both", help="Inference mode")
    parser.add_argument("--strategy", type=str, default=None,
                        help="Conflict resolution: " + ", ".join(s.value for s in Strategy))
    parser.add_argument("--goal", action="append", default=None,
                        help="Goal fact (repeatable); overrides the knowledge base goals")
    parser.add_argument("--fact", action="append", default=[],
                        help="Initial fact NAME=VALUE (repeatable)")
    parser.add_argument("--max-iterations", type=int, default=DEFAULT_MAX_ITERATIONS,
                        help="Forward chaining iteration cap")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random strategy")
    parser.add_argument("--quiet", action="store_true", help="Less output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    kb = get_knowledge_base(args.kb)
    try:
        strategy = Strategy.parse(args.strategy) if args.strategy else kb["strategy"]
        facts = dict(kb["make_facts"]())
        facts.update(parse_fact(f) for f in args.fact)
    except ValueError as e:
        parser.error(str(e))

    goals = set(args.goal) if args.goal else set(kb["goals"])
    rng = random.Random(args.seed) if args.seed is not None else None

    system = ProductionSystem(
        strategy=strategy,
        rng=rng,
        max_iterations=args.max_iterations,
        verbose=not args.quiet,
    )
    system.add_rules(kb["make_rules"]())

    print(f"Knowledge base: {args.kb} -- {kb['description']}")
    print(f"Strategy: {strategy.value}")
    for name, value in facts.items():
        system.set_fact(name, value)

    if args.mode in ("forward", "both"):
        print(f"\nForward chaining towards: {', '.join(sorted(goals))}")
        system.forward_chaining(goals)
        print_history(system.last_run)
        print_memory(system.memory)

    if args.mode in ("backward", "both"):
        goal = args.goal[0] if args.goal else kb["backward_goal"]
        if args.mode == "both":
            # Re-check by backward chaining. A goal bound to null cannot be
            # proven, so this shows the null-vs-absent distinction at work.
            system.set_fact(goal, None)
        print(f"\nBackward chaining for: {goal}")
        system.backward_chaining(goal)
        print_proof(system.last_proof)


if __name__ == "__main__":
    main()
