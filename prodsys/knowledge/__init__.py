"""
Knowledge-base registry.

Each knowledge base is a dict describing a ready-to-run problem:
    make_rules:   () -> list[Rule]
    make_facts:   () -> dict          initial working memory
    goals:        frozenset[str]      forward-chaining goals
    strategy:     Strategy            default conflict resolution
    backward_goal: str                goal re-proven after forward chaining
    description:  str
"""

from .cpu_advisor import (
    make_cpu_advisor_rules, make_cpu_advisor_facts,
    CPU_ADVISOR_GOALS, CPU_ADVISOR_STRATEGY,
)


KNOWLEDGE_BASES = {
    "cpu_advisor": {
        "make_rules":    make_cpu_advisor_rules,
        "make_facts":    make_cpu_advisor_facts,
        "goals":         CPU_ADVISOR_GOALS,
        "strategy":      CPU_ADVISOR_STRATEGY,
        "backward_goal": "cpu_recommendation",
        "description":   "CPU advisor: pick a processor from task, performance and budget",
    },
}


def get_knowledge_base(name: str) -> dict:
    try:
        return KNOWLEDGE_BASES[name]
    except KeyError:
        choices = ", ".join(sorted(KNOWLEDGE_BASES))
        raise ValueError(f"Unknown knowledge base {name!r}; choose from {choices}") from None
