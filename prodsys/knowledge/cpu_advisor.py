"""
Knowledge base: CPU advisor.

Recommends a processor from the kind of work, required performance,
budget (in rubles) and a few preferences. The chain is:

    task type + performance (+ multithreading)  ->  required_category
    required_category + budget                  ->  budget_sufficient
    required_category + budget / preferences    ->  cpu_recommendation, budget_ok

Meant for the HIGHEST_PRIORITY strategy. Budget guards have priority 1,
most classification and budget rules 2, recommendations 2-5.
"""

from ..core.rules import Action, Condition, Rule
from ..core.conflict import Strategy


CPU_ADVISOR_GOALS = frozenset({"cpu_recommendation", "budget_ok"})
CPU_ADVISOR_STRATEGY = Strategy.HIGHEST_PRIORITY


def _rule(name, conditions, actions, priority):
    return Rule(
        name=name,
        conditions=[Condition(*c) for c in conditions],
        actions=[Action(*a) for a in actions],
        priority=priority,
    )


def _recommend(name, conditions, cpu, priority):
    return _rule(name, conditions,
                 [("cpu_recommendation", cpu), ("budget_ok", True)],
                 priority)


def _category(name, conditions, category, priority):
    return _rule(name, conditions,
                 [("required_category", category), ("task_identified", True)],
                 priority)


def make_cpu_advisor_rules() -> list:
    return [
        # ── Budget sufficiency per category ──
        _rule("Budget for entry level", [
            ("required_category", "=", "gaming_entry"),
            ("budget_rub", ">=", 15000),
            ("budget_rub", "<=", 30000),
        ], [("budget_sufficient", True)], 2),
        _rule("Budget for mid range", [
            ("required_category", "=", "gaming_mid"),
            ("budget_rub", ">=", 25000),
            ("budget_rub", "<=", 60000),
        ], [("budget_sufficient", True)], 2),
        _rule("Budget for top tier", [
            ("required_category", "=", "gaming_top"),
            ("budget_rub", ">=", 50000),
        ], [("budget_sufficient", True)], 2),

        # ── Task classification ──
        _category("Entry-level gaming", [
            ("task_type", "=", "gaming"),
            ("required_performance", "=", "minimal"),
        ], "gaming_entry", 2),
        _category("Mid-range gaming", [
            ("task_type", "=", "gaming"),
            ("required_performance", "=", "medium"),
            ("budget_rub", ">=", 25000),
        ], "gaming_mid", 2),
        _category("Competitive gaming", [
            ("task_type", "=", "gaming"),
            ("required_performance", "=", "high"),
            ("budget_rub", ">=", 50000),
        ], "gaming_top", 2),
        _category("Office work", [
            ("task_type", "=", "work"),
            ("required_performance", "=", "minimal"),
        ], "office", 2),
        _category("Programming / design", [
            ("task_type", "=", "work"),
            ("required_performance", "=", "medium"),
            ("multithreading_needed", "=", True),
        ], "workstation", 3),
        _category("Rendering / simulation", [
            ("task_type", "=", "work"),
            ("required_performance", "=", "high"),
            ("multithreading_needed", "=", True),
        ], "professional", 3),

        # ── Budget guards ──
        _rule("Budget too small", [
            ("required_category", "in", ["gaming_top", "professional"]),
            ("budget_rub", "<", 40000),
        ], [("budget_sufficient", False)], 1),
        _rule("Budget fits", [
            ("required_category", "=", "gaming_entry"),
            ("budget_rub", ">=", 15000),
        ], [("budget_sufficient", True)], 1),

        # ── Recommendations ──
        _recommend("Recommend AMD Ryzen 5 for gaming", [
            ("required_category", "=", "gaming_entry"),
            ("budget_sufficient", "=", True),
            ("energy_efficiency_important", "=", True),
        ], "AMD Ryzen 5 7600", 3),
        _recommend("Recommend Intel i3 for entry level", [
            ("required_category", "=", "gaming_entry"),
            ("budget_sufficient", "=", True),
            ("integrated_graphics_needed", "=", True),
        ], "Intel Core i3-12100", 3),
        _recommend("Recommend i5 for mid-range gaming", [
            ("required_category", "=", "gaming_mid"),
            ("budget_sufficient", "=", True),
            ("socket", "=", "LGA1700"),
        ], "Intel Core i5-13400F", 4),
        _recommend("Recommend Ryzen 5 for AM5", [
            ("required_category", "=", "gaming_mid"),
            ("budget_sufficient", "=", True),
            ("socket", "=", "AM5"),
        ], "AMD Ryzen 5 7600X", 4),
        _recommend("Recommend i7 for demanding games", [
            ("required_category", "=", "gaming_top"),
            ("budget_sufficient", "=", True),
        ], "Intel Core i7-14700K", 5),
        _recommend("Recommend Pentium Gold for the office", [
            ("required_category", "=", "office"),
            ("integrated_graphics_needed", "=", True),
        ], "Intel Pentium Gold G7400", 2),
        _recommend("Recommend Ryzen 7 for work", [
            ("required_category", "=", "workstation"),
            ("multithreading_needed", "=", True),
        ], "AMD Ryzen 7 9700X", 4),
        _recommend("Recommend Threadripper", [
            ("required_category", "=", "professional"),
            ("budget_rub", ">=", 100000),
        ], "AMD Ryzen Threadripper 9960X", 5),
        _recommend("Recommend Apple M4", [
            ("task_type", "=", "work"),
            ("energy_efficiency_important", "=", True),
            ("required_performance", "=", "high"),
        ], "Apple M4 Pro", 3),
    ]


def make_cpu_advisor_facts() -> dict:
    """A rendering workstation with a generous budget."""
    return {
        "task_type": "work",
        "budget_rub": 165000,
        "required_performance": "high",
        "integrated_graphics_needed": False,
        "energy_efficiency_important": False,
        "multithreading_needed": True,
    }
