"""
Tests for the CPU advisor knowledge base, run end to end.
"""

import random

import pytest

from prodsys.core.memory import WorkingMemory
from prodsys.core.rules import RuleSet
from prodsys.core.conflict import Strategy
from prodsys.core.forward import run_forward
from prodsys.core.backward import prove
from prodsys.knowledge import KNOWLEDGE_BASES, get_knowledge_base
from prodsys.knowledge.cpu_advisor import (
    CPU_ADVISOR_GOALS, make_cpu_advisor_facts, make_cpu_advisor_rules,
)


def advise(strategy=Strategy.HIGHEST_PRIORITY, **overrides):
    facts = make_cpu_advisor_facts()
    facts.update(overrides)
    memory = WorkingMemory(facts)
    run = run_forward(memory, make_cpu_advisor_rules(), CPU_ADVISOR_GOALS,
                      strategy, rng=random.Random(0))
    return run, memory


class TestRegistry:
    def test_registered(self):
        kb = KNOWLEDGE_BASES["cpu_advisor"]
        assert kb["goals"] == CPU_ADVISOR_GOALS
        assert kb["strategy"] == Strategy.HIGHEST_PRIORITY
        assert len(kb["make_rules"]()) == 20

    def test_unknown_kb(self):
        with pytest.raises(ValueError):
            get_knowledge_base("wine_advisor")

    def test_fresh_facts_each_call(self):
        facts = make_cpu_advisor_facts()
        facts["budget_rub"] = 1
        assert make_cpu_advisor_facts()["budget_rub"] == 165000


class TestForward:
    def test_rendering_workstation(self):
        run, memory = advise()
        assert run.goals_reached
        assert run.fired == ["Rendering / simulation", "Recommend Threadripper"]
        assert memory.get("required_category") == "professional"
        assert memory.get("cpu_recommendation") == "AMD Ryzen Threadripper 9960X"
        assert memory.get("budget_ok") is True

    @pytest.mark.parametrize("strategy", list(Strategy))
    def test_every_strategy_reaches_goals(self, strategy):
        run, memory = advise(strategy)
        assert run.goals_reached
        assert memory.get("cpu_recommendation") == "AMD Ryzen Threadripper 9960X"

    def test_mid_range_gaming_on_am5(self):
        run, memory = advise(task_type="gaming", required_performance="medium",
                             budget_rub=45000, socket="AM5")
        assert run.goals_reached
        assert memory.get("required_category") == "gaming_mid"
        assert memory.get("budget_sufficient") is True
        assert memory.get("cpu_recommendation") == "AMD Ryzen 5 7600X"

    def test_budget_too_small(self):
        run, memory = advise(budget_rub=30000)
        assert not run.goals_reached
        assert memory.get("budget_sufficient") is False
        assert not memory.has("cpu_recommendation")

    def test_energy_efficient_work_prefers_apple(self):
        run, memory = advise(energy_efficiency_important=True)
        assert run.goals_reached
        # Both the rendering category rule and Apple M4 have priority 3;
        # the category rule comes first in the rule set.
        assert run.history[0]["fired"][0] == "Rendering / simulation"
        assert memory.get("cpu_recommendation") == "Apple M4 Pro"


class TestBackward:
    def test_null_recommendation_cannot_be_proven(self):
        run, memory = advise()
        memory.set("cpu_recommendation", None)
        proof = prove(memory, RuleSet(make_cpu_advisor_rules()), "cpu_recommendation")
        assert not proof.proven
        assert proof.fired == []

    def test_name_only_proof_picks_first_derivable_chain(self):
        memory = WorkingMemory(make_cpu_advisor_facts())
        proof = prove(memory, make_cpu_advisor_rules(), "cpu_recommendation")
        assert proof.proven
        # Category and budget conditions are proven by name, so the first
        # gaming rules succeed even for a work task.
        assert proof.fired == [
            "Entry-level gaming",
            "Budget for entry level",
            "Recommend i7 for demanding games",
        ]
        assert memory.get("required_category") == "gaming_entry"
        assert memory.get("cpu_recommendation") == "Intel Core i7-14700K"
