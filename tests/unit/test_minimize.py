"""
Tests for Hopcroft minimization.

Checks state merging, naming, purity, and the treatment of partial
transition functions.
"""

import pytest

from pyfsm.core.automaton import Automaton, build
from pyfsm.core.canonical import description
from pyfsm.core.minimize import minimize
from pyfsm.core.simulate import is_accepted
from pyfsm.measures.language import enumerate_words
from pyfsm.tasks.samples import (
    MINIMIZER_MACHINE,
    SIMULATOR_MACHINE,
    make_div3_automaton,
    make_parity_automaton,
)


def _same_language(a, b, max_length=6):
    words = enumerate_words(a.alphabet, max_length)
    return all(is_accepted(a, w) == is_accepted(b, w) for w in words)


class TestAlreadyMinimal:
    """Minimal machines keep their shape."""

    def test_example_keeps_two_states(self, example_automaton):
        result = minimize(example_automaton)
        assert len(result.states) == 2
        assert len(result.triples()) == 4
        assert result.states == ("a", "b")
        assert result.initial == "a"
        assert result.accepting == ("b",)
        assert result.alphabet == ("0", "1")

    def test_example_description_unchanged(self, example_automaton):
        assert description(minimize(example_automaton)) == description(example_automaton)

    def test_div3(self):
        dfa = make_div3_automaton()
        result = minimize(dfa)
        assert len(result) == 3
        assert _same_language(dfa, result)


class TestMerging:
    """Equivalent states collapse into one block."""

    def test_all_accepting_collapses(self):
        result = minimize(build(MINIMIZER_MACHINE))
        assert result.states == ("ab",)
        assert result.initial == "ab"
        assert result.accepting == ("ab",)
        assert result.triples() == []

    def test_redundant_parity(self):
        redundant = make_parity_automaton(redundant=True)
        result = minimize(redundant)
        assert result.states == ("e1e2", "o1o2")
        assert result.initial == "e1e2"
        assert result.accepting == ("e1e2",)
        assert _same_language(redundant, result)

    def test_simulator_machine(self):
        machine = build(SIMULATOR_MACHINE)
        result = minimize(machine)
        assert len(result) <= len(machine)
        assert _same_language(machine, result)

    def test_unreachable_states_dropped(self):
        machine = build(
            ":states: a b dead\n:initial: a\n:accept: b dead\n:alphabet: 0\n"
            ":transitions:\na, 0 > b\nb, 0 > a\ndead, 0 > dead"
        )
        result = minimize(machine)
        assert "dead" not in "".join(result.states)
        assert len(result) == 2

    def test_member_order_follows_declaration(self):
        """Block names join members in the order the states were declared."""
        machine = build(
            ":states: z y\n:initial: z\n:accept: z y\n:alphabet: 0\n"
            ":transitions:\nz, 0 > y\ny, 0 > z"
        )
        assert minimize(machine).states == ("zy",)


class TestPartialTransitions:
    """Missing transitions keep the acceptance of the halted state."""

    def test_language_preserved(self, partial_automaton):
        result = minimize(partial_automaton)
        assert _same_language(partial_automaton, result)

    def test_halting_accepting_state_absorbs(self, partial_automaton):
        result = minimize(partial_automaton)
        assert len(result) == 2
        assert is_accepted(result, "0101")

    def test_rejecting_halt_not_materialized(self):
        machine = build(":states: a b\n:initial: a\n:accept: b\n:alphabet: 01\n:transitions:\na, 0 > b")
        result = minimize(machine)
        assert result.states == ("a", "b")
        assert result.triples() == [("a", "0", "b")]
        assert not is_accepted(result, "1")

    def test_no_transitions(self):
        machine = build(":states: a b\n:initial: a\n:accept: a\n:alphabet: 0")
        result = minimize(machine)
        assert result.states == ("a",)
        assert is_accepted(result, "000")


class TestPurity:
    """minimize never touches its receiver."""

    def test_receiver_unchanged(self, example_automaton):
        before = description(example_automaton)
        result = minimize(example_automaton)
        assert result is not example_automaton
        assert description(example_automaton) == before

    def test_result_is_sealed(self, example_automaton):
        with pytest.raises(RuntimeError):
            minimize(example_automaton)._set_state("x")

    def test_empty(self):
        assert minimize(Automaton.empty()).is_empty

    def test_idempotent_counts(self):
        machine = make_parity_automaton(redundant=True)
        once = minimize(machine)
        twice = minimize(once)
        assert len(twice) == len(once)
        assert len(twice.triples()) == len(once.triples())

    def test_method_shortcut(self, example_automaton):
        assert example_automaton.minimize().states == ("a", "b")
