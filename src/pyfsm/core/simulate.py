from __future__ import annotations

from typing import Optional

from pyfsm.core.automaton import Automaton


def trace(automaton: Automaton, word: str) -> tuple[str, ...]:
    """
    States visited while reading ``word``, starting with the initial state.

    The run halts at the first symbol with no outgoing transition, and stops
    (without deciding a state) at the first symbol outside the alphabet.
    """
    if automaton.initial is None:
        return ()

    alphabet = set(automaton.alphabet)
    current = automaton.initial
    visited = [current]

    for symbol in word:
        if symbol not in alphabet:
            break
        target = automaton.step(current, symbol)
        if target is None:
            break
        current = target
        visited.append(current)

    return tuple(visited)


def test_input(automaton: Automaton, word: str) -> Optional[str]:
    """
    Terminal state of a run over ``word``.

    Returns None when ``word`` contains a symbol outside the alphabet (or the
    automaton is empty). A symbol with no matching transition halts the run
    at the current state.
    """
    if automaton.initial is None:
        return None

    alphabet = set(automaton.alphabet)
    current = automaton.initial

    for symbol in word:
        if symbol not in alphabet:
            return None
        target = automaton.step(current, symbol)
        if target is None:
            return current
        current = target

    return current


# pytest would otherwise collect this as a test function on direct import
test_input.__test__ = False


def is_accepted(automaton: Automaton, word: str) -> bool:
    state = test_input(automaton, word)
    return state is not None and automaton.is_accepting(state)
