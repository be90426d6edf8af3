"""
Language-level measures on automata.

Compares automata by the words they accept over a bounded sample, and exposes
the transition function as a numpy table.
"""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Sequence
from typing import Optional

import numpy as np

from pyfsm.core.automaton import Automaton
from pyfsm.core.simulate import is_accepted


def enumerate_words(alphabet: Sequence[str], max_length: int) -> list[str]:
    """Every word of length 0..max_length, shortest first, in alphabet order."""
    if max_length < 0:
        raise ValueError("max_length must be >= 0")

    words = [""]
    for length in range(1, max_length + 1):
        words.extend("".join(combo) for combo in itertools.product(alphabet, repeat=length))
    return words


def acceptance_vector(automaton: Automaton, words: Iterable[str]) -> np.ndarray:
    return np.array([is_accepted(automaton, word) for word in words], dtype=bool)


def language_agreement(a: Automaton, b: Automaton, words: Sequence[str]) -> float:
    """Fraction of ``words`` on which both automata give the same verdict."""
    if not words:
        raise ValueError("words must not be empty")

    agree = acceptance_vector(a, words) == acceptance_vector(b, words)
    return float(np.count_nonzero(agree)) / float(len(words))


def find_counterexample(a: Automaton, b: Automaton, max_length: int) -> Optional[str]:
    """Shortest word up to ``max_length`` accepted by exactly one automaton."""
    alphabet = list(dict.fromkeys(a.alphabet + b.alphabet))
    for word in enumerate_words(alphabet, max_length):
        if is_accepted(a, word) != is_accepted(b, word):
            return word
    return None


def transition_table(automaton: Automaton) -> np.ndarray:
    """
    Transition function as an int64 matrix.

    Rows follow ``automaton.states`` and columns ``automaton.alphabet``; each
    cell holds the target state index, or -1 where no transition exists.
    """
    index = {state: idx for idx, state in enumerate(automaton.states)}
    table = np.full((len(automaton.states), len(automaton.alphabet)), -1, dtype=np.int64)

    for row, state in enumerate(automaton.states):
        for col, symbol in enumerate(automaton.alphabet):
            target = automaton.step(state, symbol)
            if target is not None:
                table[row, col] = index[target]
    return table
