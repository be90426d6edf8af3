from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.random import Generator

from pyfsm.core.automaton import Automaton, build
from pyfsm.core.types import AutomatonDescription


def _validate_prob(name: str, value: float) -> None:
    if not (0.0 <= value <= 1.0):
        raise ValueError(f"{name} must be in [0, 1]")


def _validate_alphabet(alphabet: Sequence[str]) -> tuple[str, ...]:
    symbols = tuple(alphabet)
    if not symbols:
        raise ValueError("alphabet must not be empty")
    if len(set(symbols)) != len(symbols):
        raise ValueError("alphabet symbols must be unique")
    if any(len(symbol) != 1 or symbol.isspace() for symbol in symbols):
        raise ValueError("alphabet symbols must be single non-space characters")
    return symbols


def random_automaton(
    rng: Generator,
    n_states: int,
    alphabet: Sequence[str] = "01",
    p_accept: float = 0.5,
    p_transition: float = 1.0,
) -> Automaton:
    """
    Draw a random deterministic automaton with states q0..q{n-1}.

    Each state is accepting with probability ``p_accept`` and has a transition
    on each symbol with probability ``p_transition`` to a uniformly chosen
    state. q0 is the initial state.
    """
    if n_states <= 0:
        raise ValueError("n_states must be > 0")
    _validate_prob("p_accept", p_accept)
    _validate_prob("p_transition", p_transition)
    symbols = _validate_alphabet(alphabet)

    states = tuple(f"q{idx}" for idx in range(n_states))
    accept_mask = rng.random(n_states) < p_accept
    present = rng.random((n_states, len(symbols))) < p_transition
    targets = rng.integers(0, n_states, size=(n_states, len(symbols)))

    transitions = []
    for i, state in enumerate(states):
        for j, symbol in enumerate(symbols):
            if present[i, j]:
                transitions.append((state, symbol, states[int(targets[i, j])]))

    return build(
        AutomatonDescription(
            states=states,
            initial=states[0],
            accept=tuple(state for state, flag in zip(states, accept_mask) if flag),
            alphabet=symbols,
            transitions=tuple(transitions),
        )
    )


def random_words(
    rng: Generator,
    alphabet: Sequence[str],
    n_words: int,
    max_length: int,
) -> list[str]:
    """Draw words with uniform length in [0, max_length] over ``alphabet``."""
    if n_words <= 0:
        raise ValueError("n_words must be > 0")
    if max_length < 0:
        raise ValueError("max_length must be >= 0")
    symbols = np.array(_validate_alphabet(alphabet))

    lengths = rng.integers(0, max_length + 1, size=n_words)
    return ["".join(rng.choice(symbols, size=int(length))) for length in lengths]
