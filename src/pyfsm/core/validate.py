from __future__ import annotations

from pyfsm.core.errors import (
    InvalidStateName,
    InvalidSymbol,
    MissingInitialState,
    NondeterministicTransition,
    TransitionsWithoutAlphabet,
    UnknownAcceptingState,
    UnknownInitialState,
    UnknownTransitionState,
    UnknownTransitionSymbol,
)
from pyfsm.core.types import AutomatonDescription

# characters the description text uses as separators
_RESERVED = frozenset(",>:")


def validate_description(description: AutomatonDescription) -> None:
    """
    Check a description against the automaton invariants.

    Checks run in a fixed order and the first failure is raised. A description
    without states is valid and describes the empty automaton.

    Raises:
        BuildError: One of the named construction error kinds.
    """
    states = set(description.states)
    if not states:
        return

    _validate_names(description)
    _validate_initial(description, states)
    _validate_accept(description, states)
    _validate_transitions(description, states)


def _validate_names(description: AutomatonDescription) -> None:
    # names must survive a round trip through the description text
    for state in description.states:
        if not state or any(ch.isspace() or ch in _RESERVED for ch in state):
            raise InvalidStateName(state)
    for symbol in description.alphabet:
        if len(symbol) != 1 or symbol.isspace() or symbol == ">":
            raise InvalidSymbol(symbol)


def _validate_initial(description: AutomatonDescription, states: set[str]) -> None:
    if not description.initial:
        raise MissingInitialState()
    if description.initial not in states:
        raise UnknownInitialState(description.initial)


def _validate_accept(description: AutomatonDescription, states: set[str]) -> None:
    for state in description.accept:
        if state not in states:
            raise UnknownAcceptingState(state)


def _validate_transitions(description: AutomatonDescription, states: set[str]) -> None:
    if not description.transitions:
        return
    if not description.alphabet:
        raise TransitionsWithoutAlphabet()

    alphabet = set(description.alphabet)
    for triple in description.transitions:
        if triple[1] not in alphabet:
            raise UnknownTransitionSymbol(triple[1], triple)

    for triple in description.transitions:
        source, _, target = triple
        if source not in states:
            raise UnknownTransitionState(source, triple)
        if target not in states:
            raise UnknownTransitionState(target, triple)

    targets: dict[tuple[str, str], list[str]] = {}
    for source, symbol, target in description.transitions:
        seen = targets.setdefault((source, symbol), [])
        if target not in seen:
            seen.append(target)

    for (source, symbol), seen in targets.items():
        if len(seen) > 1:
            raise NondeterministicTransition(source, symbol, tuple(seen))
