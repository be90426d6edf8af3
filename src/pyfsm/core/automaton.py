from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional, Union

from pyfsm.core.errors import AutomatonError
from pyfsm.core.parser import parse
from pyfsm.core.serialization import from_dict
from pyfsm.core.types import AutomatonDescription, BuildResult, Transition
from pyfsm.core.validate import validate_description

logger = logging.getLogger(__name__)

Source = Union[str, AutomatonDescription, Mapping]


class Automaton:
    """
    Validated, read-only deterministic finite automaton.

    Instances come out of :func:`build`. The ``_set_*`` steps are only run by
    the build pipeline and refuse to run once the instance is sealed.
    """

    def __init__(self) -> None:
        self._states: dict[str, None] = {}
        self._alphabet: dict[str, None] = {}
        self._accepting: dict[str, None] = {}
        self._initial: Optional[str] = None

        self._edges: dict[tuple[str, str], Transition] = {}
        self._outgoing: dict[str, dict[str, Transition]] = {}
        self._sealed = False

    @classmethod
    def parse(cls, source: Source) -> Automaton:
        return build(source)

    @classmethod
    def empty(cls) -> Automaton:
        automaton = cls()
        automaton._seal()
        return automaton

    @property
    def states(self) -> tuple[str, ...]:
        return tuple(self._states)

    @property
    def alphabet(self) -> tuple[str, ...]:
        return tuple(self._alphabet)

    @property
    def accepting(self) -> tuple[str, ...]:
        return tuple(self._accepting)

    @property
    def initial(self) -> Optional[str]:
        return self._initial

    @property
    def is_empty(self) -> bool:
        return not self._states

    def is_accepting(self, state: str) -> bool:
        return state in self._accepting

    def transitions(self) -> list[Transition]:
        """All transitions in creation order."""
        return list(self._edges.values())

    def transition(self, source: str, target: str) -> Optional[Transition]:
        return self._edges.get((source, target))

    def outgoing(self, state: str) -> list[Transition]:
        return list(self._outgoing.get(state, {}).values())

    def triples(self) -> list[tuple[str, str, str]]:
        """One ``(source, symbol, target)`` per symbol of every transition."""
        return [
            (edge.source, symbol, edge.target)
            for edge in self._edges.values()
            for symbol in edge.symbols
        ]

    def step(self, state: str, symbol: str) -> Optional[str]:
        for edge in self._outgoing.get(state, {}).values():
            if symbol in edge.symbols:
                return edge.target
        return None

    def reachable(self) -> set[str]:
        """States reachable from the initial state, initial included."""
        if self._initial is None:
            return set()

        visited = {self._initial}
        stack = [self._initial]
        while stack:
            current = stack.pop()
            for target in self._outgoing.get(current, {}):
                if target not in visited:
                    visited.add(target)
                    stack.append(target)
        return visited

    def to_description(self) -> AutomatonDescription:
        return AutomatonDescription(
            states=self.states,
            initial=self._initial,
            accept=self.accepting,
            alphabet=self.alphabet,
            transitions=tuple(self.triples()),
        )

    # Shortcuts to the functional API; imported lazily since those modules
    # depend on this one.

    def test_input(self, word: str) -> Optional[str]:
        from pyfsm.core.simulate import test_input

        return test_input(self, word)

    def is_accepted(self, word: str) -> bool:
        from pyfsm.core.simulate import is_accepted

        return is_accepted(self, word)

    def minimize(self) -> Automaton:
        from pyfsm.core.minimize import minimize

        return minimize(self)

    def description(self) -> str:
        from pyfsm.core.canonical import description

        return description(self)

    def hash(self) -> str:
        from pyfsm.core.canonical import hash_automaton

        return hash_automaton(self)

    def __len__(self) -> int:
        return len(self._states)

    def __repr__(self) -> str:
        return (
            f"Automaton(states={len(self._states)}, alphabet={self.alphabet!r}, "
            f"initial={self._initial!r}, accepting={len(self._accepting)}, "
            f"transitions={len(self._edges)})"
        )

    def _check_unsealed(self) -> None:
        if self._sealed:
            raise RuntimeError("automaton is read-only after construction")

    def _set_symbol(self, symbol: str) -> None:
        self._check_unsealed()
        self._alphabet[symbol] = None

    def _set_state(self, state: str) -> None:
        self._check_unsealed()
        self._states[state] = None

    def _set_initial(self, state: str) -> None:
        self._check_unsealed()
        self._initial = state

    def _set_accepted(self, state: str) -> None:
        self._set_state(state)
        self._accepting[state] = None

    def _set_transition(self, source: str, target: str, symbol: str) -> None:
        self._check_unsealed()
        edge = self._edges.get((source, target))
        if edge is None:
            edge = Transition(source, target, (symbol,))
        else:
            edge = edge.with_symbol(symbol)

        self._edges[(source, target)] = edge
        self._outgoing.setdefault(source, {})[target] = edge

    def _seal(self) -> None:
        self._sealed = True


def build(source: Source) -> Automaton:
    """
    Build an automaton from description text, a description, or a mapping.

    Raises:
        AutomatonError: The text is malformed or the description violates an
            automaton invariant. Nothing is returned in that case.
    """
    description = _coerce(source)
    validate_description(description)

    automaton = Automaton()
    if not description.states:
        automaton._seal()
        return automaton

    for symbol in description.alphabet:
        automaton._set_symbol(symbol)
    for state in description.states:
        automaton._set_state(state)
    automaton._set_initial(description.initial)
    for state in description.accept:
        automaton._set_accepted(state)
    for source_state, symbol, target in description.transitions:
        automaton._set_transition(source_state, target, symbol)
    automaton._seal()

    logger.debug("built %r", automaton)
    return automaton


def try_build(source: Source) -> BuildResult:
    """Like :func:`build`, but captures construction errors in a BuildResult."""
    try:
        return BuildResult(automaton=build(source))
    except AutomatonError as exc:
        logger.debug("build failed: %s: %s", exc.kind, exc)
        return BuildResult(error=exc)


def _coerce(source: Source) -> AutomatonDescription:
    if isinstance(source, AutomatonDescription):
        return source
    if isinstance(source, str):
        return parse(source)
    if isinstance(source, Mapping):
        return from_dict(source)
    raise TypeError(
        f"source must be str, AutomatonDescription, or Mapping, got {type(source)}"
    )
