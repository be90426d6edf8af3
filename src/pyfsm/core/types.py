"""
Core types for pyfsm: Transition, AutomatonDescription, BuildResult.

Pure data containers with validation. No behavior logic.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from pyfsm.core.automaton import Automaton
    from pyfsm.core.errors import AutomatonError


@dataclass(frozen=True)
class Transition:
    """
    Transition: the single edge between an ordered pair of states.

    Immutable: symbols are an insertion-ordered tuple without duplicates.
    """

    source: str
    target: str
    symbols: tuple[str, ...]

    def __post_init__(self):
        """Normalize symbols to a tuple and check the edge constraints."""
        symbols = tuple(self.symbols)
        if not symbols:
            raise ValueError("transition must carry at least one symbol")
        if len(set(symbols)) != len(symbols):
            raise ValueError("transition symbols must be unique")
        object.__setattr__(self, "symbols", symbols)

    @property
    def label(self) -> str:
        """Aggregated edge label, e.g. ``"0,1"``."""
        return ",".join(self.symbols)

    def with_symbol(self, symbol: str) -> Transition:
        """Return this transition with ``symbol`` appended (self if present)."""
        if symbol in self.symbols:
            return self
        return Transition(self.source, self.target, self.symbols + (symbol,))


@dataclass(frozen=True)
class AutomatonDescription:
    """
    Serializable shape of an automaton, as produced by the parser.

    ``transitions`` holds ``(source, symbol, target)`` triples. No
    cross-checking happens here; the build pipeline validates.
    """

    states: tuple[str, ...] = ()
    initial: Optional[str] = None
    accept: tuple[str, ...] = ()
    alphabet: tuple[str, ...] = ()
    transitions: tuple[tuple[str, str, str], ...] = field(default_factory=tuple)

    def __post_init__(self):
        """Freeze list inputs into tuples."""
        object.__setattr__(self, "states", tuple(self.states or ()))
        object.__setattr__(self, "accept", tuple(self.accept or ()))
        object.__setattr__(self, "alphabet", tuple(self.alphabet or ()))

        transitions = []
        for triple in self.transitions or ():
            triple = tuple(triple)
            if len(triple) != 3:
                raise ValueError(f"transition must be a (source, symbol, target) triple: {triple}")
            transitions.append(triple)
        object.__setattr__(self, "transitions", tuple(transitions))


@dataclass(frozen=True)
class BuildResult:
    """Outcome of a build attempt: exactly one of automaton or error is set."""

    automaton: Optional["Automaton"] = None
    error: Optional["AutomatonError"] = None

    def __post_init__(self):
        if (self.automaton is None) == (self.error is None):
            raise ValueError("BuildResult needs exactly one of automaton or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> "Automaton":
        """Return the automaton, re-raising the captured error on failure."""
        if self.error is not None:
            raise self.error
        return self.automaton
