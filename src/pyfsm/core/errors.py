"""
Error kinds raised while parsing descriptions and building automata.

Every error is a ValueError carrying a stable ``kind`` string and the
offending state, symbol, or line so callers can surface it verbatim.
"""

from __future__ import annotations

from typing import Optional


class AutomatonError(ValueError):
    """Base class for all description and construction failures."""

    kind = "AutomatonError"


class ParseError(AutomatonError):
    kind = "ParseError"


class MalformedTransition(ParseError):
    kind = "MalformedTransition"

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(
            f"Malformed transition on line {line_number}: {line!r} "
            "(expected 'SOURCE, SYMBOL > TARGET')"
        )


class BuildError(AutomatonError):
    kind = "BuildError"


class InvalidStateName(BuildError):
    kind = "InvalidStateName"

    def __init__(self, state: str):
        self.state = state
        super().__init__(
            f"State name {state!r} must be a single token without whitespace, ',', '>' or ':'"
        )


class InvalidSymbol(BuildError):
    kind = "InvalidSymbol"

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Alphabet symbol {symbol!r} must be a single non-space character other than '>'")


class MissingInitialState(BuildError):
    kind = "MissingInitialState"

    def __init__(self):
        super().__init__("Cannot build an automaton with no initial state")


class UnknownInitialState(BuildError):
    kind = "UnknownInitialState"

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Initial state {state!r} is not defined in states")


class UnknownAcceptingState(BuildError):
    kind = "UnknownAcceptingState"

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Accepting state {state!r} is not defined in states")


class TransitionsWithoutAlphabet(BuildError):
    kind = "TransitionsWithoutAlphabet"

    def __init__(self):
        super().__init__("Cannot specify transitions with an empty alphabet")


class UnknownTransitionSymbol(BuildError):
    kind = "UnknownTransitionSymbol"

    def __init__(self, symbol: str, transition: Optional[tuple[str, str, str]] = None):
        self.symbol = symbol
        self.transition = transition
        super().__init__(
            f"Transition {_format_triple(transition)} uses symbol {symbol!r} "
            "which is not defined in the alphabet"
        )


class UnknownTransitionState(BuildError):
    kind = "UnknownTransitionState"

    def __init__(self, state: str, transition: Optional[tuple[str, str, str]] = None):
        self.state = state
        self.transition = transition
        super().__init__(
            f"Transition {_format_triple(transition)} uses state {state!r} "
            "which is not defined in states"
        )


class NondeterministicTransition(BuildError):
    kind = "NondeterministicTransition"

    def __init__(self, state: str, symbol: str, targets: tuple[str, ...]):
        self.state = state
        self.symbol = symbol
        self.targets = targets
        super().__init__(
            f"State {state!r} has more than one transition on {symbol!r}: "
            f"{', '.join(targets)}"
        )


def _format_triple(transition: Optional[tuple[str, str, str]]) -> str:
    if transition is None:
        return "<unknown>"
    source, symbol, target = transition
    return f"'{source}, {symbol} > {target}'"
