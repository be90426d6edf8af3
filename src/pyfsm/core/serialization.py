"""JSON-compatible form of automaton descriptions (in-memory strings only)."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import asdict
from typing import Any

from pyfsm.core.errors import ParseError
from pyfsm.core.types import AutomatonDescription

_LIST_FIELDS = ("states", "accept", "alphabet", "transitions")


def to_dict(description: AutomatonDescription) -> dict[str, Any]:
    data = asdict(description)
    for key in _LIST_FIELDS:
        data[key] = [list(item) if isinstance(item, tuple) else item for item in data[key]]
    return data


def from_dict(data: Mapping) -> AutomatonDescription:
    for key in _LIST_FIELDS:
        value = data.get(key)
        if value is not None and not isinstance(value, (list, tuple)):
            raise ParseError(f"{key} must be a list, got {type(value).__name__}")

    initial = data.get("initial")
    if initial is not None and not isinstance(initial, str):
        raise ParseError(f"initial must be a string, got {type(initial).__name__}")

    transitions = []
    for item in data.get("transitions") or ():
        if not isinstance(item, (list, tuple)) or len(item) != 3:
            raise ParseError(f"transition must be a [source, symbol, target] triple: {item!r}")
        transitions.append(tuple(str(part) for part in item))

    return AutomatonDescription(
        states=tuple(data.get("states") or ()),
        initial=initial,
        accept=tuple(data.get("accept") or ()),
        alphabet=tuple(data.get("alphabet") or ()),
        transitions=tuple(transitions),
    )


def dumps(description: AutomatonDescription, indent: int = 2) -> str:
    return json.dumps(to_dict(description), indent=indent)


def loads(text: str) -> AutomatonDescription:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ParseError(f"description JSON must be an object, got {type(data).__name__}")
    return from_dict(data)
