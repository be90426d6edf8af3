"""
Canonical descriptions and hashes of automata.

- description: render an automaton back into description text
- canonical: minimal automaton with sorted alphabet and q0, q1, ... names
- hash_automaton: base64 fingerprint of the canonical description

Two automata over the same alphabet that accept the same words have the same
canonical form, and therefore the same hash.
"""

from __future__ import annotations

import base64

from pyfsm.core.automaton import Automaton, build
from pyfsm.core.minimize import minimize
from pyfsm.core.types import AutomatonDescription


def description(automaton: Automaton) -> str:
    """
    Render an automaton as description text.

    Sections are emitted in a fixed order (states, initial, accept, alphabet,
    transitions), one item per line, skipping empty optional sections. States,
    transitions, and symbols keep their creation order, so parsing the text
    rebuilds the same automaton.
    """
    if automaton.is_empty:
        return ""

    lines = [":states:", *automaton.states, ":initial:", automaton.initial]
    if automaton.accepting:
        lines += [":accept:", *automaton.accepting]
    if automaton.alphabet:
        lines += [":alphabet:", *automaton.alphabet]

    triples = automaton.triples()
    if triples:
        lines.append(":transitions:")
        lines += [f"{source}, {symbol} > {target}" for source, symbol, target in triples]

    return "\n".join(lines) + "\n"


def canonical(automaton: Automaton) -> Automaton:
    """
    Minimize and relabel into a form that only depends on the language.

    The alphabet is sorted and states are renamed q0, q1, ... in breadth-first
    order from the initial state, following the sorted alphabet.
    """
    minimal = minimize(automaton)
    if minimal.is_empty:
        return minimal

    alphabet = tuple(sorted(minimal.alphabet))
    ordered = [minimal.initial]
    names = {minimal.initial: "q0"}
    transitions = []

    idx = 0
    while idx < len(ordered):
        state = ordered[idx]
        idx += 1
        for symbol in alphabet:
            target = minimal.step(state, symbol)
            if target is None:
                continue
            if target not in names:
                names[target] = f"q{len(ordered)}"
                ordered.append(target)
            transitions.append((names[state], symbol, names[target]))

    return build(
        AutomatonDescription(
            states=tuple(names[state] for state in ordered),
            initial="q0",
            accept=tuple(names[state] for state in ordered if minimal.is_accepting(state)),
            alphabet=alphabet,
            transitions=tuple(transitions),
        )
    )


def hash_automaton(automaton: Automaton) -> str:
    """Reversible, non-cryptographic fingerprint of the canonical description."""
    text = description(canonical(automaton))
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_hash(fingerprint: str) -> str:
    return base64.b64decode(fingerprint.encode("ascii")).decode("utf-8")
