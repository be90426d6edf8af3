"""
Hopcroft partition-refinement minimization.

The transition function of an automaton may be partial. A missing transition
halts a run at the current state, so it behaves like a move into a sink that
keeps the acceptance of the state it halted in. Two virtual sinks model this
during refinement. A move that behaves the same as halting is left implicit
in the result, and states only reached through such moves are dropped.

Minimized state names are deterministic: the members of a block are joined in
the order the states were declared, and states are listed in breadth-first
order from the initial state following the alphabet.
"""

from __future__ import annotations

import logging
from typing import Union

from pyfsm.core.automaton import Automaton, build
from pyfsm.core.types import AutomatonDescription

logger = logging.getLogger(__name__)


class _Sink:
    def __init__(self, accepting: bool):
        self.accepting = accepting

    def __repr__(self) -> str:
        return "<accepting sink>" if self.accepting else "<rejecting sink>"


_ACCEPT_SINK = _Sink(accepting=True)
_REJECT_SINK = _Sink(accepting=False)

Node = Union[str, _Sink]
Block = frozenset


def minimize(automaton: Automaton) -> Automaton:
    """
    Return the minimal automaton accepting the same words.

    The receiver is left untouched. Unreachable states are dropped, and so is
    any transition that behaves the same as halting in its source state.
    """
    if automaton.is_empty:
        return Automaton.empty()

    alphabet = automaton.alphabet
    reachable = automaton.reachable()
    order = {state: idx for idx, state in enumerate(automaton.states)}

    delta = _complete_transitions(automaton, reachable)
    partition = _refine(automaton, reachable, delta)

    blocks = [block for block in partition if any(isinstance(node, str) for node in block)]
    block_of: dict[Node, Block] = {node: block for block in partition for node in block}
    members = {
        block: sorted((node for node in block if isinstance(node, str)), key=order.__getitem__)
        for block in blocks
    }
    edges = {
        block: _block_edges(automaton, members[block][0], alphabet, delta, block_of)
        for block in blocks
    }

    ordered = _breadth_first(block_of[automaton.initial], edges)
    names = _block_names(ordered, members)

    accept = []
    transitions = []
    for block in ordered:
        if automaton.is_accepting(members[block][0]):
            accept.append(names[block])
        for symbol, target in edges[block]:
            transitions.append((names[block], symbol, names[target]))

    result = build(
        AutomatonDescription(
            states=tuple(names[block] for block in ordered),
            initial=names[block_of[automaton.initial]],
            accept=tuple(accept),
            alphabet=alphabet,
            transitions=tuple(transitions),
        )
    )
    logger.debug("minimized %d states to %d", len(automaton), len(result))
    return result


def _complete_transitions(
    automaton: Automaton,
    reachable: set[str],
) -> dict[Node, dict[str, Node]]:
    delta: dict[Node, dict[str, Node]] = {}
    for state in automaton.states:
        if state not in reachable:
            continue
        sink = _ACCEPT_SINK if automaton.is_accepting(state) else _REJECT_SINK
        row: dict[str, Node] = {}
        for symbol in automaton.alphabet:
            target = automaton.step(state, symbol)
            row[symbol] = sink if target is None else target
        delta[state] = row

    for sink in (_ACCEPT_SINK, _REJECT_SINK):
        delta[sink] = {symbol: sink for symbol in automaton.alphabet}
    return delta


def _refine(
    automaton: Automaton,
    reachable: set[str],
    delta: dict[Node, dict[str, Node]],
) -> list[Block]:
    final = {s for s in reachable if automaton.is_accepting(s)} | {_ACCEPT_SINK}
    rest = (set(reachable) - final) | {_REJECT_SINK}

    inverse: dict[str, dict[Node, set[Node]]] = {symbol: {} for symbol in automaton.alphabet}
    for node, row in delta.items():
        for symbol, target in row.items():
            inverse[symbol].setdefault(target, set()).add(node)

    partition: list[Block] = [Block(block) for block in (final, rest) if block]
    worklist: list[Block] = list(partition)

    while worklist:
        splitter = worklist.pop()
        for symbol in automaton.alphabet:
            predecessors: set[Node] = set()
            for target in splitter:
                predecessors.update(inverse[symbol].get(target, ()))
            if not predecessors:
                continue

            refined: list[Block] = []
            for block in partition:
                inside = block & predecessors
                outside = block - predecessors
                if not inside or not outside:
                    refined.append(block)
                    continue

                refined.extend((inside, outside))
                if block in worklist:
                    worklist.remove(block)
                    worklist.extend((inside, outside))
                else:
                    worklist.append(inside if len(inside) <= len(outside) else outside)
            partition = refined

    return partition


def _block_edges(
    automaton: Automaton,
    representative: str,
    alphabet: tuple[str, ...],
    delta: dict[Node, dict[str, Node]],
    block_of: dict[Node, Block],
) -> list[tuple[str, Block]]:
    # A move into the block of the sink matching the source's acceptance
    # is the same as halting, so it is left implicit.
    halt = _ACCEPT_SINK if automaton.is_accepting(representative) else _REJECT_SINK
    edges = []
    for symbol in alphabet:
        target = block_of[delta[representative][symbol]]
        if halt not in target:
            edges.append((symbol, target))
    return edges


def _breadth_first(start: Block, edges: dict[Block, list[tuple[str, Block]]]) -> list[Block]:
    ordered = [start]
    seen = {start}
    idx = 0
    while idx < len(ordered):
        block = ordered[idx]
        idx += 1
        for _, target in edges[block]:
            if target not in seen:
                seen.add(target)
                ordered.append(target)
    return ordered


def _block_names(ordered: list[Block], members: dict[Block, list[str]]) -> dict[Block, str]:
    names: dict[Block, str] = {}
    taken: set[str] = set()
    for block in ordered:
        base = "".join(members[block])
        name = base
        suffix = 2
        while name in taken:
            name = f"{base}_{suffix}"
            suffix += 1
        taken.add(name)
        names[block] = name
    return names
