from __future__ import annotations

from pyfsm.core.automaton import Automaton, build
from pyfsm.core.types import AutomatonDescription

SIMULATOR_MACHINE = """:states:
a
b
c
d
:initial:
a
:accept:
c
:alphabet:
0
1
:transitions:
a,0>b
a,1>a
b,0>d
b,1>c
c,0>c
c,1>b
d,0>d
d,1>c"""

# every state accepts, so the minimal machine has a single state
MINIMIZER_MACHINE = """:states:
a
b
:initial:
a
:accept:
b
a
:alphabet:
0
1
:transitions:
a, 0 > b
a, 1 > b
b, 0 > b
b, 1 > a"""


def make_div3_automaton() -> Automaton:
    """Binary numbers (most significant bit first) divisible by three."""
    return build(
        AutomatonDescription(
            states=("q0", "q1", "q2"),
            initial="q0",
            accept=("q0",),
            alphabet=("0", "1"),
            transitions=(
                ("q0", "0", "q0"),
                ("q0", "1", "q1"),
                ("q1", "0", "q2"),
                ("q1", "1", "q0"),
                ("q2", "0", "q1"),
                ("q2", "1", "q2"),
            ),
        )
    )


def make_parity_automaton(redundant: bool = False) -> Automaton:
    """
    Words over {0, 1} with an even number of 1s.

    With ``redundant=True`` each parity is split over two equivalent states,
    which minimization merges back into two.
    """
    if not redundant:
        return build(
            """
            :states: even odd
            :initial: even
            :accept: even
            :alphabet: 01
            :transitions:
            even, 0 > even
            even, 1 > odd
            odd, 0 > odd
            odd, 1 > even
            """
        )

    return build(
        """
        :states: e1 e2 o1 o2
        :initial: e1
        :accept: e1 e2
        :alphabet: 01
        :transitions:
        e1, 0 > e2
        e1, 1 > o1
        e2, 0 > e1
        e2, 1 > o2
        o1, 0 > o2
        o1, 1 > e2
        o2, 0 > o1
        o2, 1 > e1
        """
    )
