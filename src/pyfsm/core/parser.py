"""
Description language parser.

A description is free-form text split into sections by literal tags::

    :states:
    a b
    :initial:
    a
    :accept:
    b
    :alphabet:
    01
    :transitions:
    a, 0 > b
    b, 1 > a

Sections may appear in any order and each one is optional. A section body runs
until the next tag or the end of the text. The parser does no cross-checking;
that is the job of the build pipeline.
"""

from __future__ import annotations

import logging
from typing import Optional

from pyfsm.core.errors import MalformedTransition
from pyfsm.core.types import AutomatonDescription

logger = logging.getLogger(__name__)

SECTION_TAGS = ("states", "initial", "accept", "alphabet", "transitions")


def parse(text: str) -> AutomatonDescription:
    """
    Parse description text into an AutomatonDescription.

    Args:
        text: Section-tagged description.

    Returns:
        AutomatonDescription with tokens in input order. Missing sections give
        empty tuples, or None for ``initial``.

    Raises:
        MalformedTransition: A non-blank line of the transitions section is not
            of the form ``SOURCE, SYMBOL > TARGET``.
    """
    sections = _split_sections(text)

    states = _tokens(sections.get("states"))
    initial_tokens = _tokens(sections.get("initial"))
    initial: Optional[str] = initial_tokens[0] if initial_tokens else None
    accept = _tokens(sections.get("accept"))
    alphabet = _symbols(sections.get("alphabet"))
    transitions = _transitions(sections.get("transitions"))

    logger.debug(
        "parsed description: %d states, %d symbols, %d transitions",
        len(states),
        len(alphabet),
        len(transitions),
    )
    return AutomatonDescription(
        states=states,
        initial=initial,
        accept=accept,
        alphabet=alphabet,
        transitions=transitions,
    )


def _find_tags(text: str) -> list[tuple[int, int, str]]:
    marks: list[tuple[int, int, str]] = []
    pos = text.find(":")
    while pos != -1:
        for name in SECTION_TAGS:
            tag = f":{name}:"
            if text.startswith(tag, pos):
                marks.append((pos, pos + len(tag), name))
                # continue after the closing colon of the tag
                pos += len(tag) - 1
                break
        pos = text.find(":", pos + 1)
    return marks


def _split_sections(text: str) -> dict[str, tuple[str, int]]:
    """Map section name -> (body, line number of the tag)."""
    marks = _find_tags(text)
    sections: dict[str, tuple[str, int]] = {}

    for idx, (start, body_start, name) in enumerate(marks):
        body_end = marks[idx + 1][0] if idx + 1 < len(marks) else len(text)
        if name in sections:
            logger.debug("ignoring repeated :%s: section", name)
            continue
        line_number = text.count("\n", 0, start) + 1
        sections[name] = (text[body_start:body_end], line_number)

    return sections


def _tokens(section: Optional[tuple[str, int]]) -> tuple[str, ...]:
    if section is None:
        return ()
    body, _ = section
    return tuple(body.split())


def _symbols(section: Optional[tuple[str, int]]) -> tuple[str, ...]:
    # symbols are single characters and may be written without separators
    if section is None:
        return ()
    body, _ = section
    return tuple(char for char in body if not char.isspace())


def _transitions(section: Optional[tuple[str, int]]) -> tuple[tuple[str, str, str], ...]:
    if section is None:
        return ()
    body, first_line = section

    triples = []
    for offset, line in enumerate(body.split("\n")):
        if not line.strip():
            continue
        triples.append(_parse_transition(line, first_line + offset))
    return tuple(triples)


def _parse_transition(line: str, line_number: int) -> tuple[str, str, str]:
    source, comma, rest = line.partition(",")
    symbol, arrow, target = rest.partition(">")
    parts = (source.strip(), symbol.strip(), target.strip())

    if not comma or not arrow:
        raise MalformedTransition(line_number, line.strip())
    for part in parts:
        if len(part.split()) != 1:
            raise MalformedTransition(line_number, line.strip())

    source, symbol, target = parts
    return source, symbol, target
