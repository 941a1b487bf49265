"""Entity reference extraction and page-number anomaly detection"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional, Union

from ..utils.text_normalize import collapse_whitespace, strip_parentheticals, to_straight_quotes

_SEPARATORS = re.compile(r"\s*(?:,|/|&|\+)\s*")
_SEPARATORS_WITH_AND = re.compile(r"\s*(?:,|/|&|\bAND\b|\+)\s*", re.IGNORECASE)
_STRANGE_NUMBER = re.compile(r"^[\s(\[]*\d+[a-zA-Z]?[\s.)\]*:-]*$")


def get_entities(
    value: Optional[Union[str, Iterable[str]]],
    split_on_and: bool = True,
) -> List[str]:
    """Split a character or location field into distinct uppercase references.

    "JOHN AND MARY" -> ["JOHN", "MARY"]; location fields pass split_on_and=False
    so "ROCK AND ROLL BAR" stays one place. Parentheticals such as "(V.O.)" are kept
    out of the reference, duplicates keep their first position.
    """
    if not value:
        return []
    items = [value] if isinstance(value, str) else list(value)

    separators = _SEPARATORS_WITH_AND if split_on_and else _SEPARATORS
    references: List[str] = []
    for item in items:
        if not item:
            continue
        text = strip_parentheticals(to_straight_quotes(item))
        for part in separators.split(text):
            reference = collapse_whitespace(part).strip(" .,:;-").upper()
            if reference and reference not in references:
                references.append(reference)
    return references


def only_contains_strange_number(text: str) -> bool:
    """True for stray page/scene numbers like "12.", "(34)" or "56A"."""
    if not text or not text.strip():
        return False
    return _STRANGE_NUMBER.match(text) is not None
