"""Keyword scoring shared by the heuristic sub-parsers

Very rough: counts whole-word, case-insensitive occurrences of each label's
keywords. Deterministic and dependency free, good enough to steer prompts.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, Iterable, List, Sequence


@lru_cache(maxsize=2048)
def _keyword_pattern(keyword: str) -> re.Pattern:
    return re.compile(rf"(?<![\w-]){re.escape(keyword)}(?![\w-])", re.IGNORECASE)


def count_keyword(text: str, keyword: str) -> int:
    if not text or not keyword:
        return 0
    return len(_keyword_pattern(keyword).findall(text))


def contains_keyword(text: str, keyword: str) -> bool:
    return bool(text) and _keyword_pattern(keyword).search(text) is not None


def rank_labels(text: str, keywords_by_label: Dict[str, Sequence[str]], limit: int) -> Dict[str, float]:
    """Return up to `limit` labels with a positive score, best first.

    Ties keep the vocabulary order so results are stable.
    """
    scores: Dict[str, float] = {}
    for label, keywords in keywords_by_label.items():
        score = sum(count_keyword(text, k) for k in keywords)
        if score > 0:
            scores[label] = float(score)
    ordered = sorted(scores.items(), key=lambda kv: -kv[1])
    return dict(ordered[:max(0, limit)])


def find_labels(texts: Iterable[str], keywords_by_label: Dict[str, Sequence[str]]) -> List[str]:
    """Labels whose keywords occur in any of the texts, in vocabulary order."""
    joined = "\n".join(t for t in texts if t)
    if not joined:
        return []
    return [
        label for label, keywords in keywords_by_label.items()
        if any(contains_keyword(joined, k) for k in keywords)
    ]
