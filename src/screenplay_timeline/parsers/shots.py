"""Camera shot types embedded in action lines ("CLOSE ON", "WIDE SHOT" ...)"""

from __future__ import annotations

from typing import Iterable, List

from .keyword_matching import contains_keyword

# Longer spellings come first so "extreme close-up" wins over "close-up"
SHOTS = {
    "extreme close-up": ["extreme close-up", "extreme close up", "extreme closeup"],
    "extreme long shot": ["extreme long shot", "extreme wide shot"],
    "medium close-up": ["medium close-up", "medium close up"],
    "close-up": ["close-up", "close up", "closeup", "close on"],
    "medium shot": ["medium shot", "mid shot"],
    "long shot": ["long shot", "wide shot", "wide on"],
    "establishing shot": ["establishing shot"],
    "point of view shot": ["pov", "point of view"],
    "over the shoulder shot": ["over the shoulder"],
    "aerial shot": ["aerial shot", "aerial view", "bird's eye view", "overhead shot"],
    "tracking shot": ["tracking shot", "dolly shot"],
    "insert shot": ["insert shot", "insert on"],
    "two shot": ["two shot", "two-shot"],
}


async def parse_shots(texts: Iterable[str]) -> List[str]:
    joined = "\n".join(t for t in texts if t)
    found: List[str] = []
    consumed: List[str] = []
    for label, spellings in SHOTS.items():
        for spelling in spellings:
            if not contains_keyword(joined, spelling):
                continue
            # "close-up" inside an already matched "extreme close-up" does not count twice
            if any(spelling in longer and spelling != longer for longer in consumed):
                continue
            found.append(label)
            consumed.append(spelling)
            break
    return found
