"""Scene transition detection ("CUT TO:", "FADE OUT." ...)"""

from __future__ import annotations

import re

# Canonical label -> accepted spellings (uppercase, punctuation stripped)
TRANSITIONS = {
    "fade in": ["FADE IN", "FADE IN FROM BLACK", "FADE UP"],
    "fade out": ["FADE OUT", "FADE TO BLACK", "FADE TO WHITE", "FADE OUT TO BLACK"],
    "fade to": ["FADE TO"],
    "cut to": ["CUT TO", "CUT"],
    "smash cut": ["SMASH CUT", "SMASH CUT TO"],
    "match cut": ["MATCH CUT", "MATCH CUT TO"],
    "jump cut": ["JUMP CUT", "JUMP CUT TO"],
    "cut to black": ["CUT TO BLACK"],
    "dissolve to": ["DISSOLVE TO", "DISSOLVE", "LAP DISSOLVE", "CROSS DISSOLVE"],
    "wipe to": ["WIPE TO", "WIPE"],
    "iris out": ["IRIS OUT", "IRIS IN"],
    "time cut": ["TIME CUT"],
    "back to scene": ["BACK TO SCENE", "BACK TO"],
}

_LOOKUP = {spelling: label for label, spellings in TRANSITIONS.items() for spelling in spellings}
_TRAILING = re.compile(r"[\s:.!\-]+$")
_SPACES = re.compile(r"\s+")


def parse_transition(text: str) -> str:
    """Return the transition label when the whole line is a transition, else ""."""
    if not text:
        return ""
    key = _SPACES.sub(" ", _TRAILING.sub("", text.strip().upper()))
    return _LOOKUP.get(key, "")
