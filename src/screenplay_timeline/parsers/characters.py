"""Character cue helpers: name normalization, dialogue lines, voice-over, demographics"""

from __future__ import annotations

import re
from typing import Dict

from ..utils.text_normalize import normalize_character_cue, strip_parentheticals, to_straight_quotes
from .parser_models import NameAnalysis

_VOICE_OVER = re.compile(
    r"\(\s*V\.?\s*O\.?\s*\)|\bV\.O\.|\bVOICE[\s-]?OVER\b|'S VOICE\b",
    re.IGNORECASE,
)

FEMALE_NAMES = {
    "ALICE", "ANNA", "ANNE", "BETH", "CLAIRE", "DIANA", "ELLA", "EMILY", "EMMA", "GRACE",
    "HANNAH", "HELEN", "JANE", "JENNY", "JESSICA", "JULIA", "KATE", "LAURA", "LINDA", "LISA",
    "LUCY", "MARIA", "MARY", "NANCY", "OLIVIA", "RACHEL", "ROSE", "SARAH", "SOPHIE", "SUSAN",
}

MALE_NAMES = {
    "ADAM", "ALEX", "BEN", "BILL", "BOB", "CHARLES", "DAVID", "FRANK", "GEORGE", "HARRY",
    "HENRY", "JACK", "JAMES", "JOE", "JOHN", "MARK", "MICHAEL", "NICK", "PAUL", "PETER",
    "RICHARD", "ROBERT", "SAM", "STEVE", "TOM", "WILLIAM",
}

# Titles and roles that reveal gender, age, or both
_TITLE_HINTS: Dict[str, Dict[str, object]] = {
    "MR": {"gender": "male"},
    "MRS": {"gender": "female"},
    "MS": {"gender": "female"},
    "MISS": {"gender": "female"},
    "SIR": {"gender": "male"},
    "LADY": {"gender": "female"},
    "MAN": {"gender": "male"},
    "WOMAN": {"gender": "female"},
    "BOY": {"gender": "male", "age": 10},
    "GIRL": {"gender": "female", "age": 10},
    "KID": {"age": 10},
    "CHILD": {"age": 8},
    "BABY": {"age": 1},
    "TEEN": {"age": 16},
    "TEENAGER": {"age": 16},
    "YOUNG": {"age": 20},
    "OLD": {"age": 70},
    "ELDERLY": {"age": 75},
    "GRANDMA": {"gender": "female", "age": 75},
    "GRANDPA": {"gender": "male", "age": 75},
    "MOTHER": {"gender": "female", "age": 45},
    "FATHER": {"gender": "male", "age": 45},
}

DEFAULT_AGE = 30
DEFAULT_GENDER = "person"


def parse_character_name(raw: str) -> str:
    """Normalize a raw uppercase cue ("JOHN'S VOICE") to its trigger name ("JOHN")."""
    return normalize_character_cue(raw)


def parse_dialogue_line(text: str) -> str:
    """Spoken words of a dialogue event, without parentheticals."""
    return strip_parentheticals(to_straight_quotes(text or "")).strip()


def is_voice_over(text: str) -> bool:
    return bool(text) and _VOICE_OVER.search(to_straight_quotes(text)) is not None


def _display_name(trigger_name: str) -> str:
    # JOHN -> John, MARY-JANE -> Mary-Jane, O'NEIL -> O'Neil
    words = []
    for word in trigger_name.lower().split():
        parts = re.split(r"([-'])", word)
        words.append("".join(p.capitalize() if p not in ("-", "'") else p for p in parts))
    return " ".join(words)


async def analyze_name(trigger_name: str) -> NameAnalysis:
    """Guess display name, age and gender from a character trigger name"""
    tokens = [t.strip(".") for t in trigger_name.upper().split()]

    gender = DEFAULT_GENDER
    age = None
    for token in tokens:
        hint = _TITLE_HINTS.get(token, {})
        if "gender" in hint and gender == DEFAULT_GENDER:
            gender = hint["gender"]
        if "age" in hint and age is None:
            age = hint["age"]
        if gender == DEFAULT_GENDER:
            if token in FEMALE_NAMES:
                gender = "female"
            elif token in MALE_NAMES:
                gender = "male"

    return NameAnalysis(
        name=_display_name(trigger_name),
        age=age if age is not None else DEFAULT_AGE,
        gender=gender,
        region="",
    )
