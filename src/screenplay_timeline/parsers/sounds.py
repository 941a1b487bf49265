from __future__ import annotations

from typing import Iterable, List

from .keyword_matching import find_labels

SOUNDS = {
    "gunshot": ["gunshot", "gunshots", "gunfire", "shots ring out"],
    "explosion": ["explosion", "explodes", "blast", "boom"],
    "thunder": ["thunder", "thunderclap"],
    "rain": ["rain pours", "raindrops", "pouring rain", "downpour"],
    "footsteps": ["footsteps", "footstep"],
    "knocking": ["knock", "knocks", "knocking"],
    "phone ringing": ["phone rings", "ringing phone", "ringtone"],
    "siren": ["siren", "sirens"],
    "door creaking": ["creak", "creaks", "creaking"],
    "door slam": ["slams the door", "door slams", "slam"],
    "glass shattering": ["shatters", "shattering", "smashes"],
    "scream": ["scream", "screams", "screaming"],
    "dog barking": ["bark", "barks", "barking"],
    "engine": ["engine", "engines", "revs"],
    "crowd": ["crowd", "cheering", "applause"],
    "heartbeat": ["heartbeat"],
    "ticking clock": ["ticking", "clock ticks"],
}


async def parse_sounds(texts: Iterable[str]) -> List[str]:
    return find_labels(texts, SOUNDS)
