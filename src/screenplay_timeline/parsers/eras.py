"""Era detection

Guesses the time period of a screenplay from period-specific vocabulary and
exposes the prompt fragments attached to each era.
"""

from __future__ import annotations

from typing import Dict

from .keyword_matching import rank_labels
from .parser_models import CategoryPrompts, Era

DEFAULT_ERA = "contemporary"

ERAS: Dict[str, Era] = {
    "prehistoric": Era(
        label="prehistoric",
        keywords=["caveman", "cavemen", "mammoth", "dinosaur", "dinosaurs", "tribe", "spear", "cave"],
        prompts=CategoryPrompts(
            style=["prehistoric times", "primitive clothing"],
            lighting=["firelight"],
            sound=["primitive drums"],
            music=["tribal percussion"],
            era=["prehistoric era"],
        ),
    ),
    "ancient": Era(
        label="ancient",
        keywords=["pharaoh", "legion", "centurion", "gladiator", "chariot", "temple", "senate", "toga", "emperor"],
        prompts=CategoryPrompts(
            style=["antiquity", "ancient world"],
            camera=["epic scale"],
            lighting=["torchlight"],
            music=["ancient lyre"],
            era=["ancient times"],
        ),
    ),
    "medieval": Era(
        label="medieval",
        keywords=["knight", "knights", "castle", "sword", "king", "queen", "peasant", "monastery", "dragon", "tavern"],
        prompts=CategoryPrompts(
            style=["medieval", "middle ages"],
            lighting=["candlelight"],
            sound=["horses", "clanking armor"],
            music=["medieval lute"],
            era=["middle ages"],
        ),
    ),
    "victorian": Era(
        label="victorian",
        keywords=["carriage", "corset", "gaslight", "top hat", "parlour", "parlor", "telegram", "steam engine"],
        prompts=CategoryPrompts(
            style=["19th century", "victorian"],
            lighting=["gas lamps"],
            sound=["horse-drawn carriages"],
            music=["chamber music"],
            era=["victorian era"],
        ),
    ),
    "1920s": Era(
        label="1920s",
        keywords=["speakeasy", "prohibition", "flapper", "bootlegger", "gramophone", "model t"],
        prompts=CategoryPrompts(
            style=["1920s", "art deco"],
            camera=["vintage film grain"],
            music=["jazz age"],
            era=["roaring twenties"],
        ),
    ),
    "1950s": Era(
        label="1950s",
        keywords=["diner", "jukebox", "drive-in", "sock hop", "cold war", "greaser"],
        prompts=CategoryPrompts(
            style=["1950s", "technicolor"],
            camera=["vintage film grain"],
            music=["rock and roll"],
            era=["fifties"],
        ),
    ),
    "1980s": Era(
        label="1980s",
        keywords=["walkman", "arcade", "vhs", "cassette", "boombox", "pager", "mixtape"],
        prompts=CategoryPrompts(
            style=["1980s", "retro"],
            camera=["35mm film"],
            lighting=["neon lights"],
            music=["synthwave"],
            era=["eighties"],
        ),
    ),
    "contemporary": Era(
        label="contemporary",
        keywords=["smartphone", "phone", "laptop", "internet", "email", "text message", "selfie", "computer", "car"],
        prompts=CategoryPrompts(
            style=["contemporary"],
            camera=["digital cinema camera"],
            era=["present day"],
        ),
    ),
    "futuristic": Era(
        label="futuristic",
        keywords=["spaceship", "starship", "android", "robot", "robots", "hologram", "laser", "cyborg", "colony"],
        prompts=CategoryPrompts(
            style=["futuristic", "science fiction"],
            lighting=["holographic glow"],
            sound=["humming machinery"],
            music=["electronic score"],
            era=["distant future"],
        ),
    ),
}


def get_era(label: str) -> Era:
    """Return the era record for a label, falling back to the default era"""
    return ERAS.get((label or "").lower(), ERAS[DEFAULT_ERA])


async def get_most_probable_eras(text: str, limit: int = 2) -> Dict[str, float]:
    """Most probable eras for a text, best first (may be empty)"""
    return rank_labels(text, {label: era.keywords for label, era in ERAS.items()}, limit)
