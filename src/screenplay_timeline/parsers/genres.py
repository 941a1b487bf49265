"""Genre detection

Scores genres against genre-typical vocabulary. The full movie text mentions
thousands of words, so the per-sequence ranking is the more useful one; the
movie-wide ranking only serves as a fallback.
"""

from __future__ import annotations

from typing import Dict

from .keyword_matching import rank_labels
from .parser_models import CategoryPrompts, Genre

DEFAULT_GENRE = "classic"

GENRES: Dict[str, Genre] = {
    "classic": Genre(
        label="classic",
        keywords=[],
        prompts=CategoryPrompts(
            style=["cinematic"],
            camera=["35mm"],
        ),
    ),
    "action": Genre(
        label="action",
        keywords=["explosion", "explodes", "gun", "guns", "chase", "fight", "punch", "shoots", "bullet", "bullets", "crash"],
        prompts=CategoryPrompts(
            style=["action movie", "dynamic"],
            camera=["dynamic angle", "motion blur"],
            lighting=["high contrast"],
            weather=["dust in the air"],
            sound=["impacts"],
            music=["intense percussion"],
        ),
    ),
    "horror": Genre(
        label="horror",
        keywords=["blood", "scream", "screams", "ghost", "monster", "corpse", "dark", "shadows", "terror", "creepy"],
        prompts=CategoryPrompts(
            style=["horror movie", "eerie"],
            camera=["dutch angle"],
            lighting=["low key lighting", "deep shadows"],
            weather=["mist"],
            sound=["creaking"],
            music=["dissonant strings"],
        ),
    ),
    "comedy": Genre(
        label="comedy",
        keywords=["laughs", "laugh", "joke", "jokes", "funny", "giggles", "silly", "awkward"],
        prompts=CategoryPrompts(
            style=["comedy", "colorful"],
            camera=["eye level"],
            lighting=["bright even lighting"],
            music=["playful tune"],
        ),
    ),
    "romance": Genre(
        label="romance",
        keywords=["kiss", "kisses", "love", "embrace", "wedding", "romantic", "heart"],
        prompts=CategoryPrompts(
            style=["romantic", "soft focus"],
            camera=["shallow depth of field"],
            lighting=["warm golden light"],
            music=["romantic strings"],
        ),
    ),
    "science fiction": Genre(
        label="science fiction",
        keywords=["spaceship", "alien", "aliens", "planet", "robot", "laser", "galaxy", "orbit", "hologram"],
        prompts=CategoryPrompts(
            style=["science fiction", "futuristic design"],
            camera=["anamorphic lens"],
            lighting=["cold blue lighting"],
            sound=["electronic hum"],
            music=["synthesizer score"],
        ),
    ),
    "western": Genre(
        label="western",
        keywords=["cowboy", "sheriff", "saloon", "horse", "ranch", "revolver", "desert", "outlaw"],
        prompts=CategoryPrompts(
            style=["western movie", "dusty"],
            camera=["wide anamorphic"],
            lighting=["harsh sunlight"],
            weather=["dry heat"],
            sound=["spurs jingling"],
            music=["harmonica"],
        ),
    ),
    "noir": Genre(
        label="noir",
        keywords=["detective", "cigarette", "fedora", "alley", "murder", "dame", "precinct"],
        prompts=CategoryPrompts(
            style=["film noir", "black and white"],
            camera=["low angle"],
            lighting=["venetian blind shadows", "chiaroscuro"],
            weather=["wet streets"],
            music=["smoky jazz"],
        ),
    ),
    "drama": Genre(
        label="drama",
        keywords=["tears", "cries", "hospital", "funeral", "argue", "argument", "silence", "family"],
        prompts=CategoryPrompts(
            style=["drama", "naturalistic"],
            camera=["handheld camera"],
            lighting=["natural light"],
            music=["melancholic piano"],
        ),
    ),
    "thriller": Genre(
        label="thriller",
        keywords=["gunshot", "hostage", "bomb", "spy", "conspiracy", "suspect", "hides", "warehouse"],
        prompts=CategoryPrompts(
            style=["thriller", "tense"],
            camera=["slow push in"],
            lighting=["moody lighting"],
            music=["suspenseful score"],
        ),
    ),
    "fantasy": Genre(
        label="fantasy",
        keywords=["wizard", "magic", "spell", "elf", "elves", "dragon", "enchanted", "sorcerer"],
        prompts=CategoryPrompts(
            style=["fantasy", "magical"],
            camera=["sweeping crane shot"],
            lighting=["ethereal glow"],
            weather=["floating particles"],
            music=["orchestral choir"],
        ),
    ),
}


def get_genre(label: str) -> Genre:
    """Return the genre record for a label, falling back to the default genre"""
    return GENRES.get((label or "").lower(), GENRES[DEFAULT_GENRE])


async def get_most_probable_genres(text: str, limit: int = 2) -> Dict[str, float]:
    """Most probable genres for a text, best first (may be empty)"""
    return rank_labels(text, {label: genre.keywords for label, genre in GENRES.items()}, limit)
