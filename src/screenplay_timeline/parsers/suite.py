"""The set of sub-parsers consulted by the analysis pass

Each field is a plain function (or coroutine function) from text to value, so
any of them can be swapped, e.g. for a model-backed parser or a test double.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Iterable, List

from ..screenplay.screenplay_models import SequenceType
from .characters import analyze_name, is_voice_over, parse_character_name, parse_dialogue_line
from .entities import get_entities, only_contains_strange_number
from .eras import get_era, get_most_probable_eras
from .genres import get_genre, get_most_probable_genres
from .lights import parse_lights
from .locations import parse_location_type, parse_locations
from .parser_models import Era, Genre, NameAnalysis
from .shots import parse_shots
from .sounds import parse_sounds
from .transitions import parse_transition
from .weather import parse_weather

TextsParser = Callable[[Iterable[str]], Awaitable[List[str]]]
RankingParser = Callable[[str, int], Awaitable[Dict[str, float]]]


@dataclass
class ParserSuite:
    get_most_probable_eras: RankingParser = get_most_probable_eras
    get_era: Callable[[str], Era] = get_era
    get_most_probable_genres: RankingParser = get_most_probable_genres
    get_genre: Callable[[str], Genre] = get_genre
    parse_transition: Callable[[str], str] = parse_transition
    parse_locations: TextsParser = parse_locations
    parse_location_type: Callable[[Iterable[str]], Awaitable[SequenceType]] = parse_location_type
    parse_lights: TextsParser = parse_lights
    parse_weather: TextsParser = parse_weather
    parse_shots: TextsParser = parse_shots
    parse_sounds: TextsParser = parse_sounds
    get_entities: Callable[..., List[str]] = get_entities
    parse_character_name: Callable[[str], str] = parse_character_name
    analyze_name: Callable[[str], Awaitable[NameAnalysis]] = analyze_name
    parse_dialogue_line: Callable[[str], str] = parse_dialogue_line
    is_voice_over: Callable[[str], bool] = is_voice_over
    only_contains_strange_number: Callable[[str], bool] = only_contains_strange_number
