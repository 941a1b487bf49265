import asyncio

import pytest

from screenplay_timeline.parsers.characters import (
    analyze_name,
    is_voice_over,
    parse_character_name,
    parse_dialogue_line,
)
from screenplay_timeline.parsers.entities import get_entities, only_contains_strange_number
from screenplay_timeline.parsers.eras import get_era, get_most_probable_eras
from screenplay_timeline.parsers.genres import get_genre, get_most_probable_genres
from screenplay_timeline.parsers.lights import parse_lights
from screenplay_timeline.parsers.locations import parse_location_type, parse_locations
from screenplay_timeline.parsers.shots import parse_shots
from screenplay_timeline.parsers.sounds import parse_sounds
from screenplay_timeline.parsers.transitions import parse_transition
from screenplay_timeline.parsers.weather import parse_weather
from screenplay_timeline.screenplay import SequenceType


@pytest.mark.parametrize("text,expected", [
    ("CUT TO:", "cut to"),
    ("  fade out.  ", "fade out"),
    ("DISSOLVE TO:", "dissolve to"),
    ("SMASH CUT TO:", "smash cut"),
    ("John cuts to the chase.", ""),
    ("", ""),
])
def test_parse_transition(text, expected):
    assert parse_transition(text) == expected


@pytest.mark.parametrize("raw,expected", [
    ("JOHN", "JOHN"),
    ("JOHN'S VOICE", "JOHN"),
    ("JOHN’S VOICE", "JOHN"),
    ("JOHN (V.O.)", "JOHN"),
    ("MARY (CONT'D)", "MARY"),
    ("DETECTIVE O.S.", "DETECTIVE"),
    ("O'NEIL", "O'NEIL"),
])
def test_parse_character_name(raw, expected):
    assert parse_character_name(raw) == expected


def test_voice_over_detection():
    assert is_voice_over("(V.O.) I should never have come back.")
    assert is_voice_over("JOHN'S VOICE echoes in the hall")
    assert is_voice_over("A voice-over explains the rules.")
    assert not is_voice_over("John opens the door.")
    assert not is_voice_over("")


def test_parse_dialogue_line_strips_parentheticals():
    assert parse_dialogue_line("(V.O.) I should never have come back.") == "I should never have come back."
    assert parse_dialogue_line("(beat)   Fine.") == "Fine."
    assert parse_dialogue_line("(whispering)") == ""


def test_get_entities_splits_and_uppercases():
    assert get_entities("John and Mary") == ["JOHN", "MARY"]
    assert get_entities(["WAREHOUSE", "warehouse", "DOCKS / PIER"]) == ["WAREHOUSE", "DOCKS", "PIER"]
    assert get_entities("JOHN (V.O.)") == ["JOHN"]
    assert get_entities("") == []
    assert get_entities(None) == []


def test_location_fields_keep_and_inside_names():
    assert get_entities(["ROCK AND ROLL BAR"], split_on_and=False) == ["ROCK AND ROLL BAR"]
    assert get_entities(["DOCKS / PIER"], split_on_and=False) == ["DOCKS", "PIER"]
    assert get_entities("ROCK AND ROLL BAR") == ["ROCK", "ROLL BAR"]


@pytest.mark.parametrize("text,expected", [
    ("12.", True),
    ("(34)", True),
    ("56A", True),
    ("12 angry men walk in.", False),
    ("", False),
])
def test_only_contains_strange_number(text, expected):
    assert only_contains_strange_number(text) is expected


def test_analyze_name():
    john = asyncio.run(analyze_name("JOHN"))
    assert john.name == "John"
    assert john.gender == "male"

    old_lady = asyncio.run(analyze_name("OLD LADY"))
    assert old_lady.name == "Old Lady"
    assert old_lady.gender == "female"
    assert old_lady.age == 70

    stranger = asyncio.run(analyze_name("STRANGER"))
    assert stranger.gender == "person"


def test_era_ranking_and_fallback():
    text = "The knights ride to the castle. A knight draws his sword before the king."
    eras = asyncio.run(get_most_probable_eras(text, 2))
    assert list(eras)[0] == "medieval"
    assert len(eras) <= 2

    assert asyncio.run(get_most_probable_eras("", 2)) == {}
    assert get_era("no such era").label == "contemporary"
    assert get_era("MEDIEVAL").label == "medieval"


def test_genre_ranking_and_fallback():
    text = "The cowboy walks into the saloon. The sheriff draws his revolver."
    genres = asyncio.run(get_most_probable_genres(text, 20))
    assert list(genres)[0] == "western"
    assert get_genre("").label == "classic"
    assert "cinematic" in get_genre("classic").prompts.style


def test_location_parsers():
    texts = ["JOHN enters the dark warehouse at night. Rain pours outside."]
    assert asyncio.run(parse_locations(texts)) == ["warehouse"]
    assert asyncio.run(parse_location_type(texts)) == SequenceType.INTERIOR_EXTERIOR
    assert asyncio.run(parse_location_type(["They run down the street."])) == SequenceType.EXTERIOR
    assert asyncio.run(parse_location_type(["He waits."])) == SequenceType.UNKNOWN


def test_attribute_parsers():
    texts = ["JOHN enters the dark warehouse at night. Rain pours outside."]
    assert asyncio.run(parse_lights(texts)) == ["dark", "night"]
    assert asyncio.run(parse_weather(texts)) == ["rain"]
    assert asyncio.run(parse_sounds(texts)) == ["rain"]
    assert asyncio.run(parse_shots(texts)) == []


def test_parse_shots_prefers_longest_spelling():
    assert asyncio.run(parse_shots(["EXTREME CLOSE-UP on the ring."])) == ["extreme close-up"]
    assert asyncio.run(parse_shots(["CLOSE ON Mary's hands."])) == ["close-up"]
    assert asyncio.run(parse_shots(["Ms. Smith arrives."])) == []
