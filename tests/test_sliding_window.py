import pytest
from dataclasses import FrozenInstanceError

from screenplay_timeline.analysis.sliding_window import (
    SlidingWindowState,
    resolve_location_type,
    resolve_time,
)
from screenplay_timeline.screenplay import Event, EventType, Sequence, SequenceType


def _filled_state() -> SlidingWindowState:
    return SlidingWindowState(
        description="A storm rages over the sea.",
        action="A storm rages over the sea.",
        location_name="BEACH",
        location_type=SequenceType.EXTERIOR,
        time="night",
        lighting="moonlight",
        weather="storm",
        shot_type="long shot",
        sound="thunder",
        music="soft piano",
    )


def test_new_location_resets_every_buffer():
    state = _filled_state()
    sequence = Sequence(location=["OFFICE"], type=SequenceType.INTERIOR)

    next_state = state.enter_event(Event(type="action", description="Papers cover the desk."), sequence)

    assert next_state == SlidingWindowState(
        description="Papers cover the desk.",
        action="Papers cover the desk.",
    )


def test_empty_location_keeps_the_window():
    state = _filled_state()
    sequence = Sequence(location=[])

    next_state = state.enter_event(Event(type="dialogue", description="Where were you?"), sequence)

    # Dialogue does not replace the description and has no action
    assert next_state.description == "A storm rages over the sea."
    assert next_state.action == ""
    assert next_state.weather == "storm"
    assert next_state.music == "soft piano"


def test_description_events_feed_the_window():
    sequence = Sequence(location=[])
    state = SlidingWindowState().enter_event(
        Event(type=EventType.DESCRIPTION, description="Fog rolls in."), sequence
    )
    assert state.description == "Fog rolls in."
    assert state.action == "Fog rolls in."

    # An empty action keeps the previous description but clears the action
    state = state.enter_event(Event(type="action", description=""), sequence)
    assert state.description == "Fog rolls in."
    assert state.action == ""


def test_overlay_only_overwrites_with_signal():
    state = _filled_state().overlay(weather="", lighting="neon lights")
    assert state.weather == "storm"
    assert state.lighting == "neon lights"


def test_state_is_immutable():
    with pytest.raises(FrozenInstanceError):
        SlidingWindowState().weather = "rain"


@pytest.mark.parametrize("sequence_type,parsed,previous,expected", [
    (SequenceType.INTERIOR, SequenceType.EXTERIOR, SequenceType.UNKNOWN, SequenceType.INTERIOR),
    (SequenceType.UNKNOWN, SequenceType.EXTERIOR, SequenceType.INTERIOR, SequenceType.EXTERIOR),
    (SequenceType.UNKNOWN, SequenceType.UNKNOWN, SequenceType.INTERIOR, SequenceType.INTERIOR),
    (SequenceType.UNKNOWN, SequenceType.UNKNOWN, SequenceType.UNKNOWN, SequenceType.UNKNOWN),
])
def test_resolve_location_type(sequence_type, parsed, previous, expected):
    assert resolve_location_type(sequence_type, parsed, previous) == expected


def test_resolve_time():
    assert resolve_time("NIGHT", "") == "night"
    assert resolve_time("", "day") == "day"
    assert resolve_time("UNKNOWN", "day") == ""
    assert resolve_time("", "") == ""
