"""Sliding-window state

Once a location, a light or a mood is established in an action line, it keeps
applying to the following terse events until the context changes. The state
is immutable: every event step takes a state and returns the next one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from ..screenplay.screenplay_models import Event, Sequence, SequenceType


@dataclass(frozen=True)
class SlidingWindowState:
    description: str = ""  # last non-empty action/description, long lived
    action: str = ""  # current event only
    location_name: str = ""
    location_type: SequenceType = SequenceType.UNKNOWN
    time: str = ""
    lighting: str = ""
    weather: str = ""
    shot_type: str = ""
    sound: str = ""
    music: str = ""

    def enter_event(self, event: Event, sequence: Sequence) -> "SlidingWindowState":
        """Apply the reset policy, then take the event's description and action."""
        # A sequence naming its location starts from a blank window
        state = SlidingWindowState() if sequence.joined_location else self

        text = event.description if event.type.is_descriptive else ""
        return replace(state, description=text or state.description, action=text)

    def overlay(self, **values: str) -> "SlidingWindowState":
        """Overwrite only with non-empty values; empty ones keep the previous value."""
        return replace(self, **{k: v for k, v in values.items() if v})


def resolve_location_type(
    sequence_type: SequenceType,
    parsed_type: SequenceType,
    previous: SequenceType,
) -> SequenceType:
    if sequence_type != SequenceType.UNKNOWN:
        return sequence_type
    if parsed_type != SequenceType.UNKNOWN:
        return parsed_type
    return previous


def resolve_time(sequence_time: str, previous: str) -> str:
    time = (sequence_time or previous).lower()
    return "" if time == "unknown" else time
