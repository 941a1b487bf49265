"""Transition events ("CUT TO:") are in-between events, not shots.

They get a single short segment on a reserved track and nothing else.
"""

from __future__ import annotations

from typing import Optional

from ..parsers.suite import ParserSuite
from ..screenplay.screenplay_models import Event, Scene
from ..timeline.factories import create_segment
from ..timeline.timeline_models import OutputType, Segment, SegmentCategory
from ..utils.config import TimelineConfig


def handle_transition(
    event: Event,
    scene: Scene,
    start_time_in_steps: int,
    parsers: ParserSuite,
    config: TimelineConfig,
) -> Optional[Segment]:
    """Return the transition segment if the event is a transition, else None."""
    transition = parsers.parse_transition(event.description)
    if not transition:
        return None

    return create_segment(
        category=SegmentCategory.TRANSITION,
        output_type=OutputType.TEXT,
        start_time_in_steps=start_time_in_steps,
        duration_in_steps=config.transition_duration_in_steps,
        prompt=[transition],
        track=config.transition_track,
        scene_id=scene.id,
    )
