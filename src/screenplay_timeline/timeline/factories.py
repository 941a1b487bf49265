"""Constructors for timeline segments and entities"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .timeline_models import (
    DEFAULT_COLUMNS_PER_SLICE,
    Entity,
    EntityCategory,
    OutputType,
    Segment,
    SegmentCategory,
)

_DEFAULT_OUTPUT_TYPES = {
    SegmentCategory.VIDEO: OutputType.VIDEO,
    SegmentCategory.STORYBOARD: OutputType.IMAGE,
    SegmentCategory.DIALOGUE: OutputType.AUDIO,
    SegmentCategory.SOUND: OutputType.AUDIO,
    SegmentCategory.MUSIC: OutputType.AUDIO,
}


def clean_prompt(fragments: Iterable[Optional[str]]) -> List[str]:
    """Strip fragments and drop the empty ones, keeping order."""
    return [f.strip() for f in fragments if f and f.strip()]


def create_segment(
    *,
    category: SegmentCategory,
    start_time_in_steps: int,
    prompt: Iterable[Optional[str]] = (),
    duration_in_steps: int = DEFAULT_COLUMNS_PER_SLICE,
    output_type: Optional[OutputType] = None,
    label: str = "",
    entity_id: str = "",
    track: int = 0,
    scene_id: Optional[str] = None,
) -> Segment:
    """Build a segment; the output type defaults from the category."""
    return Segment(
        start_time_in_steps=start_time_in_steps,
        duration_in_steps=duration_in_steps,
        track=track,
        category=category,
        output_type=output_type or _DEFAULT_OUTPUT_TYPES.get(category, OutputType.TEXT),
        prompt=clean_prompt(prompt),
        label=label or "",
        entity_id=entity_id or "",
        scene_id=scene_id,
    )


def new_entity(
    *,
    category: EntityCategory,
    trigger_name: str,
    label: str,
    description: str = "",
    age: Optional[int] = None,
    gender: str = "",
    region: str = "",
) -> Entity:
    return Entity(
        category=category,
        trigger_name=trigger_name,
        label=label,
        description=description,
        age=age,
        gender=gender,
        region=region,
    )
