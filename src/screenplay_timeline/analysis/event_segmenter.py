"""Event Segmenter

Fans out one narrative event into category-specific segment candidates
(camera, lighting, location, dialogue, sound, music...), drops the empty ones
and numbers the survivors as tracks 1, 2, 3... at the current timeline step.

The action/description text is the interesting part: weather, sounds, lights
and shots are all read from it. Dialogue only feeds the dialogue segment.
"""

from __future__ import annotations

from dataclasses import replace
from typing import List, Optional

from ..parsers.mocks import MOCK_MUSIC_PROMPTS
from ..parsers.suite import ParserSuite
from ..screenplay.screenplay_models import Event, EventType, Scene, SequenceType
from ..timeline.factories import create_segment
from ..timeline.timeline_models import Entity, OutputType, Segment, SegmentCategory
from ..utils.config import TimelineConfig
from ..utils.logger import LoggerMixin
from ..utils.seed import Picker
from .analysis_models import EventSegments, SequenceContext
from .entity_registry import EntityRegistry
from .sliding_window import SlidingWindowState, resolve_location_type, resolve_time

# "Inside" rather than "Indoor": it also suits cars, buses, submarines...
LOCATION_TYPE_PROMPTS = {
    SequenceType.INTERIOR: "Inside",
    SequenceType.EXTERIOR: "Outdoor",
    SequenceType.INTERIOR_EXTERIOR: "Indoor and outdoor",
}

# With a character we assume a close range shot
SHOTS_FOR_CHARACTERS = ["medium shot", "medium close-up", "close-up", "American shot"]
EXTERIOR_CHARACTER_SHOT = "medium-long shot"

INTERIOR_SHOTS = ["medium-long shot", "medium shot", "full shot"]
ESTABLISHING_SHOTS = [
    "long wide establishing shot",
    "extreme long shot",
    "long shot",
    "medium-long shot",
    "medium shot",
    "full shot",
]


def default_shot_pool(sequence_type: SequenceType, has_character: bool) -> List[str]:
    if has_character:
        if sequence_type == SequenceType.EXTERIOR:
            return [EXTERIOR_CHARACTER_SHOT] + SHOTS_FOR_CHARACTERS
        return list(SHOTS_FOR_CHARACTERS)
    if sequence_type == SequenceType.INTERIOR:
        return list(INTERIOR_SHOTS)
    return list(ESTABLISHING_SHOTS)


def default_sound_prompt(event_type: EventType, location_type: SequenceType, time: str) -> List[str]:
    if event_type == EventType.DIALOGUE:
        return ["people talking"]
    if location_type == SequenceType.EXTERIOR and time != "night":
        return ["wind", "birds"]
    if location_type == SequenceType.EXTERIOR:
        return ["crickets and cicadas sounds during night"]
    return []


class EventSegmenter(LoggerMixin):

    def __init__(
        self,
        parsers: ParserSuite,
        registry: EntityRegistry,
        picker: Picker,
        config: Optional[TimelineConfig] = None,
    ):
        self.parsers = parsers
        self.registry = registry
        self.picker = picker
        self.config = config or TimelineConfig()

    async def segment(
        self,
        event: Event,
        scene: Scene,
        context: SequenceContext,
        state: SlidingWindowState,
        start_time_in_steps: int,
    ) -> EventSegments:
        """Segments for one non-transition event, and the next window state"""
        p = self.parsers
        sequence = context.sequence
        genre = context.genre.prompts
        era = context.movie.era.prompts
        at = start_time_in_steps

        state = state.enter_event(event, sequence)
        description = [state.description]

        # The preview segments must come first: the thumbnail is made from them
        candidates: List[Segment] = [
            create_segment(
                category=SegmentCategory.VIDEO,
                output_type=OutputType.VIDEO,
                start_time_in_steps=at,
                prompt=["movie"],
            ),
            create_segment(
                category=SegmentCategory.STORYBOARD,
                output_type=OutputType.IMAGE,
                start_time_in_steps=at,
                prompt=["movie still"],
            ),
            create_segment(
                category=SegmentCategory.STYLE,
                start_time_in_steps=at,
                prompt=[*genre.style, "cinematic photo", "movie screencap", *era.style],
            ),
        ]

        # The parsed location is less reliable than the sequence location
        parsed_location = ", ".join(await p.parse_locations(description))
        state = state.overlay(location_name=sequence.joined_location or parsed_location)
        if state.location_name:
            candidates.append(create_segment(
                category=SegmentCategory.LOCATION,
                start_time_in_steps=at,
                prompt=[state.location_name],
            ))

        parsed_location_type = await p.parse_location_type(description)
        state = replace(state, location_type=resolve_location_type(
            sequence.type, parsed_location_type, state.location_type
        ))
        location_type_prompt = LOCATION_TYPE_PROMPTS.get(state.location_type, "")
        if location_type_prompt:
            candidates.append(create_segment(
                category=SegmentCategory.LOCATION,
                start_time_in_steps=at,
                prompt=[location_type_prompt],
            ))

        parsed_lighting = ", ".join(await p.parse_lights(description))
        state = replace(state, time=resolve_time(sequence.time, state.time)).overlay(lighting=parsed_lighting)
        if state.time or state.lighting:
            candidates.append(create_segment(
                category=SegmentCategory.LIGHTING,
                start_time_in_steps=at,
                prompt=[state.time, state.lighting, *genre.lighting, *era.lighting],
            ))

        parsed_weather = ", ".join(await p.parse_weather(description))
        state = state.overlay(weather=parsed_weather)
        if state.weather:
            candidates.append(create_segment(
                category=SegmentCategory.WEATHER,
                start_time_in_steps=at,
                prompt=[state.weather, *genre.weather],
            ))

        # Drawn for every event so the picker sequence does not depend on parse results
        default_shot_type = self.picker.pick(default_shot_pool(sequence.type, bool(event.character)))
        parsed_shot_type = ", ".join(await p.parse_shots(description))
        if not (parsed_shot_type or state.shot_type):
            self.logger.debug(f"Scene {scene.id}: no shot type found, using default '{default_shot_type}'")
        state = replace(state, shot_type=parsed_shot_type or state.shot_type or default_shot_type)
        if state.shot_type:
            candidates.append(create_segment(
                category=SegmentCategory.CAMERA,
                start_time_in_steps=at,
                prompt=[state.shot_type, *genre.camera, *era.camera],
            ))

        entities = await self._resolve_characters(event, context)
        primary = entities[0] if entities else None
        primary_id = primary.id if primary else ""

        # Characters can act while they talk
        if event.behavior:
            speaker = primary.label if primary else event.character
            candidates.append(create_segment(
                category=SegmentCategory.ACTION,
                start_time_in_steps=at,
                prompt=[event.behavior],
                label=f"{speaker}: {event.behavior}" if speaker else "",
                entity_id=primary_id,
            ))

        dialogue_line = p.parse_dialogue_line(event.description)
        if event.type == EventType.DIALOGUE and dialogue_line:
            candidates.append(create_segment(
                category=SegmentCategory.DIALOGUE,
                start_time_in_steps=at,
                prompt=[dialogue_line],
                label=f"{primary.label}: {dialogue_line}" if primary and primary.label else "",
                entity_id=primary_id,
            ))

        # Voice-over lines are not visible action
        if state.action and not p.is_voice_over(state.action):
            speaker = (primary.label if primary else "") or event.character
            candidates.append(create_segment(
                category=SegmentCategory.ACTION,
                start_time_in_steps=at,
                prompt=[state.action],
                label=f"{speaker}: {state.action}" if event.character else "",
                entity_id=primary_id if event.character else "",
            ))

        # Kept for older consumers of the ERA category
        candidates.append(create_segment(
            category=SegmentCategory.ERA,
            start_time_in_steps=at,
            prompt=[*era.era],
        ))

        default_sound = ", ".join(default_sound_prompt(event.type, state.location_type, state.time))
        parsed_sound = ", ".join(await p.parse_sounds(description))
        if not (parsed_sound or state.sound) and default_sound:
            self.logger.debug(f"Scene {scene.id}: no sound found, using default '{default_sound}'")
        state = replace(state, sound=parsed_sound or state.sound or default_sound)
        if state.sound:
            candidates.append(create_segment(
                category=SegmentCategory.SOUND,
                start_time_in_steps=at,
                prompt=[state.sound, *genre.sound, *era.sound],
                entity_id=primary_id,
            ))

        state = replace(state, music=state.music or self.picker.pick(MOCK_MUSIC_PROMPTS))
        if state.music:
            candidates.append(create_segment(
                category=SegmentCategory.MUSIC,
                start_time_in_steps=at,
                prompt=[state.music, *genre.music, *era.music],
            ))

        segments = [c for c in candidates if c.prompt]
        for track, segment in enumerate(segments, start=1):
            segment.track = track
            segment.duration_in_steps = self.config.columns_per_slice
            segment.scene_id = scene.id

        return EventSegments(
            segments=segments,
            state=state,
            duration_in_steps=self.config.columns_per_slice,
        )

    async def _resolve_characters(self, event: Event, context: SequenceContext) -> List[Entity]:
        entities: List[Entity] = []
        for raw_reference in self.parsers.get_entities(event.character):
            # The raw reference might be "JOHN'S VOICE"
            trigger_name = self.parsers.parse_character_name(raw_reference)
            if not trigger_name:
                continue
            entity = await self.registry.register_character(trigger_name, context.sequence)
            if all(e is not entity for e in entities):
                entities.append(entity)
        return entities
