"""Data models for the screenplay analysis pass"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from ..parsers.parser_models import Era, Genre
from ..screenplay.screenplay_models import Sequence
from ..timeline.timeline_models import Entity, Segment
from .sliding_window import SlidingWindowState


class MovieContext(BaseModel):
    """Era and genre inferred once over the whole screenplay"""
    era_label: str
    era: Era
    genre_label: str
    genre: Genre


@dataclass
class SequenceContext:
    """What every event of a sequence shares"""
    sequence: Sequence
    genre_label: str
    genre: Genre
    movie: MovieContext


@dataclass
class EventSegments:
    """Successful outcome of segmenting one event"""
    segments: List[Segment]
    state: SlidingWindowState
    duration_in_steps: int


class EventError(BaseModel):
    """An event that failed and was skipped"""
    sequence_index: int
    scene_id: Optional[str] = None
    event_index: int
    error_type: str
    message: str


class ScreenplayAnalysisResult(BaseModel):
    """Timeline segments and entity registry produced by one pass"""
    segments: List[Segment] = []
    entities_by_screenplay_label: Dict[str, Entity] = {}
    entities_by_id: Dict[str, Entity] = {}
    failed_events: List[EventError] = []
    skipped_events: int = 0
    movie_era: str = ""
    movie_genre: str = ""
    generated_at: datetime = Field(default_factory=datetime.now)

    def save_to_file(self, filepath: str):
        """Save the complete result to a JSON file"""
        import json
        from pathlib import Path

        output_path = Path(filepath)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(mode="json"), f, indent=2, ensure_ascii=False)
