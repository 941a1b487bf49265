"""
Timeline Data Models

Pydantic models for the timeline document produced by the screenplay analysis.
"""

from typing import List, Optional
from pydantic import BaseModel, Field
from enum import Enum
import uuid

from ..screenplay.screenplay_models import Sequence

# Default length of an event slice on the timeline, in steps
DEFAULT_COLUMNS_PER_SLICE = 4


class SegmentCategory(str, Enum):
    """Categories of timeline segments"""
    VIDEO = "VIDEO"
    STORYBOARD = "STORYBOARD"
    STYLE = "STYLE"
    LOCATION = "LOCATION"
    LIGHTING = "LIGHTING"
    WEATHER = "WEATHER"
    CAMERA = "CAMERA"
    ACTION = "ACTION"
    DIALOGUE = "DIALOGUE"
    ERA = "ERA"
    SOUND = "SOUND"
    MUSIC = "MUSIC"
    TRANSITION = "TRANSITION"
    CHARACTER = "CHARACTER"


class OutputType(str, Enum):
    """What a downstream generator should produce for a segment"""
    TEXT = "TEXT"
    IMAGE = "IMAGE"
    VIDEO = "VIDEO"
    AUDIO = "AUDIO"
    ANIMATION = "ANIMATION"


class EntityCategory(str, Enum):
    CHARACTER = "CHARACTER"
    LOCATION = "LOCATION"


def new_id() -> str:
    return str(uuid.uuid4())


class Segment(BaseModel):
    """A timed directive on the output timeline"""
    id: str = Field(default_factory=new_id)
    start_time_in_steps: int = 0
    duration_in_steps: int = DEFAULT_COLUMNS_PER_SLICE
    track: int = 0
    category: SegmentCategory
    output_type: OutputType = OutputType.TEXT
    prompt: List[str] = []
    label: str = ""
    entity_id: str = ""

    # Segments bridging scenes may have no scene
    scene_id: Optional[str] = None

    @property
    def end_time_in_steps(self) -> int:
        return self.start_time_in_steps + self.duration_in_steps


class Entity(BaseModel):
    """A deduplicated character or location referenced by the screenplay"""
    id: str = Field(default_factory=new_id)
    category: EntityCategory
    trigger_name: str
    label: str
    description: str = ""
    age: Optional[int] = None
    gender: str = ""
    region: str = ""


class TemporaryAssetData(BaseModel):
    """Per trigger-name bookkeeping collected while walking the screenplay"""
    id: str = Field(default_factory=new_id)
    type: str = "Description"
    category: EntityCategory
    label: str
    content: str
    occurrences: int = 0
    # Full sequences are kept so a describer can aggregate their text later
    sequences: List[Sequence] = []
    predicted_prompt: str = ""
