"""Data models for the parsed screenplay tree consumed by the analysis pass"""

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from enum import Enum


class SequenceType(str, Enum):
    """Structural location type taken from a sequence heading"""
    INTERIOR = "INTERIOR"
    EXTERIOR = "EXTERIOR"
    INTERIOR_EXTERIOR = "INT./EXT."
    UNKNOWN = "UNKNOWN"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().upper()
            aliases = {
                "INT": cls.INTERIOR,
                "INT.": cls.INTERIOR,
                "EXT": cls.EXTERIOR,
                "EXT.": cls.EXTERIOR,
                "INT/EXT": cls.INTERIOR_EXTERIOR,
                "INT./EXT": cls.INTERIOR_EXTERIOR,
                "I/E": cls.INTERIOR_EXTERIOR,
            }
            for member in cls:
                if member.value == key:
                    return member
            return aliases.get(key, cls.UNKNOWN)
        return cls.UNKNOWN


class EventType(str, Enum):
    """Kinds of narrative events; anything unrecognized becomes OTHER"""
    ACTION = "action"
    DESCRIPTION = "description"
    DIALOGUE = "dialogue"
    OTHER = "other"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            key = value.strip().lower()
            for member in cls:
                if member.value == key:
                    return member
        return cls.OTHER

    @property
    def is_descriptive(self) -> bool:
        """Action and description lines feed the sliding window"""
        return self in (EventType.ACTION, EventType.DESCRIPTION)


class _ScreenplayNode(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class Event(_ScreenplayNode):
    """Smallest narrative unit: an action/description line or a dialogue line"""
    type: EventType = EventType.DESCRIPTION
    description: str = ""
    character: str = ""
    behavior: str = ""

    @field_validator("description", "character", "behavior", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value


class Scene(_ScreenplayNode):
    id: str
    events: List[Event] = []

    @field_validator("id", mode="before")
    @classmethod
    def _id_as_string(cls, value):
        return str(value)


class Sequence(_ScreenplayNode):
    """Top-level narrative block sharing one location/time context"""
    full_text: str = Field(default="", alias="fullText")
    location: List[str] = []
    time: str = ""
    type: SequenceType = SequenceType.UNKNOWN
    scenes: List[Scene] = []

    @field_validator("location", mode="before")
    @classmethod
    def _location_as_list(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value] if value.strip() else []
        return value

    @field_validator("time", mode="before")
    @classmethod
    def _time_as_string(cls, value):
        return "" if value is None else value

    @property
    def joined_location(self) -> str:
        return ", ".join(self.location)


class Screenplay(_ScreenplayNode):
    """Complete screenplay tree as produced by the structural parser"""
    full_text: str = Field(default="", alias="fullText")
    sequences: List[Sequence] = []
    title: Optional[str] = None

    @classmethod
    def load_from_file(cls, filepath: str) -> "Screenplay":
        """Load a parsed screenplay from a JSON file"""
        from pathlib import Path

        return cls.model_validate_json(Path(filepath).read_text(encoding='utf-8'))
