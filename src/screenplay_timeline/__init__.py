"""
Screenplay Timeline

Turns a parsed screenplay into a time-ordered, multi-track timeline of prompt
segments (camera, lighting, location, dialogue, sound, music...) and a
registry of the characters and locations it references.
"""

from .analysis import ScreenplayAnalysisResult, ScreenplayAnalyzer, analyze_screenplay
from .screenplay import Event, EventType, Scene, Screenplay, Sequence, SequenceType
from .timeline import Entity, EntityCategory, OutputType, Segment, SegmentCategory
from .utils.config import Config

__version__ = "0.1.0"

__all__ = [
    'Config',
    'Entity',
    'EntityCategory',
    'Event',
    'EventType',
    'OutputType',
    'Scene',
    'Screenplay',
    'ScreenplayAnalysisResult',
    'ScreenplayAnalyzer',
    'Segment',
    'SegmentCategory',
    'Sequence',
    'SequenceType',
    'analyze_screenplay'
]
