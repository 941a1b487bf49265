"""
Screenplay input models

Parsed screenplay tree (sequences, scenes, events) consumed by the analysis pass.
"""

from .screenplay_models import Event, EventType, Scene, Screenplay, Sequence, SequenceType

__all__ = [
    'Event',
    'EventType',
    'Scene',
    'Screenplay',
    'Sequence',
    'SequenceType'
]
