"""
Timeline document

Segments, entities and their factories, as consumed by the generative media
pipeline downstream of the screenplay analysis.
"""

from .timeline_models import (
    DEFAULT_COLUMNS_PER_SLICE,
    Entity,
    EntityCategory,
    OutputType,
    Segment,
    SegmentCategory,
    TemporaryAssetData,
)
from .factories import create_segment, new_entity

__all__ = [
    'DEFAULT_COLUMNS_PER_SLICE',
    'Entity',
    'EntityCategory',
    'OutputType',
    'Segment',
    'SegmentCategory',
    'TemporaryAssetData',
    'create_segment',
    'new_entity'
]
