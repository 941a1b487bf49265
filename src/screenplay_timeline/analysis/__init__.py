"""
Screenplay Analysis

The single stateful pass turning a parsed screenplay into timeline segments:
- Movie and sequence context (era, genre)
- Sliding-window attribute memory
- Transition handling
- Per-event segmentation
- Entity registry (characters, locations)
"""

from .analysis_models import EventError, ScreenplayAnalysisResult
from .entity_registry import EntityRegistry
from .screenplay_analyzer import ScreenplayAnalyzer, analyze_screenplay
from .sliding_window import SlidingWindowState

__all__ = [
    'EntityRegistry',
    'EventError',
    'ScreenplayAnalysisResult',
    'ScreenplayAnalyzer',
    'SlidingWindowState',
    'analyze_screenplay'
]
