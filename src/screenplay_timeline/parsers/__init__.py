"""
Sub-parsers

Keyword heuristics turning screenplay text into attributes (era, genre,
location, lighting, weather, shot, sound, transitions, character names).
"""

from .parser_models import CategoryPrompts, Era, Genre, NameAnalysis
from .suite import ParserSuite

__all__ = [
    'CategoryPrompts',
    'Era',
    'Genre',
    'NameAnalysis',
    'ParserSuite'
]
