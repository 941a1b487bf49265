"""Movie- and sequence-level context

Era and genre are not going to change a lot during a movie, so they are
inferred once over the full text. Genre is inferred again per sequence, where
the vocabulary is narrower and the guess more relevant.
"""

from __future__ import annotations

import logging
from typing import Dict

from ..parsers.suite import ParserSuite
from ..screenplay.screenplay_models import Sequence
from ..utils.config import ContextConfig
from .analysis_models import MovieContext, SequenceContext
from .entity_registry import EntityRegistry

logger = logging.getLogger(__name__)


def _first_label(ranking: Dict[str, float], default: str) -> str:
    return next(iter(ranking), "") or default


class ContextAnalyzer:
    """Infers movie-wide era/genre and per-sequence genre, registers locations"""

    def __init__(self, parsers: ParserSuite, registry: EntityRegistry, config: ContextConfig):
        self.parsers = parsers
        self.registry = registry
        self.config = config

    async def infer_movie_era(self, full_text: str) -> str:
        try:
            eras = await self.parsers.get_most_probable_eras(full_text, self.config.movie_era_candidates)
        except Exception as e:
            logger.warning(f"Era inference failed, using '{self.config.default_era}': {e}")
            eras = {}
        return _first_label(eras, self.config.default_era)

    async def infer_movie_genre(self, full_text: str) -> str:
        try:
            genres = await self.parsers.get_most_probable_genres(full_text, self.config.movie_genre_candidates)
        except Exception as e:
            logger.warning(f"Genre inference failed, using '{self.config.default_genre}': {e}")
            genres = {}
        return _first_label(genres, self.config.default_genre)

    def movie_context(self, era_label: str, genre_label: str) -> MovieContext:
        return MovieContext(
            era_label=era_label,
            era=self.parsers.get_era(era_label),
            genre_label=genre_label,
            genre=self.parsers.get_genre(genre_label),
        )

    async def analyze_sequence(self, sequence: Sequence, movie: MovieContext) -> SequenceContext:
        """Sequence genre (movie genre as fallback) and location entities"""
        try:
            genres = await self.parsers.get_most_probable_genres(
                sequence.full_text, self.config.sequence_genre_candidates
            )
        except Exception as e:
            logger.warning(f"Sequence genre inference failed, using movie genre: {e}")
            genres = {}
        genre_label = _first_label(genres, movie.genre_label)

        try:
            for reference in self.parsers.get_entities(sequence.location, split_on_and=False):
                self.registry.register_location(reference, sequence)
        except Exception as e:
            logger.error(f"Failed to register locations of '{sequence.joined_location}': {e}", exc_info=True)

        return SequenceContext(
            sequence=sequence,
            genre_label=genre_label,
            genre=movie.genre if genre_label == movie.genre_label else self.parsers.get_genre(genre_label),
            movie=movie,
        )
