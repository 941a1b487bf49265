"""Screenplay analysis pass

Walks sequences, scenes and events in document order and turns them into a
flat, multi-track timeline of segments plus a deduplicated entity registry.

A sliding window "paints over time" the characteristics of a scene: once
established, a location, a light or a weather keeps applying to the next
terse events, until a sequence naming its own location resets it.
"""

from __future__ import annotations

from typing import Awaitable, Callable, List, Optional

from ..parsers.suite import ParserSuite
from ..screenplay.screenplay_models import Screenplay
from ..timeline.timeline_models import Segment, TemporaryAssetData
from ..utils.config import Config
from ..utils.logger import LoggerMixin
from ..utils.seed import Picker, seed_for_screenplay
from .analysis_models import EventError, MovieContext, ScreenplayAnalysisResult
from .context import ContextAnalyzer
from .entity_registry import EntityRegistry
from .event_segmenter import EventSegmenter
from .progress import ProgressCallback, ProgressReporter
from .sliding_window import SlidingWindowState
from .transition_handler import handle_transition

# (asset, movie genre label, movie era label) -> description
AssetDescriber = Callable[[TemporaryAssetData, str, str], Awaitable[str]]


class ScreenplayAnalyzer(LoggerMixin):
    """Runs the single stateful pass over a parsed screenplay"""

    def __init__(
        self,
        config: Optional[Config] = None,
        parsers: Optional[ParserSuite] = None,
        picker: Optional[Picker] = None,
        asset_describer: Optional[AssetDescriber] = None,
    ):
        self.config = config or Config()
        self.parsers = parsers or ParserSuite()
        self.picker = picker
        self.asset_describer = asset_describer

    def _make_picker(self, screenplay: Screenplay) -> Picker:
        if self.picker is not None:
            return self.picker
        seed = self.config.randomness.seed
        if seed is None:
            seed = seed_for_screenplay(screenplay.full_text)
        return Picker(seed)

    async def analyze(
        self,
        screenplay: Screenplay,
        on_progress: Optional[ProgressCallback] = None,
    ) -> ScreenplayAnalysisResult:
        timeline = self.config.timeline
        progress = ProgressReporter(on_progress, total_sequences=len(screenplay.sequences))

        registry = EntityRegistry(self.parsers, self.config.entities)
        context_analyzer = ContextAnalyzer(self.parsers, registry, self.config.context)
        segmenter = EventSegmenter(self.parsers, registry, self._make_picker(screenplay), timeline)

        segments: List[Segment] = []
        failures: List[EventError] = []
        skipped = 0
        start_time_in_steps = timeline.initial_step

        await progress.report(0, "Analyzing time period..")
        era_label = await context_analyzer.infer_movie_era(screenplay.full_text)

        await progress.advance(10, "Analyzing genre..")
        genre_label = await context_analyzer.infer_movie_genre(screenplay.full_text)
        movie = context_analyzer.movie_context(era_label, genre_label)

        await progress.advance(10, "Analyzing each scenes..")
        self.logger.info(
            f"Analyzing screenplay: sequences={len(screenplay.sequences)}, era={era_label}, genre={genre_label}"
        )

        state = SlidingWindowState()

        for sequence_number, sequence in enumerate(screenplay.sequences, start=1):
            await progress.sequence_started(sequence_number)

            context = await context_analyzer.analyze_sequence(sequence, movie)

            for scene in sequence.scenes:
                for event_index, event in enumerate(scene.events):
                    try:
                        if self.parsers.only_contains_strange_number(event.description):
                            skipped += 1
                            continue

                        transition = handle_transition(
                            event, scene, start_time_in_steps, self.parsers, timeline
                        )
                        if transition is not None:
                            segments.append(transition)
                            start_time_in_steps += transition.duration_in_steps
                            continue

                        batch = await segmenter.segment(event, scene, context, state, start_time_in_steps)
                    except Exception as e:
                        self.logger.error(
                            f"Failed to process event {event_index} of scene {scene.id} "
                            f"(sequence {sequence_number}): {e}",
                            exc_info=True,
                        )
                        failures.append(EventError(
                            sequence_index=sequence_number - 1,
                            scene_id=scene.id,
                            event_index=event_index,
                            error_type=type(e).__name__,
                            message=str(e),
                        ))
                        continue

                    segments.extend(batch.segments)
                    state = batch.state
                    start_time_in_steps += batch.duration_in_steps

        if self.asset_describer is not None:
            await progress.report(progress.progress, "Describing entities..")
            await self._describe_assets(registry, movie)

        await progress.report(100, "Analysis completed")
        self.logger.info(
            f"Screenplay analyzed: segments={len(segments)}, entities={len(registry.entities_by_id)}, "
            f"failed_events={len(failures)}, skipped_events={skipped}"
        )

        return ScreenplayAnalysisResult(
            segments=segments,
            entities_by_screenplay_label=registry.entities_by_screenplay_label,
            entities_by_id=registry.entities_by_id,
            failed_events=failures,
            skipped_events=skipped,
            movie_era=era_label,
            movie_genre=genre_label,
        )

    async def _describe_assets(self, registry: EntityRegistry, movie: MovieContext):
        for name, asset in registry.assets_by_label.items():
            entity = registry.get(name)
            if entity is None:
                self.logger.warning(f"No entity found for asset '{name}'")
                continue
            try:
                description = await self.asset_describer(asset, movie.genre_label, movie.era_label)
            except Exception as e:
                self.logger.warning(f"Failed to describe '{name}': {e}")
                continue
            if description and description.strip():
                entity.description = description.strip()
            else:
                self.logger.info(f"Empty description for '{name}', keeping the existing one")


async def analyze_screenplay(
    screenplay: Screenplay,
    on_progress: Optional[ProgressCallback] = None,
    config: Optional[Config] = None,
    parsers: Optional[ParserSuite] = None,
) -> ScreenplayAnalysisResult:
    """Analyze a screenplay with a fresh analyzer"""
    return await ScreenplayAnalyzer(config=config, parsers=parsers).analyze(screenplay, on_progress)
