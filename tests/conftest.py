import asyncio
from typing import Dict, List, Optional

import pytest

from screenplay_timeline.analysis import ScreenplayAnalysisResult, ScreenplayAnalyzer
from screenplay_timeline.screenplay import Event, Scene, Screenplay, Sequence, SequenceType
from screenplay_timeline.timeline import Segment, SegmentCategory
from screenplay_timeline.utils.config import Config


def make_sequence(
    events: List[Dict],
    location: Optional[List[str]] = None,
    type: SequenceType = SequenceType.EXTERIOR,
    time: str = "DAY",
    scene_id: str = "scene-1",
) -> Sequence:
    full_text = "\n".join(e.get("description", "") for e in events)
    return Sequence(
        full_text=full_text,
        location=location if location is not None else ["WAREHOUSE"],
        type=type,
        time=time,
        scenes=[Scene(id=scene_id, events=[Event(**e) for e in events])],
    )


def make_screenplay(*sequences: Sequence) -> Screenplay:
    return Screenplay(
        full_text="\n\n".join(s.full_text for s in sequences),
        sequences=list(sequences),
    )


def analyze(screenplay: Screenplay, **kwargs) -> ScreenplayAnalysisResult:
    config = kwargs.pop("config", None) or Config()
    on_progress = kwargs.pop("on_progress", None)
    analyzer = ScreenplayAnalyzer(config=config, **kwargs)
    return asyncio.run(analyzer.analyze(screenplay, on_progress))


def by_category(segments: List[Segment], category: SegmentCategory) -> List[Segment]:
    return [s for s in segments if s.category == category]


def by_start(segments: List[Segment]) -> Dict[int, List[Segment]]:
    groups: Dict[int, List[Segment]] = {}
    for segment in segments:
        groups.setdefault(segment.start_time_in_steps, []).append(segment)
    return groups


@pytest.fixture
def seeded_config() -> Config:
    config = Config()
    config.randomness.seed = 1234
    return config
