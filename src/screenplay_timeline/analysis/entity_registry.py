"""Entity Registry

Maps a normalized trigger name to exactly one entity, for characters and
locations alike, and keeps a per-name accumulator (occurrences, sequences)
that an optional describer can use to write entity descriptions.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..parsers.suite import ParserSuite
from ..screenplay.screenplay_models import Sequence
from ..timeline.factories import new_entity
from ..timeline.timeline_models import Entity, EntityCategory, TemporaryAssetData
from ..utils.config import EntityConfig
from ..utils.logger import LoggerMixin


class EntityRegistry(LoggerMixin):

    def __init__(self, parsers: ParserSuite, config: Optional[EntityConfig] = None):
        self.parsers = parsers
        self.config = config or EntityConfig()

        self.entities_by_screenplay_label: Dict[str, Entity] = {}
        self.entities_by_id: Dict[str, Entity] = {}

        # Only used during analysis
        self.assets_by_label: Dict[str, TemporaryAssetData] = {}

    def get(self, trigger_name: str) -> Optional[Entity]:
        return self.entities_by_screenplay_label.get(trigger_name)

    def register_location(self, trigger_name: str, sequence: Sequence) -> Entity:
        self._track_asset(trigger_name, EntityCategory.LOCATION, sequence)

        existing = self.get(trigger_name)
        if existing is not None:
            return existing

        return self._store(new_entity(
            category=EntityCategory.LOCATION,
            trigger_name=trigger_name,
            label=trigger_name,
            description="",
            gender=self.config.location_gender,
        ))

    async def register_character(self, trigger_name: str, sequence: Sequence) -> Entity:
        self._track_asset(trigger_name, EntityCategory.CHARACTER, sequence)

        existing = self.get(trigger_name)
        if existing is not None:
            return existing

        analysis = await self.parsers.analyze_name(trigger_name)

        # The name analysis region does not map onto voice regions, use the default
        return self._store(new_entity(
            category=EntityCategory.CHARACTER,
            trigger_name=trigger_name,
            label=analysis.name,
            description=f"{analysis.name} is a {analysis.gender}",
            age=analysis.age,
            gender=analysis.gender,
            region=self.config.default_region,
        ))

    def _store(self, entity: Entity) -> Entity:
        self.entities_by_screenplay_label[entity.trigger_name] = entity
        self.entities_by_id[entity.id] = entity
        self.logger.debug(f"New {entity.category.value.lower()} entity: {entity.trigger_name} ({entity.id})")
        return entity

    def _track_asset(self, trigger_name: str, category: EntityCategory, sequence: Sequence):
        asset = self.assets_by_label.get(trigger_name)
        if asset is None:
            self.assets_by_label[trigger_name] = TemporaryAssetData(
                category=category,
                label=trigger_name,
                content=trigger_name,
                occurrences=1,
                sequences=[sequence],
            )
            return

        asset.occurrences += 1
        # Sequences are compared by content, not identity
        if not any(s.full_text == sequence.full_text for s in asset.sequences):
            asset.sequences.append(sequence)
