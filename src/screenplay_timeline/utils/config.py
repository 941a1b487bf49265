"""Configuration management for the screenplay analysis"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from pydantic import BaseModel, Field


class TimelineConfig(BaseModel):
    initial_step: int = 1
    columns_per_slice: int = Field(default=4, ge=1)
    transition_duration_in_steps: int = Field(default=2, ge=1)
    transition_track: int = 7


class ContextConfig(BaseModel):
    movie_era_candidates: int = 2
    movie_genre_candidates: int = 20
    sequence_genre_candidates: int = 2
    default_era: str = "contemporary"
    default_genre: str = "classic"


class EntityConfig(BaseModel):
    default_region: str = "american"
    location_gender: str = "object"


class RandomnessConfig(BaseModel):
    # None derives the seed from the screenplay text
    seed: Optional[int] = None


class Config(BaseModel):
    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    context: ContextConfig = Field(default_factory=ContextConfig)
    entities: EntityConfig = Field(default_factory=EntityConfig)
    randomness: RandomnessConfig = Field(default_factory=RandomnessConfig)
    logging: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def load(cls, config_path: str) -> "Config":
        """Load configuration from YAML file"""
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    def save(self, config_path: str):
        """Save configuration to YAML file"""
        config_file = Path(config_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.model_dump(), f, default_flow_style=False)
