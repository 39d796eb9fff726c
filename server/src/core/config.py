import os
import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, Any
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from common.src.hero_sprites import MissingSlotPolicy, SegmentPolicy, UnknownSlotPolicy


DEFAULT_CONFIG_PATH = Path(__file__).resolve().parents[2] / "config.yml"


def load_sprite_config(path: Path | None = None) -> Dict[str, Any]:
    """Load the sprites section of config.yml"""
    config_path = path or Path(os.getenv("HERO_SPRITES_CONFIG", str(DEFAULT_CONFIG_PATH)))

    if config_path.exists():
        with open(config_path, "r") as f:
            return (yaml.safe_load(f) or {}).get("sprites", {}) or {}
    return {}


# Load sprite config from YAML
sprite_config = load_sprite_config()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Input handling policies from config.yml with fallbacks.
    # Environment variables (e.g. SEGMENT_POLICY=percent_encode) win.
    SEGMENT_POLICY: SegmentPolicy = SegmentPolicy(
        sprite_config.get("segment_policy", SegmentPolicy.REJECT.value)
    )
    MISSING_SLOT_POLICY: MissingSlotPolicy = MissingSlotPolicy(
        sprite_config.get("missing_slot_policy", MissingSlotPolicy.REJECT.value)
    )
    UNKNOWN_SLOT_POLICY: UnknownSlotPolicy = UnknownSlotPolicy(
        sprite_config.get("unknown_slot_policy", UnknownSlotPolicy.REJECT.value)
    )

    # Filter registry (rendering-side cache keyed by filter id)
    FILTER_CACHE_SIZE: int = int(sprite_config.get("filter_cache_size", 10000))

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"

    @field_validator("FILTER_CACHE_SIZE")
    @classmethod
    def validate_cache_size(cls, value: int) -> int:
        """Ensure the filter cache can hold at least one entry."""
        if value < 1:
            raise ValueError("FILTER_CACHE_SIZE must be at least 1")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get the singleton settings instance."""
    return Settings()


settings = get_settings()
