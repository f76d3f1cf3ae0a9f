"""
Cinq Mille - Application Settings

Loads configuration from environment variables (prefixed ``CINQMILLE_``)
or a local ``.env`` file using Pydantic Settings.
"""

from functools import lru_cache

from pydantic import ValidationInfo, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cinqmille.engine.base import DEFAULT_OPENING_SCORE, DEFAULT_WINNING_SCORE
from cinqmille.engine.validators import validate_threshold


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Rules
    opening_score: int = DEFAULT_OPENING_SCORE
    winning_score: int = DEFAULT_WINNING_SCORE

    # Dice
    dice_seed: int | None = None

    # Application
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="CINQMILLE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("opening_score", "winning_score")
    @classmethod
    def _positive_threshold(cls, value: int, info: ValidationInfo) -> int:
        return validate_threshold(info.field_name, value)

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.upper()

    @model_validator(mode="after")
    def _opening_below_winning(self) -> "Settings":
        if self.opening_score > self.winning_score:
            raise ValueError("opening_score cannot exceed winning_score")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()
