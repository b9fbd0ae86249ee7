"""Application configuration using Pydantic settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dutch.constants import DEFAULT_HAND_SIZE, DUTCH_PENALTY, GAME_OVER_SCORE


class Settings(BaseSettings):
    """Rule settings loaded from environment variables (``DUTCH_*``)."""

    model_config = SettingsConfigDict(
        env_prefix="DUTCH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Table
    hand_size: int = Field(default=DEFAULT_HAND_SIZE, ge=1, description="Cards dealt per player")
    default_player_names: list[str] = Field(
        default_factory=lambda: ["Joueur 1", "Joueur 2"],
        description="Names used when a session starts without explicit players",
    )

    # Scoring
    game_over_score: int = Field(default=GAME_OVER_SCORE, description="Score that ends the game")
    dutch_penalty: int = Field(default=DUTCH_PENALTY, description="Penalty for a wrong Dutch call")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")


# Global settings instance
settings = Settings()
