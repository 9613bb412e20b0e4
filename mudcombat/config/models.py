"""
Pydantic-based configuration models for mudcombat.

Configuration is loaded from environment variables (and an optional .env
file) with type validation, then handed explicitly to the services that need
it rather than read from process-wide state at call sites.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from ..structured_logging.enhanced_logging_config import get_logger

logger = get_logger(__name__)


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    environment: str | None = Field(default=None, description="Logging environment (auto-detected if unset)")
    level: str = Field(default="INFO", description="Log level")
    disable_logging: bool = Field(default=False, description="Disable log output")

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str | None) -> str | None:
        """Validate logging environment."""
        valid_environments = ["local", "unit_test", "production"]
        if v is not None and v not in valid_environments:
            logger.error("Invalid logging environment", environment=v, valid_environments=valid_environments)
            raise ValueError(f"Environment must be one of {valid_environments}, got '{v}'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got '{v}'")
        return v_upper

    model_config = {"env_prefix": "LOGGING_", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict:
        """Convert to the dict shape accepted by setup_enhanced_logging()."""
        return {
            "environment": self.environment,
            "level": self.level,
            "disable_logging": self.disable_logging,
        }


class GameConfig(BaseSettings):
    """Game rules consumed by the combat presentation layer."""

    starting_room: str | None = Field(
        default=None, description="Room ID used for respawn when a character has no home waypoint"
    )
    prompt_width: int = Field(default=60, description="Display columns available to the combat prompt")
    death_experience_penalty_percent: int = Field(
        default=20, description="Percentage of current experience lost on death"
    )

    @field_validator("prompt_width")
    @classmethod
    def validate_prompt_width(cls, v: int) -> int:
        """The prompt needs room for a name column, separator and a bar."""
        if v < 20:
            raise ValueError("Prompt width must be at least 20 columns")
        return v

    @field_validator("death_experience_penalty_percent")
    @classmethod
    def validate_death_penalty(cls, v: int) -> int:
        """Validate penalty percentage."""
        if not 0 <= v <= 100:
            logger.error("Invalid death experience penalty", percent=v, valid_range="0-100")
            raise ValueError("Death experience penalty must be between 0 and 100")
        return v

    model_config = {"env_prefix": "GAME_", "case_sensitive": False, "extra": "ignore"}


class AppConfig(BaseSettings):
    """
    Composite application configuration.

    Access via get_config() singleton function.
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    game: GameConfig = Field(default_factory=GameConfig)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "case_sensitive": False, "extra": "ignore"}

    def to_legacy_dict(self) -> dict:
        """Convert to dict format for setup_enhanced_logging()."""
        return {
            "logging": self.logging.to_legacy_dict(),
            "starting_room": self.game.starting_room,
            "prompt_width": self.game.prompt_width,
            "death_experience_penalty_percent": self.game.death_experience_penalty_percent,
        }
