"""Configuration management for the schema tooling.

Settings come from ``DGQL_*`` environment variables (or a ``.env`` file)
using Pydantic Settings. Command-line options override them.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the dgql CLI."""

    model_config = SettingsConfigDict(
        env_prefix="DGQL_", env_file=".env", case_sensitive=False, extra="ignore"
    )

    # Environment
    environment: Literal["development", "testing", "production"] = Field(
        default="development", description="Application environment"
    )

    # Logging
    log_level: str = Field(default="WARNING", description="Log level")
    json_logs: bool = Field(default=False, description="Enable JSON formatted logs")

    # Validation
    rule_modules: list[str] = Field(
        default_factory=list,
        description="Modules imported at startup to register validation rules",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


# Global configuration instance
settings = Settings()
