"""Environment-driven runtime settings.

Settings never come from the command line: flags describe the run,
environment variables describe the installation.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from neuralforge.exceptions import ConfigurationError

DEFAULT_APP: str = "neuralforge.application:NeuralForge"


class RuntimeSettings(BaseSettings):
    """Non-secret launcher settings."""

    app: str = Field(default=DEFAULT_APP, alias="NEURALFORGE_APP")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING", alias="NEURALFORGE_LOG_LEVEL",
    )

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")


def load_settings() -> RuntimeSettings:
    """Read settings from the environment, mapping validation failures.

    Raises
    ------
    ConfigurationError
        When a variable holds an unsupported value.
    """
    try:
        return RuntimeSettings()
    except ValidationError as exc:
        fields = ", ".join(
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        )
        raise ConfigurationError(
            f"Invalid environment settings: {fields or 'unknown field'}",
            hint="NEURALFORGE_LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR.",
        ) from exc
