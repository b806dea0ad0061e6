"""Runtime settings loaded from the environment."""

from neuralforge.config.settings import DEFAULT_APP, RuntimeSettings, load_settings

__all__: list[str] = ["DEFAULT_APP", "RuntimeSettings", "load_settings"]
