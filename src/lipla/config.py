"""Application configuration.

Configuration is loaded from environment variables prefixed with `LIPLA_`.
A `.env` file in the working directory (or the file named by
`LIPLA_ENV_FILE`) is read as well, and a YAML file named by
`LIPLA_CONFIG_FILE` may override individual settings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_LIFEPLAN_FILENAME = "lipla.dat"
DEFAULT_HISTORY_FILENAME = "lipla.his"
DEFAULT_XML_FILENAME = "lipla.xml"


class Settings(BaseSettings):
    """Lipla settings.

    All fields are environment-configurable. Prefix is `LIPLA_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="LIPLA_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Files
    data_file: Path = Field(default_factory=lambda: Path.home() / DEFAULT_LIFEPLAN_FILENAME)
    history_file: Path = Field(default_factory=lambda: Path.home() / DEFAULT_HISTORY_FILENAME)
    export_file: Path = Field(default=Path(DEFAULT_XML_FILENAME))

    # Interface
    log_level: str = Field(default="WARNING")
    color: bool = Field(default=True)
    # Skip the confirmation before creating a new data file
    assume_yes: bool = Field(default=False)

    @property
    def uses_default_data_file(self) -> bool:
        return self.data_file == Path.home() / DEFAULT_LIFEPLAN_FILENAME


def _read_yaml(path: Path) -> dict[str, Any]:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_settings(**overrides: Any) -> Settings:
    """Load settings from env, optional env file and optional YAML file.

    Args:
        **overrides: Values taking precedence over every other source
            (e.g. a data file given on the command line).

    Returns:
        Settings: Parsed settings.
    """

    values: dict[str, Any] = {}
    config_file = os.getenv("LIPLA_CONFIG_FILE")
    if config_file:
        values.update(_read_yaml(Path(config_file)))
    values.update({k: v for k, v in overrides.items() if v is not None})

    env_file_override = os.getenv("LIPLA_ENV_FILE")
    if env_file_override:
        return Settings(_env_file=Path(env_file_override), **values)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env, **values)

    return Settings(**values)
