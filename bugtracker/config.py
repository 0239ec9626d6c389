"""Configuration loading from YAML and environment.

Every setting has a default, so the tool runs without a config file. Values
in the YAML may reference environment variables as ${VAR} or $VAR.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Injected by load_config so env substitution sees a consistent snapshot
_current_env: dict[str, str] = {}


class StoreConfig(BaseSettings):
    """Where and how report files are written."""

    model_config = SettingsConfigDict(env_prefix="STORE_", extra="ignore")

    reports_dir: str = Field(default=".", description="Directory for relative report names")
    encoding: str = Field(default="utf-8", description="Text encoding of report files")
    wrap_width: int = Field(default=50, ge=1, description="Soft width for wrapping long descriptions")

    @property
    def reports_path(self) -> Path:
        return Path(self.reports_dir).expanduser()


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="WARNING", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    store: StoreConfig = Field(default_factory=StoreConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return _current_env.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return _current_env.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from YAML file and environment.

    A missing file yields defaults (still overridable by STORE_* and
    LOGGING_* environment variables). Raises yaml.YAMLError or
    pydantic.ValidationError for a malformed file, and ValueError when the
    top level is not a mapping.
    """
    global _current_env
    _current_env = dict(os.environ)

    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must contain a mapping at the top level, got {type(raw).__name__}")
    raw = _substitute_env(raw)

    store = StoreConfig(**(raw.get("store") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))
    return AppConfig(store=store, logging=logging)
