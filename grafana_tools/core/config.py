"""
Configuration Management.

Loads secrets from the environment (or a .env file in the working directory)
and settings from grafana_tools/config/settings/*.yaml.

Secrets (.env / environment):
    GRAFANA_API_KEY

Settings (YAML):
    application.yaml   - App identity and Grafana connection defaults
    logging.yaml       - Logging configuration
"""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from grafana_tools import __version__
from grafana_tools.core.config_schema import ApplicationSchema, LoggingSchema
from grafana_tools.core.exceptions import ConfigurationError

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config" / "settings"


def load_yaml_config(filename: str, config_dir: Path | None = None) -> dict[str, Any]:
    """Load a YAML configuration file from the settings directory."""
    config_path = (config_dir or CONFIG_DIR) / filename

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class Settings(BaseSettings):
    """Secrets loaded from the environment or .env. Only tokens and keys."""

    api_key: str | None = None

    model_config = SettingsConfigDict(
        env_prefix="GRAFANA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def _load_validated(schema_cls: type, filename: str, config_dir: Path | None = None) -> Any:
    """Load YAML and validate against schema. Returns typed model instance."""
    raw = load_yaml_config(filename, config_dir)
    try:
        return schema_cls(**raw)
    except ValidationError as e:
        raise ValueError(
            f"Invalid configuration in {filename}:\n{e}"
        ) from e


class AppConfig:
    """
    Application configuration loaded from YAML files.

    Each YAML file is validated against its Pydantic schema at load time.
    Properties return typed Pydantic model instances with attribute access.
    """

    def __init__(self, config_dir: Path | None = None) -> None:
        self._application = _load_validated(ApplicationSchema, "application.yaml", config_dir)
        self._logging = _load_validated(LoggingSchema, "logging.yaml", config_dir)

    @property
    def application(self) -> ApplicationSchema:
        """Application settings."""
        return self._application

    @property
    def logging(self) -> LoggingSchema:
        """Logging settings."""
        return self._logging


@lru_cache
def get_settings() -> Settings:
    """Get cached secrets instance."""
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached application configuration."""
    return AppConfig()


class ClientConfig(BaseModel):
    """Immutable connection details for a single Grafana server."""

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(min_length=1)
    hostname: str = Field(min_length=1)
    user_agent: str = Field(min_length=1)
    scheme: Literal["http", "https"] = "http"
    timeout: float | None = None

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.hostname}/api"


def get_user_agent() -> str:
    """User-Agent sent with every request: <name>/<version>."""
    return f"{get_app_config().application.name}/{__version__}"


def build_client_config(
    api_key: str | None = None,
    hostname: str | None = None,
    scheme: str | None = None,
) -> ClientConfig:
    """
    Combine command line values, secrets and YAML defaults into a ClientConfig.

    Explicit arguments win over the environment, which wins over
    application.yaml.

    Raises:
        ConfigurationError: If no API key is available or a value is invalid.
    """
    grafana = get_app_config().application.grafana
    effective_key = api_key or get_settings().api_key

    if not effective_key:
        raise ConfigurationError(
            "No API key given: pass --api-key or set the GRAFANA_API_KEY environment variable"
        )

    try:
        return ClientConfig(
            api_key=effective_key,
            hostname=hostname or grafana.hostname,
            user_agent=get_user_agent(),
            scheme=scheme or grafana.scheme,
            timeout=grafana.timeout,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid client configuration:\n{e}") from e
