"""Configuration for export and import runs.

Settings are read from environment variables (and an optional ``.env`` file)
and passed explicitly into the exporter and importer. The source instance is
configured through ``LOCAL_STRAPI_URL`` / ``STRAPI_API_TOKEN`` and the target
through ``CLOUD_STRAPI_URL`` / ``CLOUD_STRAPI_API_TOKEN``; run tuning uses the
``STRAPI_MIGRATE_`` prefix.
"""

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, Field, SecretStr, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigurationError

DEFAULT_SOURCE_URL = "http://localhost:1337"
DEFAULT_TARGET_URL = "https://your-project.strapi.app"


class MigrationConfig(BaseSettings):
    """Settings shared by the exporter and the importer.

    Example:
        >>> config = MigrationConfig(
        ...     source_url="http://localhost:1337",
        ...     source_token="local-token",
        ... )
        >>> config.get_source_token()
        'local-token'
    """

    model_config = SettingsConfigDict(
        env_prefix="STRAPI_MIGRATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    source_url: str = Field(
        default=DEFAULT_SOURCE_URL,
        validation_alias=AliasChoices("source_url", "LOCAL_STRAPI_URL"),
        description="Base URL of the instance to export from",
    )
    source_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("source_token", "STRAPI_API_TOKEN"),
        description="API token with read access on the source instance",
    )
    target_url: str = Field(
        default=DEFAULT_TARGET_URL,
        validation_alias=AliasChoices("target_url", "CLOUD_STRAPI_URL"),
        description="Base URL of the instance to import into",
    )
    target_token: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("target_token", "CLOUD_STRAPI_API_TOKEN"),
        description="API token with create access on the target instance",
    )

    export_dir: Path = Field(
        default=Path("exports"),
        description="Directory export files are written to and read from",
    )
    batch_size: int = Field(
        default=10,
        ge=1,
        description="Entries submitted concurrently per import batch",
    )
    batch_delay: float = Field(
        default=0.5,
        ge=0.0,
        description="Pause between import batches in seconds",
    )
    request_timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Per-request timeout in seconds (None waits indefinitely)",
    )

    @field_validator("source_url", "target_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        """Drop trailing slashes so endpoint paths join cleanly."""
        return value.rstrip("/")

    def get_source_token(self) -> str:
        """Return the source API token, or an empty string if unset."""
        return self.source_token.get_secret_value() if self.source_token else ""

    def get_target_token(self) -> str:
        """Return the target API token, or an empty string if unset."""
        return self.target_token.get_secret_value() if self.target_token else ""

    def require_source_token(self) -> str:
        """Return the source token.

        Raises:
            ConfigurationError: If no source token is configured
        """
        token = self.get_source_token()
        if not token:
            raise ConfigurationError("STRAPI_API_TOKEN environment variable is required")
        return token

    def require_target_token(self) -> str:
        """Return the target token.

        Raises:
            ConfigurationError: If no target token is configured
        """
        token = self.get_target_token()
        if not token:
            raise ConfigurationError("CLOUD_STRAPI_API_TOKEN environment variable is required")
        return token


def load_config(**overrides: Any) -> MigrationConfig:
    """Load configuration from the environment, applying explicit overrides.

    Overrides whose value is None are ignored, so unset CLI options fall back
    to the environment.

    Args:
        **overrides: Field values taking precedence over the environment

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If any value fails validation
    """
    values = {key: value for key, value in overrides.items() if value is not None}
    try:
        return MigrationConfig(**values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
