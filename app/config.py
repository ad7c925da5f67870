"""Configuration management using Pydantic Settings v2."""

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from ruamel.yaml import YAML


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level"
    )
    file: str = Field(default="/app/logs/groupings.log", description="Log file path")
    rotation: str = Field(default="100 MB", description="Log rotation size")
    retention: str = Field(default="7 days", description="Log retention period")
    json_format: bool = Field(default=True, description="Use JSON log format")


class GroupingsApiConfig(BaseSettings):
    """Upstream groupings API connection configuration."""

    base_url: str = Field(
        default="http://localhost:8081/grouperws/api/groupings/v2.1",
        description="Groupings API base URL",
    )
    announcements_path: str = Field(
        default="/announcements", description="Announcements resource path"
    )
    timeout: int = Field(default=10, ge=1, description="Request timeout in seconds")
    max_attempts: int = Field(default=3, ge=1, description="Maximum request attempts")
    retry_min_wait: float = Field(default=2, ge=0, description="Minimum retry backoff in seconds")
    retry_max_wait: float = Field(default=10, ge=0, description="Maximum retry backoff in seconds")

    @property
    def announcements_url(self) -> str:
        """Full announcements URL."""
        return self.base_url.rstrip("/") + "/" + self.announcements_path.lstrip("/")


class AnnouncementsConfig(BaseSettings):
    """Announcement classification configuration."""

    timezone: str = Field(
        default="Pacific/Honolulu",
        description="Timezone the wire timestamps are expressed in",
    )


class HealthCheckConfig(BaseSettings):
    """Health check configuration."""

    unhealthy_threshold: int = Field(
        default=3, ge=1, description="Consecutive upstream failures before unhealthy"
    )


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    groupings_api: GroupingsApiConfig = Field(default_factory=GroupingsApiConfig)
    announcements: AnnouncementsConfig = Field(default_factory=AnnouncementsConfig)
    health: HealthCheckConfig = Field(default_factory=HealthCheckConfig)

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Config":
        """Load configuration from YAML file with environment variable overrides.

        Args:
            config_path: Path to YAML configuration file

        Returns:
            Config instance with loaded settings

        Raises:
            FileNotFoundError: If config file doesn't exist
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        yaml = YAML()
        with open(config_path) as f:
            config_dict = yaml.load(f) or {}

        config_dict = cls._normalize_keys(config_dict)

        return cls(
            logging=LoggingConfig(**config_dict.pop("logging", {})),
            groupings_api=GroupingsApiConfig(**config_dict.pop("groupings_api", {})),
            announcements=AnnouncementsConfig(**config_dict.pop("announcements", {})),
            health=HealthCheckConfig(**config_dict.pop("health", {})),
        )

    @staticmethod
    def _normalize_keys(data: dict) -> dict:
        """Convert hyphenated keys to underscored for Python compatibility.

        Args:
            data: Dictionary with possibly hyphenated keys

        Returns:
            Dictionary with normalized keys
        """
        normalized = {}
        for key, value in data.items():
            new_key = key.replace("-", "_")
            if isinstance(value, dict):
                normalized[new_key] = Config._normalize_keys(value)
            else:
                normalized[new_key] = value
        return normalized


def load_config(config_path: str | Path = "/app/config/settings.yaml") -> Config:
    """Load application configuration.

    Args:
        config_path: Path to configuration file

    Returns:
        Config instance, defaults when the file is missing
    """
    try:
        return Config.from_yaml(config_path)
    except FileNotFoundError:
        return Config()


config: Config = load_config()
