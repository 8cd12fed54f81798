"""Application configuration read from the environment."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.models import SERVICE_CLASSES


class Settings(BaseSettings):
    """Settings for the CLI and the MCP server.

    Every field can be set with an ``ISLAND_TRANSIT_`` prefixed environment
    variable or in a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ISLAND_TRANSIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    data_source: str = Field(
        default="data",
        description="Base URL or directory holding the static JSON files, "
        "relative to the working directory",
    )
    timeout: int = Field(default=30, description="HTTP timeout in seconds")
    currency: str = Field(default="XPF", description="Currency code of the fares")
    default_service_class: str = Field(
        default="second_class", description="Class used to price search results"
    )
    log_level: str = Field(default="WARNING", description="Logging level")

    @field_validator("default_service_class")
    @classmethod
    def validate_service_class(cls, v: str) -> str:
        if v not in SERVICE_CLASSES:
            raise ValueError(
                f"default_service_class must be one of {', '.join(SERVICE_CLASSES)}"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("timeout")
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


def get_settings() -> Settings:
    """Settings from the current environment."""
    return Settings()
