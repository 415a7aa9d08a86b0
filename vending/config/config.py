"""
Configuration module for the application.

Provides type-safe settings using Pydantic. Values come from the
environment (``VENDING_`` prefix, ``__`` between nested sections) or a
``.env`` file.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from vending.application.services.credit_policies import CreditPolicyNames
from vending.infrastructure.logger.enums import ConsoleStream
from vending.infrastructure.logger.interfaces import ILoggingConfig


class LoggingConfig(BaseModel):
    """Configuration for the logging system."""

    app_name: str = "Vending Machine"
    debug: bool = True  # if True then console render, else json render
    log_level: str = "WARNING"
    console_stream: ConsoleStream = ConsoleStream.STDERR
    enable_file_logging: bool = False
    logs_dir: Path = Path("logs")
    logs_file_name: str = "vending.log"
    max_file_size_mb: int = Field(default=10, ge=1)
    backup_count: int = Field(default=5, ge=0)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class MachineConfig(BaseModel):
    """Configuration for the machine itself."""

    credit_policy: CreditPolicyNames = Field(
        default=CreditPolicyNames.HUNDRED_NOTES,
        description="Which inserted money counts as credit",
    )
    catalog_file: Path | None = Field(
        default=None,
        description="JSON catalog; the built-in catalog is used when unset",
    )

    @field_validator("catalog_file", mode="after")
    @classmethod
    def validate_catalog_file(cls, v: Path | None) -> Path | None:
        """Validate that the catalog file exists."""
        if v is not None and not v.exists():
            raise FileNotFoundError(f"Catalog file not found: {v}")
        return v


class AppConfig(BaseSettings):
    """Main application configuration."""

    machine: MachineConfig = Field(default_factory=MachineConfig)
    logger: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix="VENDING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_nested_delimiter="__",
    )

    @property
    def logger_adapter(self) -> ILoggingConfig:
        """
        Logging configuration handed to the logging system.

        Returns:
            ILoggingConfig: Configuration object for the logging system.
        """
        return self.logger


@lru_cache
def get_config() -> AppConfig:
    config = AppConfig()
    return config
