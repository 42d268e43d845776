"""
Configuration Settings.

This module defines the dispatcher configuration using Pydantic's BaseSettings.
It automatically loads all configuration from environment variables and .env file
without explicit dotenv loading.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# =====================================================================
# Grouped Configuration Models
# =====================================================================


class ExecutorConfig(BaseModel):
    """Executor and result channel configuration."""

    result_channel_maxsize: int = Field(
        default=32,
        ge=0,
        alias="ACTIONHUB_RESULT_CHANNEL_MAXSIZE",
        description="Capacity of the result channel (0 means unbounded)",
    )
    result_channel_drop_when_full: bool = Field(
        default=False,
        alias="ACTIONHUB_RESULT_CHANNEL_DROP_WHEN_FULL",
        description="Drop results instead of suspending the producer when the channel is full",
    )
    handler_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        alias="ACTIONHUB_HANDLER_TIMEOUT_SECONDS",
        description="Upper bound for a single adapter call (unset means no timeout)",
    )

    model_config = {"populate_by_name": True}


class HttpAdapterConfig(BaseModel):
    """HTTP adapter configuration."""

    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        alias="ACTIONHUB_HTTP_TIMEOUT_SECONDS",
        description="Timeout applied to outgoing HTTP requests of the api adapter",
    )

    model_config = {"populate_by_name": True}


# =====================================================================
# Main Settings Class
# =====================================================================


class Settings(BaseSettings):
    """
    Dispatcher settings model.

    All properties are automatically bound from environment variables and .env file.
    Pydantic's BaseSettings handles dotenv loading automatically via model_config.
    """

    # =====================================================================
    # Pydantic Configuration
    # =====================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        populate_by_name=True,
    )

    # =====================================================================
    # Logging Configuration
    # =====================================================================
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
        alias="ACTIONHUB_LOG_LEVEL",
    )
    log_format: str = Field(
        default="detailed",
        description="Log line format (simple, detailed, json)",
        alias="ACTIONHUB_LOG_FORMAT",
    )
    log_file_dir: str = Field(
        default="logs",
        description="Directory for the log file when file logging is enabled",
        alias="ACTIONHUB_LOG_FILE_DIR",
    )
    enable_file_logging: bool = Field(
        default=False,
        description="Also write logs to <log_file_dir>/actionhub.log",
        alias="ACTIONHUB_ENABLE_FILE_LOGGING",
    )

    # =====================================================================
    # Executor Configuration
    # =====================================================================
    result_channel_maxsize: int = Field(
        default=32,
        ge=0,
        description="Capacity of the result channel (0 means unbounded)",
        alias="ACTIONHUB_RESULT_CHANNEL_MAXSIZE",
    )
    result_channel_drop_when_full: bool = Field(
        default=False,
        description="Drop results instead of suspending the producer when the channel is full",
        alias="ACTIONHUB_RESULT_CHANNEL_DROP_WHEN_FULL",
    )
    handler_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Upper bound for a single adapter call (unset means no timeout)",
        alias="ACTIONHUB_HANDLER_TIMEOUT_SECONDS",
    )

    # =====================================================================
    # Adapter Configuration
    # =====================================================================
    http_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Timeout applied to outgoing HTTP requests of the api adapter",
        alias="ACTIONHUB_HTTP_TIMEOUT_SECONDS",
    )

    # =====================================================================
    # Computed Properties (Grouped Configurations)
    # =====================================================================

    @property
    def executor(self) -> ExecutorConfig:
        """Get executor configuration from environment variables."""
        return ExecutorConfig.model_validate(self.model_dump(by_alias=True))

    @property
    def http(self) -> HttpAdapterConfig:
        """Get HTTP adapter configuration from environment variables."""
        return HttpAdapterConfig.model_validate(self.model_dump(by_alias=True))


settings = Settings()
