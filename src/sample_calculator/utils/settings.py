"""Settings for logging, integer width and the fixture command file.

Values come from environment variables or a local ``.env`` file.
"""

from typing import Any, ClassVar, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

MIN_INT_BITS = 8
MAX_INT_BITS = 128


def check_int_bits(bits: int) -> int:
    """Return ``bits`` if it is 0 or within the supported widths."""
    if bits == 0 or MIN_INT_BITS <= bits <= MAX_INT_BITS:
        return bits
    msg = (
        f"Invalid integer width: {bits}. Must be 0 or between "
        f"{MIN_INT_BITS} and {MAX_INT_BITS}"
    )
    raise ValueError(msg)


class LoggingSettings(BaseSettings):
    """Logging configuration settings.

    All settings can be configured via environment variables.
    """

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level",
    )

    log_format: Literal["json", "console", "plain"] = Field(
        default="console",
        description="Log output format",
    )

    log_file_path: str | None = Field(
        default=None,
        description="Path to log file for local file logging",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if str(v).upper() not in valid_levels:
            msg = f"Invalid log level: {v}. Must be one of {valid_levels}"
            raise ValueError(msg)
        return str(v).upper()

    @field_validator("log_format", mode="before")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate log format value."""
        valid_formats = {"json", "console", "plain"}
        if str(v).lower() not in valid_formats:
            msg = f"Invalid log format: {v}. Must be one of {valid_formats}"
            raise ValueError(msg)
        return str(v).lower()


class CalculatorSettings(BaseSettings):
    """Configuration for the arithmetic evaluator and the fixture command runner."""

    instance: ClassVar[Any] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="CALCULATOR_",
    )

    int_bits: int = Field(
        default=32,
        description=(
            "Width of the signed integers results are wrapped to. "
            "Use 0 for unbounded Python integers."
        ),
    )

    command_config_path: str = Field(
        default="fixture_commands.yaml",
        description="YAML file declaring the lint and test commands for the fixture.",
    )

    @field_validator("int_bits")
    @classmethod
    def validate_int_bits(cls, v: int) -> int:
        """Validate the integer width."""
        return check_int_bits(v)


def get_settings() -> LoggingSettings:
    """Get the global settings instance.

    Returns:
        LoggingSettings: The settings instance

    """
    if LoggingSettings.instance is None:
        LoggingSettings.instance = LoggingSettings()
    return LoggingSettings.instance


def reset_settings() -> None:
    """Reset the global settings instance.

    This is mainly useful for testing.
    """
    LoggingSettings.instance = None


def get_calculator_settings() -> CalculatorSettings:
    """Get the global calculator settings instance."""
    if CalculatorSettings.instance is None:
        CalculatorSettings.instance = CalculatorSettings()
    return CalculatorSettings.instance


def reset_calculator_settings() -> None:
    """Reset the global calculator settings instance."""
    CalculatorSettings.instance = None
