"""Runner for the external lint and test commands applied to the fixture."""

from .commands import (
    CATEGORIES,
    CheckOutcome,
    CommandCategory,
    CommandConfigError,
    CommandRunError,
    FixtureCommand,
    FixtureCommandRunner,
    load_command_config,
    parse_command_config,
)

__all__ = [
    "CATEGORIES",
    "CheckOutcome",
    "CommandCategory",
    "CommandConfigError",
    "CommandRunError",
    "FixtureCommand",
    "FixtureCommandRunner",
    "load_command_config",
    "parse_command_config",
]
