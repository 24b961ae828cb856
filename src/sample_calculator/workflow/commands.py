"""Run the external lint and test commands the fixture is meant to feed.

The command file has two optional sections, ``lint`` and ``tests``. Each maps
an alias to one command or to a list of commands; a command is either a
shell-style string or an argv list::

    lint:
      ruff:
        - [ruff, check, src]
        - ruff format --check src
      mypy: mypy src
    tests:
      pytest: pytest -q tests

A command exiting non-zero is an outcome, not an error: the fixture is
expected to produce lint findings and an expected test failure.
"""

from __future__ import annotations

import shlex
import subprocess
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, cast

from sample_calculator.base import BaseComponent
from sample_calculator.utils.file_handler import FileHandler

if TYPE_CHECKING:
    from pathlib import Path

CommandCategory = Literal["lint", "tests"]
CATEGORIES: tuple[CommandCategory, ...] = ("lint", "tests")


class CommandConfigError(ValueError):
    """Raised when the command file does not have the expected shape."""


class CommandRunError(RuntimeError):
    """Raised when a command cannot be started or does not finish in time."""

    def __init__(self, command: FixtureCommand, reason: str) -> None:
        """Initialise the error with the failing command."""
        super().__init__(f"{command.alias}: {reason} ({command.display()})")
        self.command = command


@dataclass(frozen=True, slots=True)
class FixtureCommand:
    """A single argv to run, tagged with where it was declared."""

    category: CommandCategory
    alias: str
    argv: tuple[str, ...]

    def display(self) -> str:
        """Return the argv as one shell-quoted string."""
        return shlex.join(self.argv)


@dataclass(frozen=True, slots=True)
class CheckOutcome:
    """What happened when a fixture command ran."""

    command: FixtureCommand
    returncode: int
    stdout: str
    stderr: str
    duration: float

    @property
    def succeeded(self) -> bool:
        """Return whether the command exited with status 0."""
        return self.returncode == 0

    def to_json(self) -> dict[str, Any]:
        """Return a JSON-serialisable representation of the outcome."""
        return {
            "category": self.command.category,
            "alias": self.command.alias,
            "command": list(self.command.argv),
            "returncode": self.returncode,
            "succeeded": self.succeeded,
            "duration": round(self.duration, 3),
            "stdout": self.stdout,
            "stderr": self.stderr,
        }


def _to_argv(entry: object, *, where: str) -> tuple[str, ...]:
    if isinstance(entry, str):
        argv = tuple(shlex.split(entry))
    elif isinstance(entry, list) and all(
        isinstance(part, (str, int, float)) for part in cast("list[object]", entry)
    ):
        argv = tuple(str(part) for part in cast("list[object]", entry))
    else:
        message = f"{where}: a command must be a string or a list of arguments"
        raise CommandConfigError(message)
    if not argv:
        message = f"{where}: empty command"
        raise CommandConfigError(message)
    return argv


def parse_command_config(data: object) -> tuple[FixtureCommand, ...]:
    """Turn a loaded command document into commands, lint first."""
    if data is None:
        return ()
    if not isinstance(data, Mapping):
        message = "The command file must contain a mapping"
        raise CommandConfigError(message)

    document = cast("Mapping[object, object]", data)
    unknown = sorted(str(key) for key in document if key not in CATEGORIES)
    if unknown:
        message = f"Unknown sections {unknown}; expected {list(CATEGORIES)}"
        raise CommandConfigError(message)

    commands: list[FixtureCommand] = []
    for category in CATEGORIES:
        section = document.get(category)
        if section is None:
            continue
        if not isinstance(section, Mapping):
            message = f"'{category}' must map aliases to commands"
            raise CommandConfigError(message)
        for alias, value in cast("Mapping[object, object]", section).items():
            where = f"{category}.{alias}"
            entries = value if isinstance(value, list) else [value]
            if not entries:
                message = f"{where}: no commands given"
                raise CommandConfigError(message)
            commands.extend(
                FixtureCommand(category, str(alias), _to_argv(entry, where=where))
                for entry in cast("list[object]", entries)
            )
    return tuple(commands)


def load_command_config(
    path: str | Path,
    *,
    file_handler: FileHandler | None = None,
) -> tuple[FixtureCommand, ...]:
    """Read the command file at ``path``."""
    handler = file_handler or FileHandler()
    return parse_command_config(handler.read_yaml(path))


class FixtureCommandRunner(BaseComponent):
    """Run fixture commands one after another and collect their outcomes."""

    def __init__(
        self,
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> None:
        """Store the working directory and per-command timeout."""
        super().__init__()
        self._cwd = cwd
        self._timeout = timeout

    def run(self, command: FixtureCommand) -> CheckOutcome:
        """Run one command and capture its output."""
        self.logger.info(
            "Running fixture command",
            alias=command.alias,
            argv=command.argv,
        )
        started = time.perf_counter()
        try:
            completed = subprocess.run(  # noqa: S603 - argv from the command file
                command.argv,
                cwd=self._cwd,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as exc:
            raise CommandRunError(command, f"timed out after {exc.timeout}s") from exc
        except OSError as exc:
            raise CommandRunError(command, exc.strerror or str(exc)) from exc

        outcome = CheckOutcome(
            command=command,
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            duration=time.perf_counter() - started,
        )
        self.logger.info(
            "Fixture command finished",
            alias=command.alias,
            returncode=outcome.returncode,
        )
        return outcome

    def run_all(
        self,
        commands: Iterable[FixtureCommand],
        *,
        categories: Iterable[CommandCategory] = CATEGORIES,
    ) -> list[CheckOutcome]:
        """Run the commands of the selected categories in declaration order."""
        selected = set(categories)
        return [
            self.run(command) for command in commands if command.category in selected
        ]
