"""CLI interface implementation using Typer."""

from pathlib import Path
from typing import Annotated, Any, Sequence

import typer
from rich.console import Console
from rich.table import Table

from sample_calculator.calculator import Calculator, CalculatorError
from sample_calculator.models.io import CalculationResult, WelcomeMessage
from sample_calculator.utils.settings import MAX_INT_BITS, get_calculator_settings
from sample_calculator.workflow import (
    CATEGORIES,
    CheckOutcome,
    CommandCategory,
    CommandRunError,
    FixtureCommandRunner,
    load_command_config,
)

from .base import BaseInterface

# Force terminal mode even in non-TTY environments
console = Console(force_terminal=True, force_interactive=False)

# Lets negative operands such as ``-5`` through as arguments.
_NUMERIC_CONTEXT: dict[str, Any] = {"ignore_unknown_options": True}


class CLIInterface(BaseInterface):
    """Command Line Interface implementation."""

    def __init__(self, calculator: Calculator | None = None) -> None:
        """Initialize the CLI interface."""
        super().__init__()
        self._calculator = calculator or Calculator()
        self._json_output = False
        self.app = typer.Typer(
            name="sample-calculator",
            help="Sample calculator fixture CLI",
            add_completion=False,
        )
        self._setup_commands()

    @property
    def name(self) -> str:
        """Get the interface name.

        Returns:
            str: The interface name

        """
        return "CLI"

    def _setup_commands(self) -> None:
        """Set up CLI commands."""
        self.app.command(name="welcome")(self.welcome)
        for command_name in ("add", "subtract", "multiply", "divide", "power"):
            self.app.command(name=command_name, context_settings=_NUMERIC_CONTEXT)(
                getattr(self, command_name),
            )
        self.app.command(name="status")(self.status)
        self.app.command(name="classify", context_settings=_NUMERIC_CONTEXT)(
            self.classify,
        )
        self.app.command(name="check")(self.check)

        self.app.callback(invoke_without_command=True)(self._main_callback)

    def _main_callback(
        self,
        ctx: typer.Context,
        int_bits: Annotated[
            int | None,
            typer.Option(
                "--int-bits",
                min=0,
                max=MAX_INT_BITS,
                help="Wrap results to this signed integer width: 0 or 8 to 128.",
            ),
        ] = None,
        json_output: Annotated[
            bool,
            typer.Option("--json", help="Render results as JSON."),
        ] = False,
    ) -> None:
        """Apply global options and show the welcome message without a command."""
        if int_bits is not None:
            try:
                self._calculator = Calculator(int_bits=int_bits)
            except ValueError as exc:
                raise typer.BadParameter(str(exc), param_hint="--int-bits") from exc
        self._json_output = json_output
        if ctx.invoked_subcommand is None:
            self.welcome()
            raise typer.Exit(0)

    def welcome(self) -> None:
        """Display welcome message."""
        msg = WelcomeMessage()
        console.print(msg.message)
        console.print(msg.hint)
        console.file.flush()

    def _emit(self, operation: str, operands: Sequence[int], value: int) -> None:
        result = CalculationResult(
            operation=operation,
            operands=list(operands),
            value=value,
        )
        self.logger.info("Calculated result", operation=operation, value=value)
        if self._json_output:
            console.print_json(data=result.model_dump())
        else:
            console.print(result.render(), highlight=False)
        console.file.flush()

    def _fail(self, operation: str, exc: CalculatorError) -> None:
        self.logger.error("Calculation failed", operation=operation, error=str(exc))
        console.print(f"[red]Error: {exc}[/red]")
        console.file.flush()
        raise typer.Exit(1) from exc

    def add(
        self,
        a: Annotated[int, typer.Argument(help="First operand.")],
        b: Annotated[int, typer.Argument(help="Second operand.")],
    ) -> None:
        """Add two integers."""
        self._emit("add", (a, b), self._calculator.add(a, b))

    def subtract(
        self,
        a: Annotated[int, typer.Argument(help="Minuend.")],
        b: Annotated[int, typer.Argument(help="Subtrahend.")],
    ) -> None:
        """Subtract the second integer from the first."""
        self._emit("subtract", (a, b), self._calculator.subtract(a, b))

    def multiply(
        self,
        a: Annotated[int, typer.Argument(help="First factor.")],
        b: Annotated[int, typer.Argument(help="Second factor.")],
    ) -> None:
        """Multiply two integers."""
        self._emit("multiply", (a, b), self._calculator.multiply(a, b))

    def divide(
        self,
        a: Annotated[int, typer.Argument(help="Dividend.")],
        b: Annotated[int, typer.Argument(help="Divisor.")],
    ) -> None:
        """Divide two integers, truncating toward zero."""
        try:
            value = self._calculator.divide(a, b)
        except CalculatorError as exc:
            self._fail("divide", exc)
            return
        self._emit("divide", (a, b), value)

    def power(
        self,
        base: Annotated[int, typer.Argument(help="Base.")],
        exponent: Annotated[int, typer.Argument(help="Non-negative exponent.")],
    ) -> None:
        """Raise an integer to a non-negative power."""
        try:
            value = self._calculator.power(base, exponent)
        except CalculatorError as exc:
            self._fail("power", exc)
            return
        self._emit("power", (base, exponent), value)

    def status(
        self,
        code: Annotated[int, typer.Argument(help="HTTP-like status code.")],
    ) -> None:
        """Print the label of a status code."""
        console.print(self._calculator.status_label(code), highlight=False)
        console.file.flush()

    def classify(
        self,
        value: Annotated[int, typer.Argument(help="Value to classify.")],
    ) -> None:
        """Report whether a value is positive."""
        self._calculator.classify_and_report(value, stream=console.file)
        console.file.flush()

    def check(
        self,
        category: Annotated[
            str | None,
            typer.Argument(help="Run only 'lint' or 'tests' commands."),
        ] = None,
        config_path: Annotated[
            Path | None,
            typer.Option(
                "--config",
                "-c",
                dir_okay=False,
                help="YAML file declaring the fixture's lint and test commands.",
            ),
        ] = None,
        project_path: Annotated[
            Path | None,
            typer.Option(
                "--path",
                "-p",
                exists=True,
                file_okay=False,
                dir_okay=True,
                help="Directory the commands run in.",
            ),
        ] = None,
        timeout: Annotated[
            float | None,
            typer.Option("--timeout", help="Per-command timeout in seconds."),
        ] = None,
        strict: Annotated[
            bool,
            typer.Option("--strict", help="Exit with status 1 if any command fails."),
        ] = False,
        json_output: Annotated[
            bool,
            typer.Option("--json", help="Render the outcomes as JSON."),
        ] = False,
    ) -> None:
        """Run the lint and test commands configured for the fixture."""
        categories = self._select_categories(category)
        path = config_path or Path(get_calculator_settings().command_config_path)
        if not path.is_file():
            console.print(f"[red]Command configuration not found: {path}[/red]")
            console.file.flush()
            raise typer.Exit(1)

        try:
            commands = load_command_config(path)
        except ValueError as exc:
            self.logger.error("Invalid command configuration", path=str(path))
            console.print(f"[red]Invalid command configuration: {exc}[/red]")
            console.file.flush()
            raise typer.Exit(1) from exc

        self.logger.info(
            "Running fixture commands",
            categories=categories,
            config=str(path),
            project_path=str(project_path) if project_path else None,
        )
        try:
            runner = FixtureCommandRunner(cwd=project_path, timeout=timeout)
            outcomes = runner.run_all(commands, categories=categories)
        except CommandRunError as exc:
            self.logger.error("Command execution failed", error=str(exc))
            console.print(f"[red]{exc}[/red]")
            console.file.flush()
            raise typer.Exit(1) from exc

        self._render_outcomes(outcomes, as_json=json_output or self._json_output)

        if strict and not all(outcome.succeeded for outcome in outcomes):
            raise typer.Exit(1)

    def _select_categories(self, category: str | None) -> tuple[CommandCategory, ...]:
        if category is None:
            return CATEGORIES
        for candidate in CATEGORIES:
            if candidate == category:
                return (candidate,)
        msg = f"Category must be one of {', '.join(CATEGORIES)}."
        raise typer.BadParameter(msg)

    def _render_outcomes(
        self,
        outcomes: Sequence[CheckOutcome],
        *,
        as_json: bool,
    ) -> None:
        if as_json:
            console.print_json(data=[outcome.to_json() for outcome in outcomes])
            console.file.flush()
            return

        if not outcomes:
            console.print("[yellow]No fixture commands configured.[/yellow]")
            console.file.flush()
            return

        table = Table(show_header=True, header_style="bold cyan")
        table.add_column("Category", style="bold")
        table.add_column("Alias")
        table.add_column("Command")
        table.add_column("Exit code", justify="right")
        table.add_column("Duration", justify="right")

        for outcome in outcomes:
            code_style = "green" if outcome.succeeded else "red"
            table.add_row(
                outcome.command.category,
                outcome.command.alias,
                outcome.command.display(),
                f"[{code_style}]{outcome.returncode}[/{code_style}]",
                f"{outcome.duration:.2f}s",
            )

        console.print(table)
        console.file.flush()

    def run(self) -> None:
        """Run the CLI interface."""
        self.app()
