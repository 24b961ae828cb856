"""Entry point for the sample calculator CLI."""

from sample_calculator.interfaces.cli import CLIInterface
from sample_calculator.utils.logger import configure_logging


def main() -> None:
    """Configure logging and run the command line interface."""
    configure_logging()
    CLIInterface().run()


if __name__ == "__main__":
    main()
