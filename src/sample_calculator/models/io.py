"""Input/output models for the interfaces."""

from pydantic import BaseModel, Field


class WelcomeMessage(BaseModel):
    """Message shown when the CLI runs without a command."""

    message: str = Field(
        default="Welcome to Sample Calculator!",
        description="Greeting printed to the console",
    )
    hint: str = Field(
        default="Type --help for more information",
        description="Usage hint printed after the greeting",
    )


class CalculationResult(BaseModel):
    """Outcome of a single arithmetic command."""

    operation: str
    operands: list[int]
    value: int

    def render(self) -> str:
        """Return the console line for the result."""
        return f"Result: {self.value}"
