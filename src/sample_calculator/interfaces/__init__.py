"""User-facing interfaces for the sample calculator."""

from .base import BaseInterface
from .cli import CLIInterface

__all__ = ["BaseInterface", "CLIInterface"]
