"""Base interface definition."""

from abc import ABC, abstractmethod

from sample_calculator.base import BaseComponent


class BaseInterface(BaseComponent, ABC):
    """Abstract base for every user-facing interface."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Get the interface name."""

    @abstractmethod
    def run(self) -> None:
        """Run the interface."""
