"""Base classes shared by sample calculator components."""

from __future__ import annotations

from typing import Any

from sample_calculator.utils.logger import get_logger


class BaseComponent:
    """Base class providing a structured logger bound to the component name."""

    def __init__(self) -> None:
        """Initialise the component and bind its logger."""
        self._logger: Any = get_logger(self.__class__.__name__)

    @property
    def logger(self) -> Any:
        """Return the structlog logger for this component."""
        return self._logger
