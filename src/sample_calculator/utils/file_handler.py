"""File reading helpers used by configuration loaders."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from sample_calculator.base import BaseComponent


class FileHandler(BaseComponent):
    """Read text and YAML documents from disk."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        """Store the encoding used for every read."""
        super().__init__()
        self._encoding = encoding

    def read_text(self, path: str | Path) -> str:
        """Return the contents of a text file."""
        file_path = Path(path)
        self.logger.debug("Reading text file", path=str(file_path))
        return file_path.read_text(encoding=self._encoding)

    def read_yaml(self, path: str | Path) -> Any:
        """Parse a YAML file and return the loaded document.

        Empty documents load as ``None``.
        """
        content = self.read_text(path)
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            message = f"Failed to parse YAML file {path}: {exc}"
            raise ValueError(message) from exc
