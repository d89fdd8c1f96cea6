# slicer/core/errors.py
from __future__ import annotations
from pathlib import Path
from typing import Optional, Union


class SlicerError(Exception):
    """Base class for errors that stop a run."""


class ConfigError(SlicerError):
    pass


class MissingInputError(SlicerError):
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(f"No such file or directory: {self.path}")


class MalformedDocumentError(SlicerError):
    def __init__(self, path: Union[str, Path], reason: str, line: Optional[int] = None):
        self.path = Path(path)
        self.reason = reason
        self.line = line
        where = f"{self.path}:{line}" if line else str(self.path)
        super().__init__(f"{where}: {reason}")
