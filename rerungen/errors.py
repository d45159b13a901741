"""
Error kinds raised while generating runners.

DirectoryNotFound, OutputPrepError and UnknownFlavor abort the whole run.
SourceReadError and RenderError are scoped to one rerun list or one runner
and are recorded in the GenerationResult instead of propagating.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class RerunGenError(Exception):
    """Base class for all generation errors."""

    fatal = True

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    @property
    def kind(self) -> str:
        return type(self).__name__

    def __str__(self) -> str:
        return self.message


class DirectoryNotFound(RerunGenError, FileNotFoundError):
    """The rerun-list source directory is missing or not a directory."""


class OutputPrepError(RerunGenError, OSError):
    """The output directory could not be created or cleared."""


class UnknownFlavor(RerunGenError, ValueError):
    """The configured runner flavor is missing or not registered."""


class SourceReadError(RerunGenError):
    """One rerun list could not be read."""

    fatal = False


class RenderError(RerunGenError):
    """One runner could not be rendered or written."""

    fatal = False


__all__ = [
    "RerunGenError",
    "DirectoryNotFound",
    "OutputPrepError",
    "UnknownFlavor",
    "SourceReadError",
    "RenderError",
]
