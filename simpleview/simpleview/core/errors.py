"""Error taxonomy for view rendering."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

ExecutionKind = Literal["template", "layout", "partial"]


class ViewError(Exception):
    """Base class for every error raised by simpleview."""


class InvalidArgument(ViewError, ValueError):
    """Raised when a placeholder name or content is not usable."""


class CaptureAlreadyActive(ViewError):
    """Raised when a capture is started while another one is still open."""

    def __init__(self, active: str, requested: str) -> None:
        super().__init__(
            f"You must end the current capture before starting a new one "
            f"({active!r} was still active when you tried to start {requested!r})"
        )
        self.active = active
        self.requested = requested


class NoActiveCapture(ViewError):
    """Raised when a capture is written to or ended while none is open."""

    def __init__(self, message: str = "Tried to end a placeholder capture that was never started") -> None:
        super().__init__(message)


class TemplateExecutionFailed(ViewError):
    """Raised when a template, layout or partial is missing or fails to run."""

    def __init__(self, path: Path, kind: ExecutionKind) -> None:
        super().__init__(f"Failed to execute {kind} {path}")
        self.path = path
        self.kind = kind


class CacheWriteFailed(ViewError):
    """Raised when a static cache file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not write static cache file {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(ViewError):
    """Raised when a configuration file cannot be loaded."""
