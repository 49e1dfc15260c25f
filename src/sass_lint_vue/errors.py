"""Error types raised while linting component files.

File-scoped errors (discovery, read, parse) are logged by the runner and never
stop a multi-file run. Configuration and engine errors propagate to the caller.
"""

from __future__ import annotations

from pathlib import Path


class SassLintVueError(Exception):
    """Base class for every error raised by this package."""


class FileError(SassLintVueError):
    """An error tied to a single input path."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class DiscoveryError(FileError):
    """An input path could not be traversed."""


class ReadError(FileError):
    """A component file could not be read."""


class ParseError(FileError):
    """The markup of a component file could not be parsed."""


class ConfigError(SassLintVueError):
    """A configuration file exists but does not hold valid settings."""


class EngineError(SassLintVueError):
    """The style-linting engine could not be run or returned unusable output."""
