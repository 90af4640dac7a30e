from __future__ import annotations

from typing import Optional


class FrameRevError(Exception):
    """Base class for every error raised by framerev."""


class ConfigError(FrameRevError, ValueError):
    """A supplied parameter is not a positive integer."""

    def __init__(self, message: str, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class FatalInputError(FrameRevError, RuntimeError):
    """The source image cannot be used (unreadable, or smaller than a frame)."""


class InternalConsistencyError(FrameRevError, RuntimeError):
    """A computed rectangle falls outside a pixel buffer."""


class OutputError(FrameRevError, RuntimeError):
    """The destination image cannot be written."""
