"""Exceptions raised by the story generation core."""

from typing import Optional


class StoryGenerationError(Exception):
    """Base class for story generation failures."""


class ValidationError(StoryGenerationError, ValueError):
    """Generation input violates its contract (bad name, unknown animal or theme)."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class ConfigurationError(StoryGenerationError, RuntimeError):
    """The template registry and the theme vocabulary are out of sync.

    This is a programming defect, never a transient condition; callers should
    not retry.
    """
