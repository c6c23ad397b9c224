"""Storage module for stories and characters."""

from .repository import StoryRepository

__all__ = [
    "StoryRepository",
]
