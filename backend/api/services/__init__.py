"""Services for story generation."""

from .story_service import StoryService, CharacterNotFoundError

__all__ = ["StoryService", "CharacterNotFoundError"]
