"""In-memory repository for stories and characters.

Records live in process-local dicts keyed by integer ids that start at 1.
Nothing survives a restart.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from ..models.requests import CustomizationModel
from ..models.responses import CharacterResponse, StoryMetadataResponse, StoryResponse


class StoryRepository:
    """Repository for story and character persistence operations."""

    def __init__(self):
        self._stories: dict[int, StoryResponse] = {}
        self._characters: dict[int, CharacterResponse] = {}
        self._next_story_id = 1
        self._next_character_id = 1

    # -------------------------------------------------------------------------
    # Stories
    # -------------------------------------------------------------------------

    async def create_story(
        self,
        child_name: str,
        animal: str,
        theme: str,
        content: str,
        metadata: dict[str, Any],
        character_id: Optional[int] = None,
    ) -> StoryResponse:
        """Save a generated story and assign its id."""
        story = StoryResponse(
            id=self._next_story_id,
            child_name=child_name,
            animal=animal,
            theme=theme,
            content=content,
            character_id=character_id,
            metadata=StoryMetadataResponse.model_validate(metadata),
        )
        self._stories[story.id] = story
        self._next_story_id += 1
        return story

    async def get_story(self, story_id: int) -> Optional[StoryResponse]:
        return self._stories.get(story_id)

    async def list_stories(self) -> list[StoryResponse]:
        """All stories in creation order."""
        return list(self._stories.values())

    # -------------------------------------------------------------------------
    # Characters
    # -------------------------------------------------------------------------

    async def create_character(
        self,
        name: str,
        base_animal: str,
        customization: Optional[CustomizationModel] = None,
    ) -> CharacterResponse:
        """Save a character, assigning its id and creation time."""
        character = CharacterResponse(
            id=self._next_character_id,
            name=name,
            base_animal=base_animal,
            created_at=datetime.now(timezone.utc),
            customization=customization,
        )
        self._characters[character.id] = character
        self._next_character_id += 1
        return character

    async def get_character(self, character_id: int) -> Optional[CharacterResponse]:
        return self._characters.get(character_id)

    async def list_characters(self) -> list[CharacterResponse]:
        return list(self._characters.values())

    async def update_character(
        self, character_id: int, updates: dict[str, Any]
    ) -> Optional[CharacterResponse]:
        """
        Apply a partial update.

        Args:
            character_id: Character to update
            updates: Field name to new value, snake_case; id and created_at
                are never changed

        Returns:
            The updated character, or None if it doesn't exist
        """
        character = self._characters.get(character_id)
        if character is None:
            return None

        allowed = {k: v for k, v in updates.items() if k not in ("id", "created_at")}
        updated = CharacterResponse.model_validate({**character.model_dump(), **allowed})
        self._characters[character_id] = updated
        return updated

    async def delete_character(self, character_id: int) -> bool:
        """Delete a character. Returns False if it didn't exist."""
        return self._characters.pop(character_id, None) is not None
