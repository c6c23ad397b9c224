"""Story service for generation and persistence."""

import time

from backend.core.programs.story_generator import StoryGenerator
from backend.core.types import CharacterCustomization, StoryImage
from backend.core.validation import parse_generation_input

from ..database.repository import StoryRepository
from ..logging import story_logger
from ..models.requests import CreateStoryRequest
from ..models.responses import StoryResponse


class CharacterNotFoundError(LookupError):
    """A story request referenced a character that doesn't exist."""

    def __init__(self, character_id: int):
        super().__init__(f"Character {character_id} not found")
        self.character_id = character_id


class StoryService:
    """Service for generating stories and handing them to the repository."""

    def __init__(self, repo: StoryRepository, generator: StoryGenerator):
        self.repo = repo
        self.generator = generator

    async def create_story(self, request: CreateStoryRequest) -> StoryResponse:
        """
        Generate a story and save it.

        When the request names a character, the character's base animal stars
        in the story and its customization enriches the text.

        Returns:
            The saved story with its assigned id.

        Raises:
            CharacterNotFoundError: If character_id doesn't exist
            ValidationError: If the input fails the generator's checks
        """
        animal = request.animal
        character = None
        if request.character_id is not None:
            saved = await self.repo.get_character(request.character_id)
            if saved is None:
                raise CharacterNotFoundError(request.character_id)
            animal = saved.base_animal
            if saved.customization is not None:
                character = CharacterCustomization.from_dict(
                    saved.customization.model_dump(mode="json", by_alias=True)
                )

        story_logger.generation_started(theme=request.theme.value, animal=animal.value)
        started = time.perf_counter()
        stage = "validate"
        try:
            generation_input = parse_generation_input(
                request.child_name, animal, request.theme, character
            )
            stage = "generate"
            story = self.generator.generate(
                generation_input,
                illustrations=[
                    StoryImage(src=image.src, alt=image.alt, position=image.position)
                    for image in request.illustrations
                ],
            )
        except Exception as e:
            story_logger.generation_failed(e, stage=stage)
            raise

        saved_story = await self.repo.create_story(
            child_name=generation_input.child_name,
            animal=generation_input.animal.value,
            theme=generation_input.theme.value,
            content=story.content,
            metadata=story.metadata.to_dict(),
            character_id=request.character_id,
        )
        story_logger.generation_completed(
            story_id=saved_story.id,
            template_id=story.template_id,
            word_count=story.metadata.word_count,
            duration=time.perf_counter() - started,
        )
        return saved_story
