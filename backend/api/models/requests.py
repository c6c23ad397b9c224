"""Pydantic models for API requests."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from backend.config import STORY_CONSTANTS
from backend.core.vocabulary import (
    Animal,
    CharacterAbility,
    CharacterAccessory,
    CharacterColor,
    CharacterEyes,
    CharacterPattern,
    CharacterPersonality,
    CharacterSize,
    Theme,
)


class ApiModel(BaseModel):
    """Accepts both camelCase (wire) and snake_case field names."""

    model_config = ConfigDict(populate_by_name=True)


class IllustrationRequest(ApiModel):
    """An illustration to anchor in the story. Position is a paragraph index."""

    src: str = Field(..., min_length=1, max_length=2048)
    alt: str = Field(default="", max_length=500)
    position: Optional[int] = Field(
        default=None,
        description="Paragraph index to show the image after. Omit to place automatically.",
    )


class CreateStoryRequest(ApiModel):
    """Request body for generating and saving a new story."""

    child_name: str = Field(
        ...,
        alias="childName",
        min_length=STORY_CONSTANTS["child_name_min_length"],
        max_length=STORY_CONSTANTS["child_name_max_length"],
        description="The child's name, used verbatim in the story",
        examples=["Mia"],
    )
    animal: Animal = Field(..., examples=["owl"])
    theme: Theme = Field(..., examples=["courage"])
    character_id: Optional[int] = Field(
        default=None,
        alias="characterId",
        description="Saved character to star in the story. Its base animal replaces `animal`.",
    )
    illustrations: list[IllustrationRequest] = Field(default_factory=list, max_length=20)


class AppearanceModel(ApiModel):
    eyes: CharacterEyes
    size: CharacterSize
    pattern: CharacterPattern


class CustomizationModel(ApiModel):
    """Character customization chosen on the creation screen."""

    color: CharacterColor
    accessories: list[CharacterAccessory] = Field(
        default_factory=list, max_length=STORY_CONSTANTS["max_accessories"]
    )
    personality: CharacterPersonality
    special_ability: CharacterAbility = Field(..., alias="specialAbility")
    appearance: AppearanceModel


class CreateCharacterRequest(ApiModel):
    """Request body for creating a character."""

    name: str = Field(..., min_length=1, max_length=50)
    base_animal: Animal = Field(..., alias="baseAnimal")
    customization: Optional[CustomizationModel] = None


class UpdateCharacterRequest(ApiModel):
    """Partial character update. Only fields that are sent are changed."""

    name: Optional[str] = Field(default=None, min_length=1, max_length=50)
    base_animal: Optional[Animal] = Field(default=None, alias="baseAnimal")
    customization: Optional[CustomizationModel] = None
