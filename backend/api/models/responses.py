"""Pydantic models for API responses."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from backend.core.vocabulary import Animal, Theme

from .requests import ApiModel, CustomizationModel


class StoryImageResponse(ApiModel):
    """An illustration anchored after the paragraph at `position`."""

    src: str
    alt: str
    position: int


class StoryMetadataResponse(ApiModel):
    """Derived story values."""

    word_count: int = Field(..., alias="wordCount")
    reading_time: int = Field(..., alias="readingTime")  # minutes
    images: list[StoryImageResponse] = Field(default_factory=list)


class StoryResponse(ApiModel):
    """A saved story. `content` paragraphs are separated by a blank line."""

    id: int
    child_name: str = Field(..., alias="childName")
    animal: Animal
    theme: Theme
    content: str
    character_id: Optional[int] = Field(default=None, alias="characterId")
    metadata: StoryMetadataResponse


class CharacterResponse(ApiModel):
    """A saved character."""

    id: int
    name: str
    base_animal: Animal = Field(..., alias="baseAnimal")
    created_at: datetime = Field(..., alias="createdAt")
    customization: Optional[CustomizationModel] = None


class VocabularyResponse(ApiModel):
    """Option lists for the story and character forms."""

    animals: list[str]
    themes: list[str]
    colors: list[str]
    eyes: list[str]
    sizes: list[str]
    patterns: list[str]
    accessories: list[str]
    personalities: list[str]
    abilities: list[str]
