"""Pydantic models for API requests and responses."""

from .requests import (
    CreateStoryRequest,
    IllustrationRequest,
    CreateCharacterRequest,
    UpdateCharacterRequest,
    CustomizationModel,
    AppearanceModel,
)
from .responses import (
    StoryResponse,
    StoryMetadataResponse,
    StoryImageResponse,
    CharacterResponse,
    VocabularyResponse,
)

__all__ = [
    "CreateStoryRequest",
    "IllustrationRequest",
    "CreateCharacterRequest",
    "UpdateCharacterRequest",
    "CustomizationModel",
    "AppearanceModel",
    "StoryResponse",
    "StoryMetadataResponse",
    "StoryImageResponse",
    "CharacterResponse",
    "VocabularyResponse",
]
