# Bedtime Story Generator - Core Domain

# Re-export types for convenient access
from .types import (
    CharacterAppearance,
    CharacterCustomization,
    GenerationInput,
    Slot,
    StoryTemplate,
    StoryImage,
    StoryMetadata,
    GeneratedStory,
)
from .errors import StoryGenerationError, ValidationError, ConfigurationError
from .vocabulary import Animal, Theme

__all__ = [
    "CharacterAppearance",
    "CharacterCustomization",
    "GenerationInput",
    "Slot",
    "StoryTemplate",
    "StoryImage",
    "StoryMetadata",
    "GeneratedStory",
    "StoryGenerationError",
    "ValidationError",
    "ConfigurationError",
    "Animal",
    "Theme",
]
