"""
Input validation for story generation.

Form data reaches the generator as plain strings; these helpers coerce it into
a GenerationInput and re-check a constructed one before it is used.
"""

import re
from dataclasses import replace
from typing import Any, Optional, Union

from backend.config import STORY_CONSTANTS

from .errors import ValidationError
from .types import CharacterCustomization, GenerationInput
from .vocabulary import Animal, Theme

# Newlines and other control characters would break paragraph splitting
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


def validate_child_name(child_name: Any) -> str:
    """Return the trimmed name or raise ValidationError."""
    if not isinstance(child_name, str):
        raise ValidationError("Child name must be a string", field="child_name")

    name = child_name.strip()
    min_length = STORY_CONSTANTS["child_name_min_length"]
    max_length = STORY_CONSTANTS["child_name_max_length"]

    if not name:
        raise ValidationError("Child name must not be empty", field="child_name")
    if len(name) < min_length:
        raise ValidationError(
            f"Child name must be at least {min_length} characters", field="child_name"
        )
    if len(name) > max_length:
        raise ValidationError(
            f"Child name must be at most {max_length} characters", field="child_name"
        )
    if _CONTROL_CHARS.search(name):
        raise ValidationError(
            "Child name must not contain line breaks or control characters",
            field="child_name",
        )
    return name


def parse_animal(animal: Union[str, Animal]) -> Animal:
    """Coerce a string into the Animal vocabulary."""
    try:
        return Animal(animal)
    except ValueError:
        raise ValidationError(f"Unknown animal: {animal!r}", field="animal") from None


def parse_theme(theme: Union[str, Theme]) -> Theme:
    """Coerce a string into the Theme vocabulary."""
    try:
        return Theme(theme)
    except ValueError:
        raise ValidationError(f"Unknown theme: {theme!r}", field="theme") from None


def validate_character(character: Optional[CharacterCustomization]) -> None:
    if character is None:
        return
    max_accessories = STORY_CONSTANTS["max_accessories"]
    if len(character.accessories) > max_accessories:
        raise ValidationError(
            f"A character can wear at most {max_accessories} accessories",
            field="character.accessories",
        )


def parse_generation_input(
    child_name: str,
    animal: Union[str, Animal],
    theme: Union[str, Theme],
    character: Optional[CharacterCustomization] = None,
) -> GenerationInput:
    """
    Build a GenerationInput from raw form values.

    Raises:
        ValidationError: If the name is out of bounds or animal/theme are not
            in their vocabularies.
    """
    generation_input = GenerationInput(
        child_name=validate_child_name(child_name),
        animal=parse_animal(animal),
        theme=parse_theme(theme),
        character=character,
    )
    validate_character(character)
    return generation_input


def validate_generation_input(generation_input: GenerationInput) -> GenerationInput:
    """
    Re-check an already constructed input.

    Returns an equivalent input with the name trimmed and animal/theme coerced
    to their enums, so callers that built a GenerationInput from plain strings
    still get the same story.
    """
    validate_character(generation_input.character)
    return replace(
        generation_input,
        child_name=validate_child_name(generation_input.child_name),
        animal=parse_animal(generation_input.animal),
        theme=parse_theme(generation_input.theme),
    )
