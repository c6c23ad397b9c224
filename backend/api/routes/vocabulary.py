"""Form option lists."""

from fastapi import APIRouter

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
    values_of,
)

from ..models.responses import VocabularyResponse

router = APIRouter()


@router.get(
    "",
    response_model=VocabularyResponse,
    summary="List form options",
    description="Animals, themes and character options accepted by the story and character endpoints.",
)
async def get_vocabulary():
    return VocabularyResponse(
        animals=values_of(Animal),
        themes=values_of(Theme),
        colors=values_of(CharacterColor),
        eyes=values_of(CharacterEyes),
        sizes=values_of(CharacterSize),
        patterns=values_of(CharacterPattern),
        accessories=values_of(CharacterAccessory),
        personalities=values_of(CharacterPersonality),
        abilities=values_of(CharacterAbility),
    )
