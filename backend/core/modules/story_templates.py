"""
Story template registry.

Maps every theme to an ordered list of narrative templates. A template is a
fixed sequence of paragraph slots (introduction, rising action, thematic turn,
resolution, ...); each slot is a format string over the substitution
variables plus the theme's beats from the phrase bank.

The registry is checked against the Theme vocabulary by verify_registry(),
which the API runs at startup and the test suite runs on import.
"""

import logging
from types import MappingProxyType
from typing import Mapping, Optional

from backend.config import STORY_CONSTANTS

from ..errors import ConfigurationError
from ..types import Slot, StoryTemplate
from ..vocabulary import Theme
from .phrase_bank import PHRASE_BANK, PHRASE_KEYS

logger = logging.getLogger(__name__)

# Variables every slot may reference besides the phrase bank keys
BASE_VARIABLES = frozenset({"child_name", "animal", "Animal", "the_animal", "The_animal"})
ANIMAL_VARIABLES = frozenset({"animal", "Animal", "the_animal", "The_animal"})
KNOWN_VARIABLES = BASE_VARIABLES | frozenset(PHRASE_KEYS)


# =============================================================================
# Slot sequences
# =============================================================================

EVENING_WALK_SLOTS = (
    Slot(
        name="introduction",
        text=(
            "Once upon a time, in a cozy house at the end of a winding lane, there lived "
            "a child named {child_name}. Every evening, {child_name} went exploring with "
            "a best friend, a gentle {animal} called {Animal}."
        ),
    ),
    Slot(
        name="rising_action",
        text=(
            "One golden evening, {child_name} and {the_animal} set off toward {place}. "
            "The air smelled of clover and the first stars were just beginning to peek "
            "out. But when they arrived, they saw that {problem}."
        ),
    ),
    Slot(
        name="turn",
        text=(
            "{child_name} looked at {Animal}, and {Animal} looked back. They both knew "
            "what to do. {turn}."
        ),
    ),
    Slot(
        name="resolution",
        text=(
            "{resolution}. {Animal} gave a happy little wiggle, and {child_name} laughed "
            "until the stars twinkled back."
        ),
    ),
    Slot(
        name="closing",
        text=(
            "As they walked home beneath the moon, {child_name} yawned and whispered, "
            "\"Today we learned that {lesson}.\" {The_animal} curled up at the foot of "
            "the bed, and soon they were both fast asleep. The end."
        ),
    ),
)

MOONLIT_ADVENTURE_SLOTS = (
    Slot(
        name="introduction",
        text=(
            "When the moon rose high and silver over the sleepy town, {child_name} heard "
            "a soft tap at the window. It was {Animal} the {animal}, ready for a "
            "night-time adventure."
        ),
    ),
    Slot(
        name="rising_action",
        text=(
            "They tiptoed out past the sleeping garden all the way to {place}. There, in "
            "the quiet moonlight, they discovered that {problem}."
        ),
    ),
    Slot(
        name="turn",
        text="{turn}. Little by little, everything began to change.",
    ),
    Slot(
        name="resolution",
        text=(
            "{resolution}. Snuggled back under the covers, {child_name} smiled and "
            "remembered that {lesson}. Goodnight, {child_name}. Goodnight, {Animal}."
        ),
    ),
)


def _templates_for_theme(theme: Theme) -> tuple[StoryTemplate, ...]:
    return (
        StoryTemplate(f"{theme.value}-evening-walk", theme, EVENING_WALK_SLOTS),
        StoryTemplate(f"{theme.value}-moonlit-adventure", theme, MOONLIT_ADVENTURE_SLOTS),
    )


# Registration order is the selection order for deterministic generation
TEMPLATE_REGISTRY: Mapping[Theme, tuple[StoryTemplate, ...]] = MappingProxyType({
    theme: _templates_for_theme(theme) for theme in Theme
})


def templates_for(
    theme: Theme,
    registry: Optional[Mapping[Theme, tuple[StoryTemplate, ...]]] = None,
) -> tuple[StoryTemplate, ...]:
    """
    Get the registered templates for a theme, in registration order.

    Raises:
        ConfigurationError: If the theme has no registered template.
    """
    registry = TEMPLATE_REGISTRY if registry is None else registry
    templates = registry.get(theme)
    if not templates:
        raise ConfigurationError(f"No story template registered for theme {theme!r}")
    return tuple(templates)


def get_template(template_id: str) -> StoryTemplate:
    """Find a template by id across all themes."""
    for templates in TEMPLATE_REGISTRY.values():
        for template in templates:
            if template.template_id == template_id:
                return template
    raise KeyError(template_id)


def _check_template(template: StoryTemplate, theme: Theme) -> None:
    if template.theme != theme:
        raise ConfigurationError(
            f"Template {template.template_id} is registered under {theme.value} "
            f"but declares theme {template.theme.value}"
        )

    min_slots = STORY_CONSTANTS["min_template_slots"]
    max_slots = STORY_CONSTANTS["max_template_slots"]
    if not min_slots <= template.slot_count <= max_slots:
        raise ConfigurationError(
            f"Template {template.template_id} has {template.slot_count} slots, "
            f"expected {min_slots}-{max_slots}"
        )

    referenced = set()
    for slot in template.slots:
        if not slot.text.strip():
            raise ConfigurationError(f"Template {template.template_id} has an empty {slot.name} slot")
        unknown = slot.placeholders - KNOWN_VARIABLES
        if unknown:
            raise ConfigurationError(
                f"Template {template.template_id} slot {slot.name} uses unknown "
                f"variables: {sorted(unknown)}"
            )
        referenced |= slot.placeholders

    if "child_name" not in referenced or not referenced & ANIMAL_VARIABLES:
        raise ConfigurationError(
            f"Template {template.template_id} must mention both the child and the animal"
        )


def verify_registry(
    registry: Optional[Mapping[Theme, tuple[StoryTemplate, ...]]] = None,
    phrase_bank: Optional[Mapping[Theme, Mapping[str, str]]] = None,
) -> None:
    """
    Check that every theme has templates and phrases that can be rendered.

    Raises:
        ConfigurationError: On the first inconsistency found.
    """
    registry = TEMPLATE_REGISTRY if registry is None else registry
    phrase_bank = PHRASE_BANK if phrase_bank is None else phrase_bank

    for theme in Theme:
        for template in templates_for(theme, registry):
            _check_template(template, theme)

        phrases = phrase_bank.get(theme)
        if phrases is None:
            raise ConfigurationError(f"No phrase bank entry for theme {theme.value}")

        missing = [key for key in PHRASE_KEYS if not phrases.get(key, "").strip()]
        if missing:
            raise ConfigurationError(f"Phrase bank for {theme.value} is missing {missing}")

        for key in PHRASE_KEYS:
            unknown = Slot(key, phrases[key]).placeholders - BASE_VARIABLES
            if unknown:
                raise ConfigurationError(
                    f"Phrase {theme.value}.{key} uses unknown variables: {sorted(unknown)}"
                )

    logger.debug("Template registry verified for %d themes", len(Theme))
