"""
Story assembler.

Turns a GenerationInput and a chosen StoryTemplate into finished prose:
1. Select a template for the theme (first registered, or rng.choice when an
   explicit random.Random is passed)
2. Build substitution variables, including the theme's phrase bank beats
3. Render each slot and join them with the paragraph delimiter in slot order
"""

import logging
import random
from typing import Optional, Sequence

from backend.config import PARAGRAPH_DELIMITER

from ..types import CharacterCustomization, GenerationInput, StoryTemplate
from .phrase_bank import PHRASE_KEYS, phrases_for

logger = logging.getLogger(__name__)


def capitalize_first(word: str) -> str:
    """Uppercase the first letter and leave the rest unchanged."""
    return word[:1].upper() + word[1:]


def with_article(phrase: str) -> str:
    """Prefix 'a' or 'an' based on the phrase's first letter."""
    article = "an" if phrase[:1].lower() in "aeiou" else "a"
    return f"{article} {phrase}"


def join_words(items: Sequence[str]) -> str:
    """'a', 'a and b', 'a, b and c'."""
    if len(items) <= 1:
        return "".join(items)
    return f"{', '.join(items[:-1])} and {items[-1]}"


def select_template(
    templates: Sequence[StoryTemplate],
    rng: Optional[random.Random] = None,
) -> StoryTemplate:
    """
    Pick one template from a theme's registered templates.

    Without an rng the first registered template is always used, so output is
    reproducible. With an rng the pick is rng.choice(templates); pass a seeded
    random.Random to make it reproducible too.
    """
    if not templates:
        raise ValueError("No templates to select from")
    if rng is None:
        return templates[0]
    return rng.choice(list(templates))


def build_variables(generation_input: GenerationInput) -> dict[str, str]:
    """Substitution variables for every slot of a template."""
    animal = generation_input.animal.value
    variables = {
        "child_name": generation_input.child_name,
        "animal": animal,
        "Animal": capitalize_first(animal),
        "the_animal": f"the {animal}",
        "The_animal": f"The {animal}",
    }

    phrases = phrases_for(generation_input.theme)
    base = dict(variables)
    for key in PHRASE_KEYS:
        variables[key] = phrases[key].format(**base)
    return variables


def describe_character(character: CharacterCustomization, variables: dict[str, str]) -> str:
    """Paragraph introducing a customized character's looks and talents."""
    name = variables["Animal"]
    animal = variables["animal"]
    sentences = [f"{name} was no ordinary {animal}."]

    appearance = character.appearance
    size = appearance.size if appearance else ""
    details = []
    if appearance and appearance.pattern:
        details.append(with_article(f"{appearance.pattern} coat"))
    if appearance and appearance.eyes:
        details.append(f"{appearance.eyes} eyes")

    looks = [part for part in (size, character.color) if part]
    if looks or details:
        words = " ".join(looks + [animal])
        description = f"{name} was {with_article(words)}"
        if details:
            description += f" with {join_words(details)}"
        sentences.append(description + ".")

    if character.personality:
        sentences.append(
            f"Everyone knew {name} as the most {character.personality} friend in the whole land."
        )
    if character.accessories:
        sentences.append(
            f"{name} never went anywhere without {join_words([f'its {a}' for a in character.accessories])}."
        )
    if character.special_ability:
        sentences.append(
            f"And best of all, {name} had a secret talent: {character.special_ability}."
        )
    return " ".join(sentences)


def render_paragraphs(generation_input: GenerationInput, template: StoryTemplate) -> list[str]:
    """Render a template's slots in order, adding the character paragraph if any."""
    variables = build_variables(generation_input)
    paragraphs = [slot.text.format(**variables) for slot in template.slots]

    if generation_input.character is not None:
        # Right after the introduction, before the trouble starts
        paragraphs.insert(1, describe_character(generation_input.character, variables))

    logger.debug(
        "Rendered template %s into %d paragraphs", template.template_id, len(paragraphs)
    )
    return paragraphs


def join_paragraphs(paragraphs: Sequence[str]) -> str:
    return PARAGRAPH_DELIMITER.join(paragraphs)


def assemble(generation_input: GenerationInput, template: StoryTemplate) -> str:
    """Render and join a template into story content."""
    return join_paragraphs(render_paragraphs(generation_input, template))
