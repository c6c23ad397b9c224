"""
Bedtime story generator.

Template-first workflow:
1. Re-validate the input (name bounds, animal and theme vocabularies)
2. Look up the theme's templates and select one
3. Assemble the slots into paragraphs, with the character paragraph if any
4. Anchor supplied illustrations to valid paragraph indices
5. Compute word count and reading time

Generation is a pure function of its arguments. Randomness only enters
through an explicitly passed random.Random.
"""

import logging
import random
from typing import Optional, Sequence

from ..modules.assembler import join_paragraphs, render_paragraphs, select_template
from ..modules.image_anchors import anchor_images
from ..modules.metadata import build_metadata
from ..modules.story_templates import templates_for
from ..types import GeneratedStory, GenerationInput, StoryImage
from ..validation import validate_generation_input

logger = logging.getLogger(__name__)


def generate_story(
    generation_input: GenerationInput,
    rng: Optional[random.Random] = None,
    illustrations: Sequence[StoryImage] = (),
) -> GeneratedStory:
    """
    Generate a story for one request.

    Args:
        generation_input: Child name, animal, theme and optional character
        rng: Template selection source. None selects the first registered
            template, so identical inputs give byte-identical content.
        illustrations: Optional illustration descriptors to anchor

    Returns:
        GeneratedStory with content and metadata

    Raises:
        ValidationError: If the input violates its contract
        ConfigurationError: If the theme has no registered template
    """
    generation_input = validate_generation_input(generation_input)
    template = select_template(templates_for(generation_input.theme), rng)

    paragraphs = render_paragraphs(generation_input, template)
    content = join_paragraphs(paragraphs)
    images = anchor_images(len(paragraphs), illustrations)
    metadata = build_metadata(content, images)

    logger.debug(
        "Generated %s story with template %s: %d words, %d images",
        generation_input.theme.value,
        template.template_id,
        metadata.word_count,
        len(images),
    )
    return GeneratedStory(content=content, metadata=metadata, template_id=template.template_id)


def known_outputs(generation_input: GenerationInput) -> frozenset[str]:
    """Every content string the registered templates can produce for an input."""
    generation_input = validate_generation_input(generation_input)
    return frozenset(
        join_paragraphs(render_paragraphs(generation_input, template))
        for template in templates_for(generation_input.theme)
    )


class StoryGenerator:
    """
    Reusable generator holding a template selection policy.

    Args:
        rng: Optional random.Random for template selection. Leave as None for
            deterministic output; pass random.Random(seed) for reproducible
            variety.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng

    @classmethod
    def from_seed(cls, seed: Optional[int]) -> "StoryGenerator":
        """Deterministic generator for None, seeded random selection otherwise."""
        return cls(rng=None if seed is None else random.Random(seed))

    def generate(
        self,
        generation_input: GenerationInput,
        illustrations: Sequence[StoryImage] = (),
    ) -> GeneratedStory:
        return generate_story(generation_input, rng=self.rng, illustrations=illustrations)

    def __call__(self, generation_input: GenerationInput) -> GeneratedStory:
        return self.generate(generation_input)
