"""
Image anchor policy.

Illustrations are decorative: the display shows an image after the paragraph
whose index matches its position. This module keeps only the illustrations
that can anchor to a real paragraph and drops the rest without failing.
"""

import logging
from typing import Sequence

from ..types import StoryImage

logger = logging.getLogger(__name__)


def spread_positions(paragraph_count: int, count: int) -> list[int]:
    """
    Evenly spaced, distinct paragraph indices for `count` images.

    Returns at most `paragraph_count` indices; a story can't anchor more
    images than it has paragraphs.
    """
    count = min(count, paragraph_count)
    if count <= 0:
        return []
    return [(i * paragraph_count) // count for i in range(count)]


def _in_range(position, paragraph_count: int) -> bool:
    # bool is an int subclass but never a paragraph index
    return (
        isinstance(position, int)
        and not isinstance(position, bool)
        and 0 <= position < paragraph_count
    )


def anchor_images(
    paragraph_count: int,
    illustrations: Sequence[StoryImage],
) -> tuple[StoryImage, ...]:
    """
    Anchor illustrations to paragraph indices.

    Descriptors with an explicit position keep it when it falls inside
    [0, paragraph_count - 1] and are dropped otherwise. Descriptors without a
    position are spread evenly over the paragraphs no explicit image holds,
    so an unplaced image never shares a paragraph. Input order is preserved.

    Args:
        paragraph_count: Number of paragraphs in the story
        illustrations: Externally supplied illustration descriptors

    Returns:
        The anchored images, each with a valid position
    """
    taken = {
        image.position for image in illustrations
        if _in_range(image.position, paragraph_count)
    }
    free = [index for index in range(paragraph_count) if index not in taken]
    unplaced = [image for image in illustrations if image.position is None]
    free_positions = iter(free[i] for i in spread_positions(len(free), len(unplaced)))

    anchored = []
    for image in illustrations:
        if image.position is None:
            position = next(free_positions, None)
            if position is None:
                logger.debug("Dropping illustration %s: no paragraph left to anchor to", image.src)
                continue
            anchored.append(StoryImage(src=image.src, alt=image.alt, position=position))
        elif _in_range(image.position, paragraph_count):
            anchored.append(image)
        else:
            logger.debug(
                "Dropping illustration %s: position %r outside 0-%d",
                image.src, image.position, paragraph_count - 1,
            )
    return tuple(anchored)
