"""Word count and reading time derived from finished story content."""

import math
from typing import Sequence

from backend.config import WORDS_PER_MINUTE

from ..types import StoryImage, StoryMetadata


def count_words(content: str) -> int:
    """Number of maximal whitespace-separated tokens."""
    return len(content.split())


def reading_time(word_count: int, wpm: int = WORDS_PER_MINUTE) -> int:
    """Minutes to read aloud, rounded up, never less than 1."""
    return max(1, math.ceil(word_count / wpm))


def build_metadata(content: str, images: Sequence[StoryImage] = ()) -> StoryMetadata:
    word_count = count_words(content)
    return StoryMetadata(
        word_count=word_count,
        reading_time=reading_time(word_count),
        images=tuple(images),
    )
