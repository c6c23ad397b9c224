"""Tests for word count and reading time."""

import math

import pytest

from backend.config import WORDS_PER_MINUTE
from backend.core.modules.metadata import build_metadata, count_words, reading_time
from backend.core.types import StoryImage


class TestCountWords:
    """Tests for count_words."""

    def test_counts_whitespace_separated_tokens(self):
        assert count_words("Once upon a time") == 4

    def test_collapses_runs_of_whitespace(self):
        assert count_words("  Once\tupon \n\n a   time \n") == 4

    def test_punctuation_stays_attached(self):
        assert count_words('"Hello," said Mia.') == 3

    def test_empty_content(self):
        assert count_words("") == 0
        assert count_words(" \n\n ") == 0


class TestReadingTime:
    """Tests for reading_time."""

    def test_minimum_one_minute(self):
        assert reading_time(0) == 1
        assert reading_time(1) == 1

    @pytest.mark.parametrize("word_count", [199, 200, 201, 400, 401, 1000])
    def test_ceiling_division(self, word_count):
        assert reading_time(word_count) == math.ceil(word_count / WORDS_PER_MINUTE)

    def test_exact_boundaries(self):
        assert reading_time(200) == 1
        assert reading_time(201) == 2

    def test_custom_words_per_minute(self):
        assert reading_time(250, wpm=100) == 3


class TestBuildMetadata:
    """Tests for build_metadata."""

    def test_derives_values_from_content(self):
        metadata = build_metadata("one two three")
        assert metadata.word_count == 3
        assert metadata.reading_time == 1
        assert metadata.images == ()

    def test_keeps_images(self):
        image = StoryImage(src="/owl.png", alt="An owl", position=0)
        metadata = build_metadata("one two", [image])
        assert metadata.images == (image,)

    def test_wire_shape(self):
        image = StoryImage(src="/owl.png", alt="An owl", position=1)
        assert build_metadata("a b c", [image]).to_dict() == {
            "wordCount": 3,
            "readingTime": 1,
            "images": [{"src": "/owl.png", "alt": "An owl", "position": 1}],
        }
