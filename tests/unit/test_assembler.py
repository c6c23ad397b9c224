"""Tests for story assembly: template selection, substitution and joining."""

import random

import pytest

from backend.core.modules.assembler import (
    assemble,
    build_variables,
    capitalize_first,
    describe_character,
    join_words,
    render_paragraphs,
    select_template,
    with_article,
)
from backend.core.modules.story_templates import templates_for
from backend.core.types import CharacterCustomization, GenerationInput
from backend.core.vocabulary import Animal, Theme


class TestCapitalization:
    """Tests for the animal name forms."""

    def test_capitalize_first_only_touches_first_letter(self):
        assert capitalize_first("owl") == "Owl"
        assert capitalize_first("mcFox") == "McFox"

    def test_capitalize_empty(self):
        assert capitalize_first("") == ""

    def test_with_article(self):
        assert with_article("owl") == "an owl"
        assert with_article("small blue owl") == "a small blue owl"
        assert with_article("orange lion") == "an orange lion"

    def test_join_words(self):
        assert join_words([]) == ""
        assert join_words(["hat"]) == "hat"
        assert join_words(["hat", "cape"]) == "hat and cape"
        assert join_words(["hat", "cape", "wand"]) == "hat, cape and wand"


class TestSelectTemplate:
    """Tests for the template selection policy."""

    def test_without_rng_picks_first(self):
        templates = templates_for(Theme.SHARING)
        assert select_template(templates) is templates[0]

    def test_with_rng_picks_registered_template(self):
        templates = templates_for(Theme.SHARING)
        rng = random.Random(42)
        for _ in range(20):
            assert select_template(templates, rng) in templates

    def test_seeded_rng_is_reproducible(self):
        templates = templates_for(Theme.SHARING)
        first = [select_template(templates, random.Random(5)).template_id for _ in range(3)]
        second = [select_template(templates, random.Random(5)).template_id for _ in range(3)]
        assert first == second

    def test_seeded_rng_reaches_every_variant(self):
        templates = templates_for(Theme.SHARING)
        rng = random.Random(0)
        picked = {select_template(templates, rng).template_id for _ in range(100)}
        assert picked == {t.template_id for t in templates}

    def test_empty_sequence_raises(self):
        with pytest.raises(ValueError):
            select_template(())


class TestBuildVariables:
    """Tests for substitution variables."""

    def test_animal_forms(self):
        variables = build_variables(GenerationInput("Leo", Animal.LION, Theme.KINDNESS))
        assert variables["animal"] == "lion"
        assert variables["Animal"] == "Lion"
        assert variables["the_animal"] == "the lion"
        assert variables["The_animal"] == "The lion"

    def test_phrases_are_filled_in(self):
        variables = build_variables(GenerationInput("Leo", Animal.BEAR, Theme.COURAGE))
        assert "{" not in variables["problem"]
        assert "the bear" in variables["problem"]
        assert "Leo" in variables["turn"]

    def test_name_with_braces_is_inserted_literally(self):
        generation_input = GenerationInput("{animal}", Animal.FOX, Theme.HONESTY)
        content = assemble(generation_input, templates_for(Theme.HONESTY)[0])
        assert "{animal}" in content


class TestRenderParagraphs:
    """Tests for slot rendering."""

    def test_one_paragraph_per_slot_in_order(self):
        template = templates_for(Theme.PATIENCE)[0]
        paragraphs = render_paragraphs(
            GenerationInput("Ava", Animal.TURTLE, Theme.PATIENCE), template
        )
        assert len(paragraphs) == template.slot_count
        assert paragraphs[0].startswith("Once upon a time")
        assert "The end." in paragraphs[-1]

    def test_character_paragraph_follows_introduction(self, character):
        template = templates_for(Theme.PATIENCE)[0]
        paragraphs = render_paragraphs(
            GenerationInput("Ava", Animal.OWL, Theme.PATIENCE, character), template
        )
        assert len(paragraphs) == template.slot_count + 1
        assert paragraphs[1].startswith("Owl was no ordinary owl.")

    def test_assemble_joins_with_blank_line(self):
        template = templates_for(Theme.FRIENDSHIP)[1]
        generation_input = GenerationInput("Sam", Animal.DOLPHIN, Theme.FRIENDSHIP)
        content = assemble(generation_input, template)
        assert content.split("\n\n") == render_paragraphs(generation_input, template)


class TestDescribeCharacter:
    """Tests for the character paragraph."""

    def test_full_description(self, character):
        variables = build_variables(GenerationInput("Mia", Animal.OWL, Theme.COURAGE))
        text = describe_character(character, variables)

        assert "Owl was a small blue owl with a starry coat and sparkly eyes." in text
        assert "most curious friend" in text
        assert "its scarf and its glasses" in text
        assert "glowing in the dark" in text

    def test_minimal_description(self):
        variables = build_variables(GenerationInput("Mia", Animal.OWL, Theme.COURAGE))
        text = describe_character(CharacterCustomization(), variables)
        assert text == "Owl was no ordinary owl."
