"""Pytest fixtures for generator and API tests."""

import pytest
from fastapi.testclient import TestClient

from backend.api.main import app
from backend.api.database.repository import StoryRepository
from backend.api.dependencies import get_repository, get_story_generator
from backend.core.programs.story_generator import StoryGenerator
from backend.core.types import (
    CharacterAppearance,
    CharacterCustomization,
    GenerationInput,
)
from backend.core.vocabulary import Animal, Theme


@pytest.fixture
def owl_courage_input():
    """The canonical Mia / owl / courage request."""
    return GenerationInput(child_name="Mia", animal=Animal.OWL, theme=Theme.COURAGE)


@pytest.fixture
def character():
    """A fully customized character."""
    return CharacterCustomization(
        color="blue",
        personality="curious",
        special_ability="glowing in the dark",
        accessories=("scarf", "glasses"),
        appearance=CharacterAppearance(eyes="sparkly", size="small", pattern="starry"),
    )


@pytest.fixture
def repository():
    """A fresh in-memory repository."""
    return StoryRepository()


@pytest.fixture
def client(repository):
    """TestClient with a fresh repository and deterministic generator."""
    app.dependency_overrides[get_repository] = lambda: repository
    app.dependency_overrides[get_story_generator] = lambda: StoryGenerator()

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
