"""FastAPI dependency injection for services and repositories."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from backend.core.programs.story_generator import StoryGenerator

from . import config
from .database.repository import StoryRepository
from .services.story_service import StoryService


# Repository - one in-memory store per process
@lru_cache
def get_repository() -> StoryRepository:
    """Get the process-wide StoryRepository."""
    return StoryRepository()


# Generator - selection policy comes from STORY_RANDOM_SEED
@lru_cache
def get_story_generator() -> StoryGenerator:
    """Get the StoryGenerator configured for this process."""
    return StoryGenerator.from_seed(config.STORY_RANDOM_SEED)


# Service - depends on repository and generator
def get_story_service(
    repo: Annotated[StoryRepository, Depends(get_repository)],
    generator: Annotated[StoryGenerator, Depends(get_story_generator)],
) -> StoryService:
    """Get a StoryService instance with injected repository."""
    return StoryService(repo, generator)


# Type aliases for cleaner route signatures
Repository = Annotated[StoryRepository, Depends(get_repository)]
Service = Annotated[StoryService, Depends(get_story_service)]
