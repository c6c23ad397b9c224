"""Story endpoints."""

from fastapi import APIRouter, HTTPException, status

from ..dependencies import Repository, Service
from ..models.requests import CreateStoryRequest
from ..models.responses import StoryResponse
from ..services.story_service import CharacterNotFoundError

router = APIRouter()


@router.post(
    "",
    response_model=StoryResponse,
    summary="Generate a story",
    description="Generate a bedtime story from a child's name, an animal and a theme, save it, and return it with its id.",
)
async def create_story(request: CreateStoryRequest, service: Service):
    """Generate and save a new story."""
    try:
        return await service.create_story(request)
    except CharacterNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )


@router.get(
    "",
    response_model=list[StoryResponse],
    summary="List all stories",
)
async def list_stories(repo: Repository):
    """List all saved stories in creation order."""
    return await repo.list_stories()


@router.get(
    "/{story_id}",
    response_model=StoryResponse,
    summary="Get a story",
)
async def get_story(story_id: int, repo: Repository):
    """Get a story by ID."""
    story = await repo.get_story(story_id)

    if not story:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Story not found",
        )

    return story
