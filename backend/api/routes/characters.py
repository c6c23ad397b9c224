"""Character CRUD endpoints."""

from fastapi import APIRouter, HTTPException, Response, status

from ..dependencies import Repository
from ..models.requests import CreateCharacterRequest, UpdateCharacterRequest
from ..models.responses import CharacterResponse

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Character not found",
    )


@router.get(
    "",
    response_model=list[CharacterResponse],
    summary="List all characters",
)
async def list_characters(repo: Repository):
    return await repo.list_characters()


@router.get(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="Get a character",
)
async def get_character(character_id: int, repo: Repository):
    character = await repo.get_character(character_id)
    if not character:
        raise _not_found()
    return character


@router.post(
    "",
    response_model=CharacterResponse,
    summary="Create a character",
)
async def create_character(request: CreateCharacterRequest, repo: Repository):
    """Save a new character."""
    return await repo.create_character(
        name=request.name,
        base_animal=request.base_animal,
        customization=request.customization,
    )


@router.patch(
    "/{character_id}",
    response_model=CharacterResponse,
    summary="Update a character",
    description="Change only the fields present in the request body.",
)
async def update_character(character_id: int, request: UpdateCharacterRequest, repo: Repository):
    updates = request.model_dump(exclude_unset=True)
    # name and baseAnimal can't be cleared; customization can
    updates = {k: v for k, v in updates.items() if v is not None or k == "customization"}

    character = await repo.update_character(character_id, updates)
    if not character:
        raise _not_found()
    return character


@router.delete(
    "/{character_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a character",
)
async def delete_character(character_id: int, repo: Repository):
    deleted = await repo.delete_character(character_id)
    if not deleted:
        raise _not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
