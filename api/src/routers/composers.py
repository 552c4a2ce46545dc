"""
Composer router.

Provides REST API endpoints for:
- Listing and fetching composers
- Creating, updating and deleting composers by id
"""

import structlog
from typing import List, Optional
from fastapi import APIRouter, Depends, status

from api.src.dependencies import get_composer_repository
from api.src.errors import NotFoundError
from api.src.models.common import MessageResponse
from api.src.models.composer import Composer, ComposerRequest
from api.src.repositories.composer_repo import ComposerRepository

logger = structlog.get_logger(__name__)

INVALID_COMPOSER_ID = "Invalid composerId."

router = APIRouter(
    prefix="/composers",
    tags=["Composers"],
    responses={
        500: {"model": MessageResponse, "description": "Server Exception"},
        501: {"model": MessageResponse, "description": "MongoDB Exception"}
    }
)


@router.get(
    "",
    response_model=List[Composer],
    status_code=status.HTTP_200_OK,
    summary="findAllComposers",
    description="Returns an array of composer documents."
)
async def find_all_composers(
    composer_repo: ComposerRepository = Depends(get_composer_repository)
) -> List[Composer]:
    return await composer_repo.list_composers()


@router.get(
    "/{composer_id}",
    response_model=Optional[Composer],
    status_code=status.HTTP_200_OK,
    summary="findComposerById",
    description="Returns the composer document, or null when no composer has this id."
)
async def find_composer_by_id(
    composer_id: str,
    composer_repo: ComposerRepository = Depends(get_composer_repository)
) -> Optional[Composer]:
    return await composer_repo.get_composer(composer_id)


@router.post(
    "",
    response_model=Composer,
    status_code=status.HTTP_200_OK,
    summary="createComposer",
    description="Creates a new composer and returns it with its assigned id."
)
async def create_composer(
    composer_request: ComposerRequest,
    composer_repo: ComposerRepository = Depends(get_composer_repository)
) -> Composer:
    return await composer_repo.create_composer(composer_request)


@router.put(
    "/{composer_id}",
    response_model=Composer,
    status_code=status.HTTP_200_OK,
    summary="updateComposerById",
    description="Replaces the composer's first and last name.",
    responses={401: {"model": MessageResponse, "description": "Invalid composerId"}}
)
async def update_composer_by_id(
    composer_id: str,
    composer_request: ComposerRequest,
    composer_repo: ComposerRepository = Depends(get_composer_repository)
) -> Composer:
    """
    Update a composer.

    Raises:
        NotFoundError: If no composer has this id
    """
    composer = await composer_repo.update_composer(composer_id, composer_request)
    if composer is None:
        logger.warning("composer_update_invalid_id", composer_id=composer_id)
        raise NotFoundError(INVALID_COMPOSER_ID)
    return composer


@router.delete(
    "/{composer_id}",
    response_model=Composer,
    status_code=status.HTTP_200_OK,
    summary="deleteComposerById",
    description="Deletes the composer and returns the deleted document.",
    responses={401: {"model": MessageResponse, "description": "Invalid composerId"}}
)
async def delete_composer_by_id(
    composer_id: str,
    composer_repo: ComposerRepository = Depends(get_composer_repository)
) -> Composer:
    """
    Delete a composer.

    Raises:
        NotFoundError: If no composer has this id
    """
    composer = await composer_repo.delete_composer(composer_id)
    if composer is None:
        logger.warning("composer_delete_invalid_id", composer_id=composer_id)
        raise NotFoundError(INVALID_COMPOSER_ID)
    return composer
