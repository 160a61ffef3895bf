"""Media Routes: REST surface over MediaService.

Invariants:
    - POST 201, GET 200, PUT 200, DELETE 204 with an empty body
    - Path ids are positive integers (400 otherwise)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from mediahub.api.deps import get_media_service
from mediahub.schemas.media import MediaCreate, MediaResponse, MediaUpdate
from mediahub.services.media_service import MediaService

router = APIRouter(prefix="/medias", tags=["medias"])

MediaIdPath = Annotated[int, Path(gt=0)]


@router.post(
    "", response_model=MediaResponse, status_code=status.HTTP_201_CREATED,
)
async def create_media(
    body: MediaCreate, service: MediaService = Depends(get_media_service),
):
    """Create a media outlet; 409 if (title, username) is taken."""
    return await service.create(body.title, body.username)


@router.get("", response_model=list[MediaResponse])
async def list_medias(service: MediaService = Depends(get_media_service)):
    return await service.find_all()


@router.get("/{media_id}", response_model=MediaResponse)
async def get_media(
    media_id: MediaIdPath, service: MediaService = Depends(get_media_service),
):
    return await service.find_one(media_id)


@router.put("/{media_id}", response_model=MediaResponse)
async def update_media(
    media_id: MediaIdPath,
    body: MediaUpdate,
    service: MediaService = Depends(get_media_service),
):
    return await service.update(media_id, body.title, body.username)


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(
    media_id: MediaIdPath, service: MediaService = Depends(get_media_service),
) -> None:
    """Delete a media outlet; 403 while a publication references it."""
    await service.remove(media_id)
