"""Publication Routes: REST surface over PublicationService.

Invariants:
    - GET /publications accepts ?published=true and ?after=<ISO-8601>, AND-ed
    - PUT on a published record is 403; unknown mediaId/postId is 404
    - JSON keys are camelCase (mediaId, postId)
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from mediahub.api.deps import get_publication_service
from mediahub.schemas.publication import (
    PublicationCreate, PublicationFilter, PublicationResponse, PublicationUpdate,
)
from mediahub.services.publication_service import PublicationService

router = APIRouter(prefix="/publications", tags=["publications"])

PublicationIdPath = Annotated[int, Path(gt=0)]


@router.post(
    "", response_model=PublicationResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_publication(
    body: PublicationCreate,
    service: PublicationService = Depends(get_publication_service),
):
    """Schedule a post on a media; both must exist."""
    return await service.create(body.media_id, body.post_id, body.date)


@router.get("", response_model=list[PublicationResponse])
async def list_publications(
    filters: Annotated[PublicationFilter, Query()],
    service: PublicationService = Depends(get_publication_service),
):
    return await service.find_all(filters.published, filters.after)


@router.get("/{publication_id}", response_model=PublicationResponse)
async def get_publication(
    publication_id: PublicationIdPath,
    service: PublicationService = Depends(get_publication_service),
):
    return await service.find_one(publication_id)


@router.put("/{publication_id}", response_model=PublicationResponse)
async def update_publication(
    publication_id: PublicationIdPath,
    body: PublicationUpdate,
    service: PublicationService = Depends(get_publication_service),
):
    return await service.update(
        publication_id, body.media_id, body.post_id, body.date,
    )


@router.delete(
    "/{publication_id}", status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_publication(
    publication_id: PublicationIdPath,
    service: PublicationService = Depends(get_publication_service),
) -> None:
    await service.remove(publication_id)
