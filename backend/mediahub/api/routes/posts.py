from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from mediahub.api.deps import get_post_service
from mediahub.schemas.post import PostCreate, PostResponse, PostUpdate
from mediahub.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])

PostIdPath = Annotated[int, Path(gt=0)]


@router.post(
    "", response_model=PostResponse, status_code=status.HTTP_201_CREATED,
)
async def create_post(
    body: PostCreate, service: PostService = Depends(get_post_service),
):
    return await service.create(body.title, body.text, body.image)


@router.get("", response_model=list[PostResponse])
async def list_posts(service: PostService = Depends(get_post_service)):
    return await service.find_all()


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: PostIdPath, service: PostService = Depends(get_post_service),
):
    return await service.find_one(post_id)


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: PostIdPath,
    body: PostUpdate,
    service: PostService = Depends(get_post_service),
):
    return await service.update(post_id, body.title, body.text, body.image)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: PostIdPath, service: PostService = Depends(get_post_service),
) -> None:
    await service.remove(post_id)
