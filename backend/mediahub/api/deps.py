"""Dependency Providers: build repositories and services per request.

Invariants:
    - Every provider in one request shares the same AsyncSession (FastAPI
      caches get_db per request)
    - PublicationService receives MediaService and PostService as constructor
      arguments

Design Decisions:
    - Plain Depends chains instead of a container: tests override get_db only
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mediahub.infrastructure.database import get_db
from mediahub.repositories.media_repository import MediaRepository
from mediahub.repositories.post_repository import PostRepository
from mediahub.repositories.publication_repository import PublicationRepository
from mediahub.services.media_service import MediaService
from mediahub.services.post_service import PostService
from mediahub.services.publication_service import PublicationService


def get_media_service(db: AsyncSession = Depends(get_db)) -> MediaService:
    return MediaService(MediaRepository(db))


def get_post_service(db: AsyncSession = Depends(get_db)) -> PostService:
    return PostService(PostRepository(db))


def get_publication_service(
    db: AsyncSession = Depends(get_db),
    medias: MediaService = Depends(get_media_service),
    posts: PostService = Depends(get_post_service),
) -> PublicationService:
    return PublicationService(PublicationRepository(db), medias, posts)
