"""Publication Service: reference checks, published filter and immutability.

Tests:
    - create/update resolve Media and Post first; a missing one writes nothing
    - find_all(published=True) keeps date <= now, find_all(after=T) keeps date > T
    - update of a published record is refused using the STORED date
    - remove works in both states
    - a reference deleted between check and write is reported as not-found
"""

from datetime import timedelta

import pytest

from mediahub.core.errors import (
    ForeignKeyViolationError, PublicationLockedError, ResourceNotFoundError,
)
from mediahub.models import Publication
from mediahub.repositories.media_repository import MediaRepository
from mediahub.repositories.post_repository import PostRepository
from mediahub.repositories.publication_repository import PublicationRepository
from mediahub.services.media_service import MediaService
from mediahub.services.post_service import PostService
from mediahub.services.publication_service import PublicationService


@pytest.fixture
def clock(fixed_now):
    """Mutable clock: tests move time forward with clock.now = ..."""

    class _Clock:
        now = fixed_now

        def __call__(self):
            return self.now

    return _Clock()


@pytest.fixture
def publication_service(test_db, clock):
    return PublicationService(
        PublicationRepository(test_db),
        MediaService(MediaRepository(test_db)),
        PostService(PostRepository(test_db)),
        clock=clock,
    )


# --- create ---------------------------------------------------------

async def test_create_with_valid_references(
    publication_service, make_media, make_post, fixed_now,
):
    media = await make_media()
    post = await make_post()
    date = fixed_now + timedelta(days=1)

    publication = await publication_service.create(media.id, post.id, date)

    assert publication.id is not None
    assert (publication.media_id, publication.post_id) == (media.id, post.id)
    assert publication.date == date


async def test_create_with_missing_media_writes_nothing(
    publication_service, make_post, count_rows, fixed_now,
):
    post = await make_post()

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await publication_service.create(999, post.id, fixed_now)

    assert exc_info.value.resource_type == "Media"
    assert await count_rows(Publication) == 0


async def test_create_with_missing_post_writes_nothing(
    publication_service, make_media, count_rows, fixed_now,
):
    media = await make_media()

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await publication_service.create(media.id, 999, fixed_now)

    assert exc_info.value.resource_type == "Post"
    assert await count_rows(Publication) == 0


# --- find_all -------------------------------------------------------

async def test_find_all_without_filters_returns_everything(
    publication_service, make_publication, fixed_now,
):
    await make_publication(fixed_now - timedelta(days=1))
    await make_publication(fixed_now + timedelta(days=1))

    assert len(await publication_service.find_all()) == 2
    assert len(await publication_service.find_all(published=False)) == 2


async def test_find_all_published_returns_only_past(
    publication_service, make_publication, fixed_now,
):
    past = await make_publication(fixed_now - timedelta(days=1))
    await make_publication(fixed_now + timedelta(days=1))

    result = await publication_service.find_all(published=True)

    assert [p.id for p in result] == [past.id]


async def test_find_all_after_returns_only_later(
    publication_service, make_publication, fixed_now,
):
    after = fixed_now - timedelta(days=10)
    await make_publication(after - timedelta(days=1))
    later = await make_publication(after + timedelta(days=1))

    result = await publication_service.find_all(after=after)

    assert [p.id for p in result] == [later.id]


async def test_find_all_after_is_strict(
    publication_service, make_publication, fixed_now,
):
    await make_publication(fixed_now)
    assert await publication_service.find_all(after=fixed_now) == []


async def test_find_all_combines_filters_with_and(
    publication_service, make_publication, fixed_now,
):
    await make_publication(fixed_now - timedelta(days=5))
    recent_past = await make_publication(fixed_now - timedelta(days=1))
    await make_publication(fixed_now + timedelta(days=1))

    result = await publication_service.find_all(
        published=True, after=fixed_now - timedelta(days=2),
    )

    assert [p.id for p in result] == [recent_past.id]


async def test_scheduled_publication_appears_once_date_elapses(
    publication_service, make_media, make_post, clock, fixed_now,
):
    media = await make_media()
    post = await make_post()
    created = await publication_service.create(
        media.id, post.id, fixed_now + timedelta(days=1),
    )

    assert await publication_service.find_all(published=True) == []

    clock.now = fixed_now + timedelta(days=1, seconds=1)
    result = await publication_service.find_all(published=True)
    assert [p.id for p in result] == [created.id]


# --- find_one -------------------------------------------------------

async def test_find_one_missing_is_not_found(publication_service):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await publication_service.find_one(5)
    assert exc_info.value.resource_type == "Publication"


# --- update ---------------------------------------------------------

async def test_update_scheduled_persists_new_values(
    publication_service, make_publication, make_media, make_post, load_row,
    fixed_now,
):
    publication = await make_publication(fixed_now + timedelta(days=1))
    media = await make_media()
    post = await make_post()
    new_date = fixed_now + timedelta(days=3)

    updated = await publication_service.update(
        publication.id, media.id, post.id, new_date,
    )

    assert updated.id == publication.id
    stored = await load_row(Publication, publication.id)
    assert (stored.media_id, stored.post_id, stored.date) == (media.id, post.id, new_date)


async def test_update_published_is_locked_whatever_the_new_values(
    publication_service, make_publication, load_row, fixed_now,
):
    publication = await make_publication(fixed_now - timedelta(minutes=1))

    with pytest.raises(PublicationLockedError):
        await publication_service.update(
            publication.id, publication.media_id, publication.post_id,
            fixed_now + timedelta(days=30),
        )

    stored = await load_row(Publication, publication.id)
    assert stored.date == fixed_now - timedelta(minutes=1)


async def test_update_lock_uses_stored_date_not_incoming(
    publication_service, make_publication, fixed_now,
):
    publication = await make_publication(fixed_now + timedelta(days=1))

    # Moving a scheduled record into the past is allowed...
    await publication_service.update(
        publication.id, publication.media_id, publication.post_id,
        fixed_now - timedelta(days=1),
    )

    # ...after which it is published and locked.
    with pytest.raises(PublicationLockedError):
        await publication_service.update(
            publication.id, publication.media_id, publication.post_id,
            fixed_now + timedelta(days=1),
        )


async def test_update_missing_is_not_found(publication_service, fixed_now):
    with pytest.raises(ResourceNotFoundError):
        await publication_service.update(5, 1, 1, fixed_now)


async def test_update_with_missing_reference_is_not_found(
    publication_service, make_publication, load_row, fixed_now,
):
    publication = await make_publication(fixed_now + timedelta(days=1))

    with pytest.raises(ResourceNotFoundError):
        await publication_service.update(
            publication.id, publication.media_id, 999, fixed_now + timedelta(days=2),
        )

    stored = await load_row(Publication, publication.id)
    assert stored.date == fixed_now + timedelta(days=1)


# --- remove ---------------------------------------------------------

@pytest.mark.parametrize("offset", [timedelta(days=-1), timedelta(days=1)])
async def test_remove_in_either_state(
    publication_service, make_publication, load_row, fixed_now, offset,
):
    publication = await make_publication(fixed_now + offset)

    removed = await publication_service.remove(publication.id)

    assert removed.id == publication.id
    assert await load_row(Publication, publication.id) is None


async def test_remove_missing_is_not_found(publication_service):
    with pytest.raises(ResourceNotFoundError):
        await publication_service.remove(5)


# --- ordering and race handling (fakes) -----------------------------

class _Lookup:
    def __init__(self, name: str, known: set[int], calls: list):
        self.name = name
        self.known = known
        self.calls = calls

    async def find_one(self, record_id: int):
        self.calls.append((self.name, record_id))
        if record_id not in self.known:
            raise ResourceNotFoundError(self.name, record_id)
        return object()


class _VanishingRepository:
    """Store whose FK check fails: the reference was deleted after the lookup."""

    def __init__(self):
        self.writes = 0

    async def create(self, fields):
        self.writes += 1
        raise ForeignKeyViolationError("publications", "create")


async def test_media_is_checked_before_post(fixed_now):
    calls: list = []
    repo = _VanishingRepository()
    service = PublicationService(
        repo, _Lookup("Media", set(), calls), _Lookup("Post", set(), calls),
        clock=lambda: fixed_now,
    )

    with pytest.raises(ResourceNotFoundError) as exc_info:
        await service.create(1, 2, fixed_now)

    assert exc_info.value.resource_type == "Media"
    assert calls == [("Media", 1)]
    assert repo.writes == 0


async def test_reference_deleted_between_check_and_write_is_not_found(fixed_now):
    calls: list = []
    repo = _VanishingRepository()
    service = PublicationService(
        repo, _Lookup("Media", {1}, calls), _Lookup("Post", {2}, calls),
        clock=lambda: fixed_now,
    )

    with pytest.raises(ResourceNotFoundError):
        await service.create(1, 2, fixed_now)

    assert calls == [("Media", 1), ("Post", 2)]
    assert repo.writes == 1
