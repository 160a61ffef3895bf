from mediahub.core.domain_types import EntityName
from mediahub.models.post import Post
from mediahub.repositories.base import SqlAlchemyRepository


class PostRepository(SqlAlchemyRepository[Post]):
    model = Post
    entity_name = EntityName.POST.value
