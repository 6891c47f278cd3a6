"""Post & Comment Repositories: the social feed."""

from sqlalchemy import select

from stridefund.models.post import Post, Comment
from stridefund.repositories.base import SqlAlchemyRepository


class SqlPostRepository(SqlAlchemyRepository[Post]):
    model = Post
    resource_type = "Post"

    async def get_by_slug(self, slug: str) -> Post | None:
        result = await self.db.execute(select(Post).where(Post.slug == slug))
        return result.scalar_one_or_none()

    async def list_page(self, limit: int, offset: int) -> list[Post]:
        return await self._all(
            select(Post).order_by(Post.created_at.desc())
            .limit(limit).offset(offset),
        )


class SqlCommentRepository(SqlAlchemyRepository[Comment]):
    model = Comment
    resource_type = "Comment"

    async def get_by_post_id(self, post_id: str) -> list[Comment]:
        return await self._all(
            select(Comment).where(Comment.post_id == post_id)
            .order_by(Comment.created_at),
        )
