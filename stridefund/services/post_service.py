"""Post Service: feed posts and comments with author-only edits.

Invariants:
    - Post titles and all content are stripped and non-empty (InvalidInputError)
    - Only the author may update or delete a post or comment (ForbiddenError)
    - Posts get a slug from their title; comments require an existing post
"""

import logging

from stridefund.core.errors import ForbiddenError, ResourceNotFoundError
from stridefund.core.repository_protocols import CommentRepository, PostRepository
from stridefund.core.slugs import generate_slug
from stridefund.core.validation import validate_text

logger = logging.getLogger(__name__)


class PostService:

    def __init__(self, posts: PostRepository, comments: CommentRepository):
        self.posts = posts
        self.comments = comments

    async def create_post(self, owner_id: str, title: str, content: str):
        title = validate_text(title, "title", "create_post")
        post = await self.posts.create(
            owner_id=owner_id,
            title=title,
            content=validate_text(content, "content", "create_post"),
            slug=generate_slug(title),
        )
        logger.info(f"Post created: {post.slug}", extra={"post_id": post.id, "user_id": owner_id})
        return post

    async def get_post(self, post_id: str):
        post = await self.posts.get_by_id(post_id)
        if post is None:
            raise ResourceNotFoundError("Post", post_id)
        return post

    async def get_post_by_slug(self, slug: str):
        post = await self.posts.get_by_slug(slug)
        if post is None:
            raise ResourceNotFoundError("Post", slug)
        return post

    async def list_posts(self, limit: int, offset: int = 0) -> list:
        return await self.posts.list_page(limit, offset)

    async def update_post(
        self, post_id: str, user_id: str,
        title: str | None = None, content: str | None = None,
    ):
        post = await self.get_post(post_id)
        if post.owner_id != user_id:
            raise ForbiddenError("Post", post_id, "modify")
        fields: dict = {}
        if title is not None:
            fields["title"] = validate_text(title, "title", "update_post")
            fields["slug"] = generate_slug(fields["title"])
        if content is not None:
            fields["content"] = validate_text(content, "content", "update_post")
        updated = await self.posts.update(post_id, **fields)
        logger.info("Post updated", extra={"post_id": post_id, "user_id": user_id})
        return updated

    async def delete_post(self, post_id: str, user_id: str) -> None:
        post = await self.get_post(post_id)
        if post.owner_id != user_id:
            raise ForbiddenError("Post", post_id, "delete")
        await self.posts.delete(post_id)
        logger.info("Post deleted", extra={"post_id": post_id, "user_id": user_id})

    # ─── Comments ────────────────────────────────────────────────

    async def add_comment(self, post_id: str, owner_id: str, content: str):
        content = validate_text(content, "content", "add_comment")
        await self.get_post(post_id)
        comment = await self.comments.create(
            post_id=post_id, owner_id=owner_id, content=content,
        )
        logger.info(
            "Comment added",
            extra={"post_id": post_id, "comment_id": comment.id, "user_id": owner_id},
        )
        return comment

    async def list_comments(self, post_id: str) -> list:
        await self.get_post(post_id)
        return await self.comments.get_by_post_id(post_id)

    async def _owned_comment(self, comment_id: str, user_id: str, action: str):
        comment = await self.comments.get_by_id(comment_id)
        if comment is None:
            raise ResourceNotFoundError("Comment", comment_id)
        if comment.owner_id != user_id:
            raise ForbiddenError("Comment", comment_id, action)
        return comment

    async def update_comment(self, comment_id: str, user_id: str, content: str):
        await self._owned_comment(comment_id, user_id, "modify")
        comment = await self.comments.update(
            comment_id, content=validate_text(content, "content", "update_comment"),
        )
        logger.info("Comment updated", extra={"comment_id": comment_id, "user_id": user_id})
        return comment

    async def delete_comment(self, comment_id: str, user_id: str) -> None:
        await self._owned_comment(comment_id, user_id, "delete")
        await self.comments.delete(comment_id)
        logger.info("Comment deleted", extra={"comment_id": comment_id, "user_id": user_id})
