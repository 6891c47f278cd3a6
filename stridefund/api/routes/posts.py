"""Post Routes: feed posts and their comments.

Invariants:
    - Only the author may PATCH/DELETE a post or comment (403 otherwise)
    - /slug and /comments paths are declared before /{post_id}
"""

from fastapi import APIRouter, Depends, Query, Response, status

from stridefund.api.dependencies import get_current_user_id, get_post_service
from stridefund.config import get_settings
from stridefund.schemas.post import (
    CommentCreate, CommentResponse, PostCreate, PostResponse, PostUpdate,
)
from stridefund.services.post_service import PostService

router = APIRouter(prefix="/api/v1/posts", tags=["posts"])
_settings = get_settings()


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    body: PostCreate,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return await posts.create_post(user_id, body.title, body.content)


@router.get("")
async def list_posts(
    limit: int = Query(_settings.default_page_size, ge=1, le=_settings.max_page_size),
    offset: int = Query(0, ge=0),
    posts: PostService = Depends(get_post_service),
):
    rows = await posts.list_posts(limit, offset)
    return {
        "posts": [PostResponse.model_validate(p) for p in rows],
        "pagination": {"limit": limit, "offset": offset},
    }


@router.get("/slug/{slug}", response_model=PostResponse)
async def get_post_by_slug(
    slug: str, posts: PostService = Depends(get_post_service),
):
    return await posts.get_post_by_slug(slug)


@router.patch("/comments/{comment_id}", response_model=CommentResponse)
async def update_comment(
    comment_id: str,
    body: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return await posts.update_comment(comment_id, user_id, body.content)


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    await posts.delete_comment(comment_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(
    post_id: str, posts: PostService = Depends(get_post_service),
):
    return await posts.get_post(post_id)


@router.patch("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: str,
    body: PostUpdate,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return await posts.update_post(post_id, user_id, body.title, body.content)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    await posts.delete_post(post_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{post_id}/comments", response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    body: CommentCreate,
    user_id: str = Depends(get_current_user_id),
    posts: PostService = Depends(get_post_service),
):
    return await posts.add_comment(post_id, user_id, body.content)


@router.get("/{post_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    post_id: str, posts: PostService = Depends(get_post_service),
):
    return await posts.list_comments(post_id)
