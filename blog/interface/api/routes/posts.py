"""Post routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from blog.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostInfo,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.auth import bearer_scheme, optional_user_id, require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Images and avatar are URLs of already-hosted files.
    """

    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    avatar: str | None = None
    images: list[str] = Field(default_factory=list)


@router.post("", response_model=PostInfo, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostInfo:
    """Create a new post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 400 if too many images
    """
    user_id = require_user_id(jwt_service, credentials, "create posts")

    try:
        return await create_post_use_case.execute(
            CreatePostRequest(
                author_id=user_id,
                title=request.title,
                content=request.content,
                avatar=request.avatar,
                images=request.images,
            )
        )
    except DomainError as e:
        logfire.warn("Post creation failed", error=str(e))
        raise to_http_exception(e)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListPostsResponse:
    """List all posts, oldest first.

    Authentication is optional; signed-in callers see their own vote on
    each post.
    """
    user_id = optional_user_id(jwt_service, credentials)
    return await list_posts_use_case.execute(ListPostsRequest(user_id=user_id))


@router.get("/{post_id}", response_model=PostInfo)
async def get_post(
    post_id: UUID,
    get_post_use_case: FromDishka[GetPostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostInfo:
    """Get a single post.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    user_id = optional_user_id(jwt_service, credentials)

    try:
        return await get_post_use_case.execute(
            GetPostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are unchanged."""

    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1, max_length=1000)
    avatar: str | None = None
    images: list[str] | None = None


@router.patch("/{post_id}", response_model=PostInfo)
async def update_post(
    post_id: UUID,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> PostInfo:
    """Update a post.

    Only the post author can edit.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post does not exist
    """
    user_id = require_user_id(jwt_service, credentials, "edit posts")

    try:
        return await update_post_use_case.execute(
            UpdatePostRequest(
                post_id=str(post_id),
                user_id=user_id,
                title=request.title,
                content=request.content,
                avatar=request.avatar,
                images=request.images,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: UUID,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeletePostResponse:
    """Delete a post with its comments and all their votes.

    Only the post author can delete.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post does not exist
    """
    user_id = require_user_id(jwt_service, credentials, "delete posts")

    try:
        return await delete_post_use_case.execute(
            DeletePostRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)
