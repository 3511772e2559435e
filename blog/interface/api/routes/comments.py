"""Comment routes."""

from uuid import UUID

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from blog.application.usecase.comment import (
    CommentInfo,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    GetUserCommentsRequest,
    GetUserCommentsResponse,
    GetUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService
from blog.interface.api.auth import bearer_scheme, optional_user_id, require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request for creating or editing a comment."""

    text: str = Field(default="", max_length=1000)


@router.get("/comments/me", response_model=GetUserCommentsResponse)
async def get_my_comments(
    get_user_comments_use_case: FromDishka[GetUserCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetUserCommentsResponse:
    """List the caller's comments, newest first, with their post titles.

    Requires authentication.
    """
    user_id = require_user_id(jwt_service, credentials, "list your comments")
    return await get_user_comments_use_case.execute(
        GetUserCommentsRequest(user_id=user_id)
    )


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: UUID,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> GetCommentsResponse:
    """List the comments of a post, oldest first.

    Raises:
        HTTPException: 404 if the post does not exist
    """
    user_id = optional_user_id(jwt_service, credentials)

    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post(
    "/posts/{post_id}/comments",
    response_model=CommentInfo,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: UUID,
    request: CommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentInfo:
    """Comment on a post.

    Requires authentication.

    Raises:
        HTTPException: 401 if not authenticated, 404 if the post does not exist
    """
    user_id = require_user_id(jwt_service, credentials, "create comments")

    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                post_id=str(post_id), author_id=user_id, text=request.text
            )
        )
    except DomainError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise to_http_exception(e)


# The :uuid convertor keeps /posts/{id}/comments/votes out of these routes
@router.put(
    "/posts/{post_id}/comments/{comment_id:uuid}", response_model=CommentInfo
)
async def update_comment(
    post_id: UUID,
    comment_id: UUID,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CommentInfo:
    """Edit a comment.

    Only the comment author can edit, and the comment must belong to the post.

    Raises:
        HTTPException: 401 if not authenticated, 404 if no such comment
    """
    user_id = require_user_id(jwt_service, credentials, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(
                post_id=str(post_id),
                comment_id=str(comment_id),
                user_id=user_id,
                text=request.text,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.delete(
    "/posts/{post_id}/comments/{comment_id:uuid}",
    response_model=DeleteCommentResponse,
)
async def delete_comment(
    post_id: UUID,
    comment_id: UUID,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentResponse:
    """Delete a comment and its votes.

    Raises:
        HTTPException: 401 if not authenticated, 404 if no such comment
    """
    user_id = require_user_id(jwt_service, credentials, "delete comments")

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(
                post_id=str(post_id), comment_id=str(comment_id), user_id=user_id
            )
        )
    except DomainError as e:
        raise to_http_exception(e)
