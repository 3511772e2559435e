"""Vote routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, Response, status
from fastapi.security import HTTPAuthorizationCredentials

from blog.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
    DeleteCommentVotesRequest,
    DeleteCommentVotesResponse,
    DeleteCommentVotesUseCase,
    ListVotesRequest,
    ListVotesResponse,
    ListVotesUseCase,
    RecomputeVotesRequest,
    RecomputeVotesResponse,
    RecomputeVotesUseCase,
    RetractVoteRequest,
    RetractVoteResponse,
    RetractVoteUseCase,
)
from blog.domain.error import DomainError
from blog.domain.service import JWTService, parse_vote_text
from blog.domain.value import CastStatus, VotableType
from blog.interface.api.auth import bearer_scheme, require_user_id
from blog.interface.error import to_http_exception

router = APIRouter(tags=["votes"], route_class=DishkaRoute)


@router.get("/votes", response_model=ListVotesResponse)
async def list_votes(
    list_votes_use_case: FromDishka[ListVotesUseCase],
    jwt_service: FromDishka[JWTService],
    target_id: list[UUID] | None = Query(default=None),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> ListVotesResponse:
    """List every vote, or only the votes on the given posts/comments.

    Requires authentication.

    Args:
        target_id: Repeatable post or comment ID filter
    """
    require_user_id(jwt_service, credentials, "list votes")

    target_ids = [str(t) for t in target_id] if target_id is not None else None
    return await list_votes_use_case.execute(ListVotesRequest(target_ids=target_ids))


async def _cast(
    votable_type: VotableType,
    votable_id: UUID,
    raw_value: str | None,
    response: Response,
    cast_vote_use_case: CastVoteUseCase,
    user_id: str,
) -> CastVoteResponse:
    try:
        value = parse_vote_text(raw_value, votable_id)
        result = await cast_vote_use_case.execute(
            CastVoteRequest(
                votable_type=votable_type,
                votable_id=str(votable_id),
                user_id=user_id,
                value=int(value),
            )
        )
    except DomainError as e:
        raise to_http_exception(e)

    if result.status == CastStatus.CREATED:
        response.status_code = status.HTTP_201_CREATED
    return result


async def _retract(
    votable_type: VotableType,
    votable_id: UUID,
    retract_vote_use_case: RetractVoteUseCase,
    user_id: str,
) -> RetractVoteResponse:
    try:
        return await retract_vote_use_case.execute(
            RetractVoteRequest(
                votable_type=votable_type,
                votable_id=str(votable_id),
                user_id=user_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/vote", response_model=CastVoteResponse)
async def vote_on_post(
    post_id: UUID,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    vote: str | None = Query(default=None, description="-1, 0 or 1"),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CastVoteResponse:
    """Vote on a post, or change an existing vote.

    Returns 201 for a first vote and 200 for a changed or repeated vote.

    Raises:
        HTTPException: 401 if not authenticated, 400 for a value outside
            -1..1 (including a missing or non-numeric one), 404 if the post does not exist, 409 on a persistent
            concurrent change
    """
    user_id = require_user_id(jwt_service, credentials, "vote")
    return await _cast(
        VotableType.POST, post_id, vote, response, cast_vote_use_case, user_id
    )


@router.delete("/posts/{post_id}/vote", response_model=RetractVoteResponse)
async def retract_post_vote(
    post_id: UUID,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RetractVoteResponse:
    """Remove the caller's vote from a post.

    Succeeds with status ``nothing_to_remove`` if there was no vote.
    """
    user_id = require_user_id(jwt_service, credentials, "remove votes")
    return await _retract(VotableType.POST, post_id, retract_vote_use_case, user_id)


@router.post("/comments/{comment_id}/vote", response_model=CastVoteResponse)
async def vote_on_comment(
    comment_id: UUID,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    vote: str | None = Query(default=None, description="-1, 0 or 1"),
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> CastVoteResponse:
    """Vote on a comment, or change an existing vote.

    Returns 201 for a first vote and 200 for a changed or repeated vote.
    """
    user_id = require_user_id(jwt_service, credentials, "vote")
    return await _cast(
        VotableType.COMMENT, comment_id, vote, response, cast_vote_use_case, user_id
    )


@router.delete("/comments/{comment_id}/vote", response_model=RetractVoteResponse)
async def retract_comment_vote(
    comment_id: UUID,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RetractVoteResponse:
    """Remove the caller's vote from a comment."""
    user_id = require_user_id(jwt_service, credentials, "remove votes")
    return await _retract(
        VotableType.COMMENT, comment_id, retract_vote_use_case, user_id
    )


@router.delete(
    "/posts/{post_id}/comments/votes", response_model=DeleteCommentVotesResponse
)
async def delete_comment_votes(
    post_id: UUID,
    delete_comment_votes_use_case: FromDishka[DeleteCommentVotesUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> DeleteCommentVotesResponse:
    """Delete every vote on the comments of a post.

    Only the post author can do this.

    Raises:
        HTTPException: 401 if not authenticated, 403 if not the author,
            404 if the post does not exist
    """
    user_id = require_user_id(jwt_service, credentials, "delete votes")

    try:
        return await delete_comment_votes_use_case.execute(
            DeleteCommentVotesRequest(post_id=str(post_id), user_id=user_id)
        )
    except DomainError as e:
        raise to_http_exception(e)


async def _recompute(
    votable_type: VotableType,
    votable_id: UUID,
    recompute_votes_use_case: RecomputeVotesUseCase,
    actor_id: str,
) -> RecomputeVotesResponse:
    try:
        return await recompute_votes_use_case.execute(
            RecomputeVotesRequest(
                votable_type=votable_type,
                votable_id=str(votable_id),
                actor_id=actor_id,
            )
        )
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/posts/{post_id}/votes/recompute", response_model=RecomputeVotesResponse)
async def recompute_post_votes(
    post_id: UUID,
    recompute_votes_use_case: FromDishka[RecomputeVotesUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RecomputeVotesResponse:
    """Rebuild a post's tally from its stored votes (admin only).

    Raises:
        HTTPException: 401 if not authenticated, 403 if not an admin,
            404 if the post does not exist
    """
    actor_id = require_user_id(jwt_service, credentials, "recompute votes")
    return await _recompute(
        VotableType.POST, post_id, recompute_votes_use_case, actor_id
    )


@router.post(
    "/comments/{comment_id}/votes/recompute", response_model=RecomputeVotesResponse
)
async def recompute_comment_votes(
    comment_id: UUID,
    recompute_votes_use_case: FromDishka[RecomputeVotesUseCase],
    jwt_service: FromDishka[JWTService],
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> RecomputeVotesResponse:
    """Rebuild a comment's tally from its stored votes (admin only)."""
    actor_id = require_user_id(jwt_service, credentials, "recompute votes")
    return await _recompute(
        VotableType.COMMENT, comment_id, recompute_votes_use_case, actor_id
    )
