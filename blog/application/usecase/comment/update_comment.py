"""Update comment use case."""

from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from blog.domain.repository import VoteRepository
from blog.domain.service import CommentService, UserService
from blog.domain.value import CommentId, PostId, UserId, VotableType

from .common import CommentInfo, get_owned_comment, to_comment_info


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    post_id: str  # UUID string
    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    text: str = Field(max_length=1000)


class UpdateCommentUseCase:
    """Use case for an author editing their comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            vote_repository: Vote repository
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.vote_repository = vote_repository

    async def execute(self, request: UpdateCommentRequest) -> CommentInfo:
        """Execute update comment flow.

        Raises:
            NotFoundError: If no comment with this ID belongs to both the
                post and the caller
        """
        user_id = UserId(UUID(request.user_id))

        with logfire.span(
            "update_comment.execute",
            comment_id=request.comment_id,
            user_id=request.user_id,
        ):
            comment = await get_owned_comment(
                self.comment_service,
                PostId(UUID(request.post_id)),
                CommentId(UUID(request.comment_id)),
                user_id,
            )

            updated = await self.comment_service.save_comment(
                comment.model_copy(
                    update={"text": request.text, "updated_at": datetime.now()}
                )
            )

            author = await self.user_service.get_by_id(user_id)
            vote = await self.vote_repository.find_by_user_and_votable(
                user_id=user_id,
                votable_type=VotableType.COMMENT,
                votable_id=updated.id,
            )
            return to_comment_info(
                updated, author, int(vote.value) if vote else None
            )
