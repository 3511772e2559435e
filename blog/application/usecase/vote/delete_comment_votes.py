"""Delete all comment votes of a post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import CommentService, PostService, VoteService
from blog.domain.value import PostId, UserId


class DeleteCommentVotesRequest(BaseModel):
    """Delete comment votes request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be the post author)


class DeleteCommentVotesResponse(BaseModel):
    """Delete comment votes response."""

    post_id: str
    deleted_count: int


class DeleteCommentVotesUseCase:
    """Use case for clearing every vote on the comments of a post.

    Comment tallies are not touched; this is the first step of removing
    a post's comments.
    """

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete comment votes use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(
        self, request: DeleteCommentVotesRequest
    ) -> DeleteCommentVotesResponse:
        """Execute delete comment votes flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If the caller is not the post author
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_comment_votes.execute", post_id=request.post_id):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)
            if post.author_id != user_id:
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            comments = await self.comment_service.get_comments_for_post(post_id)
            deleted = await self.vote_service.cascade_delete_for_targets(
                [comment.id for comment in comments]
            )

            return DeleteCommentVotesResponse(
                post_id=request.post_id, deleted_count=deleted
            )
