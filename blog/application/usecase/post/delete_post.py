"""Delete post use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import CommentService, PostService, VoteService
from blog.domain.value import PostId, UserId


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    comments_deleted: int
    votes_deleted: int


async def delete_post_with_dependents(
    post_id: PostId,
    post_service: PostService,
    comment_service: CommentService,
    vote_service: VoteService,
) -> tuple[int, int]:
    """Delete a post, its comments and every vote on either.

    Order: votes on the comments, the comments, votes on the post, the post.

    Returns:
        (comments_deleted, votes_deleted)
    """
    comments = await comment_service.get_comments_for_post(post_id)
    votes_deleted = await vote_service.cascade_delete_for_targets(
        [comment.id for comment in comments]
    )
    comments_deleted = await comment_service.delete_comments_for_post(post_id)

    votes_deleted += await vote_service.cascade_delete_for_targets([post_id])
    await post_service.delete_post(post_id)
    return comments_deleted, votes_deleted


class DeletePostUseCase:
    """Use case for deleting a post together with its comments and votes."""

    def __init__(
        self,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If user doesn't own the post
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        with logfire.span("delete_post.execute", post_id=request.post_id):
            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)
            if post.author_id != user_id:
                raise NotAuthorizedError("post", request.post_id, request.user_id)

            comments_deleted, votes_deleted = await delete_post_with_dependents(
                post_id, self.post_service, self.comment_service, self.vote_service
            )

            logfire.info(
                "Post deleted with dependents",
                post_id=request.post_id,
                comments_deleted=comments_deleted,
                votes_deleted=votes_deleted,
            )
            return DeletePostResponse(
                post_id=request.post_id,
                comments_deleted=comments_deleted,
                votes_deleted=votes_deleted,
            )
