"""Get comments use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.vote.common import viewer_votes
from blog.domain.error import NotFoundError
from blog.domain.service import CommentService, PostService, UserService, VoteService
from blog.domain.value import PostId, UserId

from .common import CommentInfo, to_comment_info


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentInfo]
    total: int


class GetCommentsUseCase:
    """Use case for listing the comments of a post, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post_id = PostId(UUID(request.post_id))

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        comments = await self.comment_service.get_comments_for_post(post_id)
        authors = await self.user_service.get_users_by_ids(
            [comment.author_id for comment in comments]
        )

        # One batch query for the viewer's votes on all comments
        user_votes: dict[UUID, int] = {}
        if request.user_id and comments:
            votes = await self.vote_service.list_votes_for_targets(
                [comment.id for comment in comments]
            )
            user_votes = viewer_votes(votes, UserId(UUID(request.user_id)))

        items = [
            to_comment_info(
                comment, authors.get(comment.author_id), user_votes.get(comment.id)
            )
            for comment in comments
        ]
        return GetCommentsResponse(comments=items, total=len(items))
