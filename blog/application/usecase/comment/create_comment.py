"""Create comment use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from blog.domain.error import NotFoundError
from blog.domain.service import CommentService, PostService, UserService
from blog.domain.value import PostId, UserId

from .common import CommentInfo, to_comment_info


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    author_id: str  # User ID from authenticated user
    text: str = Field(default="", max_length=1000)


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            user_service: User domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.user_service = user_service

    async def execute(self, request: CreateCommentRequest) -> CommentInfo:
        """Execute create comment flow.

        Raises:
            NotFoundError: If the post or author does not exist
        """
        post_id = PostId(UUID(request.post_id))
        author_id = UserId(UUID(request.author_id))

        with logfire.span("create_comment.execute", post_id=request.post_id):
            author = await self.user_service.get_by_id(author_id)

            post = await self.post_service.get_post_by_id(post_id)
            if post is None:
                raise NotFoundError("Post", request.post_id)

            comment = await self.comment_service.create_comment(
                post_id=post_id,
                author_id=author_id,
                text=request.text,
            )
            return to_comment_info(comment, author)
