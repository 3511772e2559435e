"""Get post use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.domain.error import NotFoundError
from blog.domain.repository import VoteRepository
from blog.domain.service import PostService, UserService
from blog.domain.value import PostId, UserId, VotableType

from .common import PostInfo, to_post_info


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # UUID string
    user_id: str | None = None  # Current user ID (if authenticated)


class GetPostUseCase:
    """Use case for getting a single post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_repository: VoteRepository,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            vote_repository: Vote repository
        """
        self.post_service = post_service
        self.user_service = user_service
        self.vote_repository = vote_repository

    async def execute(self, request: GetPostRequest) -> PostInfo:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post does not exist
        """
        post = await self.post_service.get_post_by_id(PostId(UUID(request.post_id)))
        if post is None:
            raise NotFoundError("Post", request.post_id)

        authors = await self.user_service.get_users_by_ids([post.author_id])

        user_vote = None
        if request.user_id:
            vote = await self.vote_repository.find_by_user_and_votable(
                user_id=UserId(UUID(request.user_id)),
                votable_type=VotableType.POST,
                votable_id=post.id,
            )
            user_vote = int(vote.value) if vote else None

        return to_post_info(post, authors.get(post.author_id), user_vote)
