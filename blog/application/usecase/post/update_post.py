"""Update post use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from blog.config import MediaSettings
from blog.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from blog.domain.repository import VoteRepository
from blog.domain.service import PostService, UserService
from blog.domain.value import PostId, UserId, VotableType

from .common import PostInfo, to_post_info


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None are not changed.
    """

    post_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    title: str | None = Field(default=None, min_length=1, max_length=100)
    content: str | None = Field(default=None, min_length=1, max_length=1000)
    avatar: str | None = None
    images: list[str] | None = None


class UpdatePostUseCase:
    """Use case for an author editing their post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_repository: VoteRepository,
        media_settings: MediaSettings,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            vote_repository: Vote repository
            media_settings: Image limit
        """
        self.post_service = post_service
        self.user_service = user_service
        self.vote_repository = vote_repository
        self.media_settings = media_settings

    async def execute(self, request: UpdatePostRequest) -> PostInfo:
        """Execute update post flow.

        Raises:
            NotFoundError: If the post does not exist
            NotAuthorizedError: If user doesn't own the post
            ValidationError: If too many images are attached
        """
        post_id = PostId(UUID(request.post_id))
        user_id = UserId(UUID(request.user_id))

        # 1. Retrieve existing post
        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        # 2. Check authorization (user owns post)
        if post.author_id != user_id:
            raise NotAuthorizedError("post", request.post_id, request.user_id)

        # 3. Apply changes
        updates: dict[str, object] = {}
        if request.title is not None:
            updates["title"] = request.title
        if request.content is not None:
            updates["content"] = request.content
        if request.avatar is not None:
            updates["avatar"] = request.avatar
        if request.images is not None:
            if len(request.images) > self.media_settings.max_images:
                raise ValidationError(
                    f"A post can have at most {self.media_settings.max_images} images"
                )
            updates["images"] = request.images

        if updates:
            updates["updated_at"] = datetime.now()
            post = await self.post_service.save_post(post.model_copy(update=updates))

        # 4. Get the author's own vote
        vote = await self.vote_repository.find_by_user_and_votable(
            user_id=user_id,
            votable_type=VotableType.POST,
            votable_id=post_id,
        )
        authors = await self.user_service.get_users_by_ids([post.author_id])

        return to_post_info(
            post, authors.get(post.author_id), int(vote.value) if vote else None
        )
