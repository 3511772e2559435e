"""Create post use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel, Field

from blog.config import MediaSettings
from blog.domain.error import ValidationError
from blog.domain.model.post import Post
from blog.domain.service import PostService, UserService
from blog.domain.value import PostId, UserId

from .common import PostInfo, to_post_info


class CreatePostRequest(BaseModel):
    """Create post request."""

    author_id: str  # User ID from authenticated user
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    avatar: str | None = None  # Falls back to the configured default
    images: list[str] = Field(default_factory=list)


class CreatePostUseCase:
    """Use case for creating a new post."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        media_settings: MediaSettings,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            media_settings: Avatar default and image limit
        """
        self.post_service = post_service
        self.user_service = user_service
        self.media_settings = media_settings

    async def execute(self, request: CreatePostRequest) -> PostInfo:
        """Execute create post flow.

        Steps:
        1. Load the author (via UserService)
        2. Check the image limit
        3. Create and save the Post entity (via PostService)

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If too many images are attached
        """
        author_id = UserId(UUID(request.author_id))
        author = await self.user_service.get_by_id(author_id)  # Raises NotFoundError

        if len(request.images) > self.media_settings.max_images:
            raise ValidationError(
                f"A post can have at most {self.media_settings.max_images} images"
            )

        now = datetime.now()
        post = Post(
            id=PostId(uuid4()),
            title=request.title,
            content=request.content,
            avatar=request.avatar or self.media_settings.default_avatar,
            images=request.images,
            author_id=author_id,
            created_at=now,
            updated_at=now,
        )

        with logfire.span("create_post.execute", author_id=request.author_id):
            saved = await self.post_service.save_post(post)

        return to_post_info(saved, author)
