"""Post domain service."""

import logfire

from blog.domain.model.post import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)

            if post:
                logfire.info("Post found", post_id=str(post_id), title=post.title)
            else:
                logfire.warn("Post not found", post_id=str(post_id))

            return post

    async def get_posts(self) -> list[Post]:
        """Get every post, oldest first."""
        with logfire.span("post_service.get_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts retrieved", count=len(posts))
            return posts

    async def get_posts_by_author(self, author_id: UserId) -> list[Post]:
        """Get the posts written by a user."""
        with logfire.span(
            "post_service.get_posts_by_author", author_id=str(author_id)
        ):
            return await self.post_repository.find_by_author(author_id)

    async def delete_post(self, post_id: PostId) -> bool:
        """Delete a post row.

        Votes and comments must already be gone; see the delete post use case.

        Args:
            post_id: Post ID

        Returns:
            True if the post was deleted
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            deleted = await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id), deleted=deleted)
            return deleted

    async def add_to_total_votes(self, post_id: PostId, delta: int) -> int | None:
        """Atomically add a delta to a post's vote tally.

        Uses an SQL-level increment to avoid lost updates.

        Args:
            post_id: Post ID
            delta: Signed change to apply

        Returns:
            The new tally, or None if the post no longer exists
        """
        with logfire.span(
            "post_service.add_to_total_votes", post_id=str(post_id), delta=delta
        ):
            total = await self.post_repository.add_to_total_votes(post_id, delta)
            logfire.info("Post tally adjusted", post_id=str(post_id), total=total)
            return total

    async def set_total_votes(self, post_id: PostId, total: int) -> int | None:
        """Overwrite a post's vote tally with a recomputed value."""
        with logfire.span(
            "post_service.set_total_votes", post_id=str(post_id), total=total
        ):
            return await self.post_repository.set_total_votes(post_id, total)
