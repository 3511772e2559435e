"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from blog.domain.model.comment import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        text: str,
    ) -> Comment:
        """Create a comment on a post.

        The caller is responsible for checking that the post exists.

        Args:
            post_id: Post ID
            author_id: Author user ID
            text: Comment text

        Returns:
            Created comment
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
        ):
            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                text=text,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created", comment_id=str(saved.id), post_id=str(post_id)
            )
            return saved

    async def save_comment(self, comment: Comment) -> Comment:
        """Persist changes to an existing comment."""
        with logfire.span("comment_service.save_comment", comment_id=str(comment.id)):
            return await self.comment_repository.save(comment)

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get all comments of a post, oldest first.

        Args:
            post_id: Post ID

        Returns:
            Comments on the post
        """
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_comments_by_author(self, author_id: UserId) -> list[Comment]:
        """Get a user's comments, newest first."""
        with logfire.span(
            "comment_service.get_comments_by_author", author_id=str(author_id)
        ):
            return await self.comment_repository.find_by_author(author_id)

    async def delete_comment(self, comment_id: CommentId) -> bool:
        """Delete a single comment row."""
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            logfire.info(
                "Comment deleted", comment_id=str(comment_id), deleted=deleted
            )
            return deleted

    async def delete_comments_for_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Returns:
            Number of comments deleted
        """
        with logfire.span(
            "comment_service.delete_comments_for_post", post_id=str(post_id)
        ):
            count = await self.comment_repository.delete_by_post(post_id)
            logfire.info("Comments deleted", post_id=str(post_id), count=count)
            return count

    async def add_to_total_votes(
        self, comment_id: CommentId, delta: int
    ) -> int | None:
        """Atomically add a delta to a comment's vote tally.

        Args:
            comment_id: Comment ID
            delta: Signed change to apply

        Returns:
            The new tally, or None if the comment no longer exists
        """
        with logfire.span(
            "comment_service.add_to_total_votes",
            comment_id=str(comment_id),
            delta=delta,
        ):
            total = await self.comment_repository.add_to_total_votes(comment_id, delta)
            logfire.info(
                "Comment tally adjusted", comment_id=str(comment_id), total=total
            )
            return total

    async def set_total_votes(self, comment_id: CommentId, total: int) -> int | None:
        """Overwrite a comment's vote tally with a recomputed value."""
        with logfire.span(
            "comment_service.set_total_votes", comment_id=str(comment_id), total=total
        ):
            return await self.comment_repository.set_total_votes(comment_id, total)
