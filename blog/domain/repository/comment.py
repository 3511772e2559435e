"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.comment import Comment
from blog.domain.value import CommentId, PostId, UserId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments for a post, oldest first.

        Args:
            post_id: The post ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find comments by a specific author, newest first.

        Args:
            author_id: The author's user ID

        Returns:
            List of comments by the author
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        ``total_votes`` is not written on update; it belongs to the vote
        ledger.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment.

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a comment was deleted
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass

    @abstractmethod
    async def add_to_total_votes(
        self, comment_id: CommentId, delta: int
    ) -> Optional[int]:
        """Atomically add ``delta`` to the comment's total votes.

        Args:
            comment_id: The comment ID
            delta: Signed amount to add

        Returns:
            The new total, or None if the comment does not exist
        """
        pass

    @abstractmethod
    async def set_total_votes(
        self, comment_id: CommentId, total: int
    ) -> Optional[int]:
        """Overwrite the comment's total votes.

        Returns:
            The new total, or None if the comment does not exist
        """
        pass
