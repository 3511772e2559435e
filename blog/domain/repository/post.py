"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from blog.domain.model.post import Post
from blog.domain.value import PostId, UserId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find all posts, oldest first."""
        pass

    @abstractmethod
    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, oldest first."""
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        ``total_votes`` is not written on update; it belongs to the vote
        ledger and changes only through ``add_to_total_votes`` and
        ``set_total_votes``.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Delete a post.

        Args:
            post_id: The post ID to delete

        Returns:
            True if a post was deleted
        """
        pass

    @abstractmethod
    async def add_to_total_votes(self, post_id: PostId, delta: int) -> Optional[int]:
        """Atomically add ``delta`` to the post's total votes.

        Uses a store-level increment to avoid read-modify-write races.
        No clamping is applied.

        Args:
            post_id: The post ID
            delta: Signed amount to add

        Returns:
            The new total, or None if the post does not exist
        """
        pass

    @abstractmethod
    async def set_total_votes(self, post_id: PostId, total: int) -> Optional[int]:
        """Overwrite the post's total votes.

        Args:
            post_id: The post ID
            total: New total

        Returns:
            The new total, or None if the post does not exist
        """
        pass
