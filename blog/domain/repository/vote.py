"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from uuid import UUID

from blog.domain.model.vote import Vote
from blog.domain.value import UserId, VotableType, VoteId, VoteValue


class VoteRepository(ABC):
    """Repository for Vote entity.

    Defines the contract for vote persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find every vote a user has cast.

        Args:
            user_id: The voter's ID

        Returns:
            The user's votes, oldest first
        """
        pass

    @abstractmethod
    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item.

        Args:
            user_id: The user's ID
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Vote]:
        """Find every recorded vote.

        Returns:
            All votes, oldest first
        """
        pass

    @abstractmethod
    async def find_by_votables(self, votable_ids: Sequence[UUID]) -> List[Vote]:
        """Find all votes on any of the given items (batch query).

        Args:
            votable_ids: IDs of posts and/or comments

        Returns:
            Votes whose votable_id is in the given set
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a new vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If a vote already exists for this user/votable
        """
        pass

    @abstractmethod
    async def update_value(
        self, vote_id: VoteId, expected: VoteValue, value: VoteValue
    ) -> Optional[Vote]:
        """Change a vote's value if it still holds the expected value.

        Compare-and-swap keyed on the previously read value.

        Args:
            vote_id: The vote ID
            expected: Value the caller last observed
            value: New value

        Returns:
            The updated vote, or None if the vote is gone or its value
            no longer matches ``expected``
        """
        pass

    @abstractmethod
    async def delete_if_value(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote if it still holds the expected value.

        Args:
            vote_id: The vote ID
            expected: Value the caller last observed

        Returns:
            True if the vote was deleted, False otherwise
        """
        pass

    @abstractmethod
    async def delete_by_votables(self, votable_ids: Sequence[UUID]) -> int:
        """Delete every vote on any of the given items.

        Args:
            votable_ids: IDs of posts and/or comments

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item.

        Args:
            votable_type: Type of item (post or comment)
            votable_id: ID of the item

        Returns:
            Sum of vote values (0 when there are none)
        """
        pass
