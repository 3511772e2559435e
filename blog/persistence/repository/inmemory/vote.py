"""In-memory vote repository for testing."""

from datetime import datetime
from typing import Optional, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from blog.domain.model.vote import Vote
from blog.domain.repository.vote import VoteRepository
from blog.domain.value import UserId, VotableType, VoteId, VoteValue


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_user(self, user_id: UserId) -> list[Vote]:
        """Find every vote a user has cast, oldest first."""
        return [v for v in await self.find_all() if v.user_id == user_id]

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a vote by user and votable item."""
        votable_uuid = UUID(str(votable_id))
        for vote in self._votes.values():
            if (
                vote.user_id == user_id
                and vote.votable_type == votable_type
                and vote.votable_id == votable_uuid
            ):
                return vote
        return None

    async def find_all(self) -> list[Vote]:
        """Find every vote, oldest first."""
        return sorted(self._votes.values(), key=lambda v: v.created_at)

    async def find_by_votables(self, votable_ids: Sequence[UUID]) -> list[Vote]:
        """Find all votes on any of the given items."""
        wanted = {UUID(str(v)) for v in votable_ids}
        return [v for v in await self.find_all() if v.votable_id in wanted]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If vote already exists (duplicate)
        """
        existing = await self.find_by_user_and_votable(
            vote.user_id, vote.votable_type, vote.votable_id
        )
        if existing:
            raise IntegrityError("Duplicate vote", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def update_value(
        self, vote_id: VoteId, expected: VoteValue, value: VoteValue
    ) -> Optional[Vote]:
        """Compare-and-swap a vote's value."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.value != expected:
            return None

        updated = vote.model_copy(update={"value": value, "updated_at": datetime.now()})
        self._votes[vote_id] = updated
        return updated

    async def delete_if_value(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote only if it still holds the expected value."""
        vote = self._votes.get(vote_id)
        if vote is None or vote.value != expected:
            return False

        del self._votes[vote_id]
        return True

    async def delete_by_votables(self, votable_ids: Sequence[UUID]) -> int:
        """Delete every vote on any of the given items."""
        wanted = {UUID(str(v)) for v in votable_ids}
        doomed = [v.id for v in self._votes.values() if v.votable_id in wanted]
        for vote_id in doomed:
            del self._votes[vote_id]
        return len(doomed)

    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item."""
        return sum(
            int(v.value)
            for v in self._votes.values()
            if v.votable_type == votable_type and v.votable_id == votable_id
        )
