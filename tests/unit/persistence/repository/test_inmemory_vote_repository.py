"""Unit tests for the in-memory vote repository's conditional writes."""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from blog.domain.model import Vote
from blog.domain.value import UserId, VotableType, VoteId, VoteValue
from blog.persistence.repository.inmemory import InMemoryVoteRepository


def make_vote(value: VoteValue = VoteValue.UP, user_id=None, votable_id=None) -> Vote:
    return Vote(
        id=VoteId(uuid4()),
        user_id=user_id or UserId(uuid4()),
        votable_type=VotableType.POST,
        votable_id=votable_id or uuid4(),
        value=value,
    )


class TestConditionalWrites:
    """update_value and delete_if_value only act on the expected value."""

    @pytest.mark.asyncio
    async def test_update_value_with_stale_expectation_is_none(self):
        """A stale expected value leaves the vote alone."""
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote(VoteValue.UP))

        assert await repo.update_value(vote.id, VoteValue.DOWN, VoteValue.NEUTRAL) is None
        assert (await repo.find_by_user(vote.user_id))[0].value == VoteValue.UP

    @pytest.mark.asyncio
    async def test_update_value_with_current_expectation(self):
        """A matching expected value swaps in the new one."""
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote(VoteValue.UP))

        updated = await repo.update_value(vote.id, VoteValue.UP, VoteValue.DOWN)

        assert updated is not None
        assert updated.value == VoteValue.DOWN
        assert updated.user_id == vote.user_id

    @pytest.mark.asyncio
    async def test_delete_if_value(self):
        """Deletion only happens when the value still matches."""
        repo = InMemoryVoteRepository()
        vote = await repo.save(make_vote(VoteValue.NEUTRAL))

        assert await repo.delete_if_value(vote.id, VoteValue.UP) is False
        assert await repo.delete_if_value(vote.id, VoteValue.NEUTRAL) is True
        assert await repo.find_by_user(vote.user_id) == []

    @pytest.mark.asyncio
    async def test_second_vote_for_same_pair_violates_uniqueness(self):
        """One vote per user per item."""
        repo = InMemoryVoteRepository()
        user_id, votable_id = UserId(uuid4()), uuid4()
        await repo.save(make_vote(user_id=user_id, votable_id=votable_id))

        with pytest.raises(IntegrityError):
            await repo.save(
                make_vote(VoteValue.DOWN, user_id=user_id, votable_id=votable_id)
            )

    @pytest.mark.asyncio
    async def test_sum_by_votable(self):
        """The sum covers only the given item."""
        repo = InMemoryVoteRepository()
        votable_id = uuid4()
        for value in (VoteValue.UP, VoteValue.UP, VoteValue.DOWN, VoteValue.NEUTRAL):
            await repo.save(make_vote(value, votable_id=votable_id))
        await repo.save(make_vote(VoteValue.DOWN))

        assert await repo.sum_by_votable(VotableType.POST, votable_id) == 1
        assert await repo.sum_by_votable(VotableType.POST, uuid4()) == 0

    @pytest.mark.asyncio
    async def test_find_by_user_only_returns_that_voters_votes(self):
        """Votes by other users are not included."""
        repo = InMemoryVoteRepository()
        user_id = UserId(uuid4())
        mine = [await repo.save(make_vote(user_id=user_id)) for _ in range(2)]
        await repo.save(make_vote())

        found = await repo.find_by_user(user_id)

        assert {v.id for v in found} == {v.id for v in mine}
