"""Vote domain service.

The vote ledger records one signed vote per (user, item) and keeps the
item's ``total_votes`` in step with the recorded votes.

Tallies are only ever changed through an atomic SQL increment, and a vote
is only changed or removed if it still holds the value read a moment
before. A lost race re-reads the vote and decides again, up to
``voting.max_attempts`` times.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence
from uuid import UUID, uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from blog.config import VotingSettings
from blog.domain.error import InvalidVoteValueError, NotFoundError, VoteConflictError
from blog.domain.model import Comment, Post, Vote
from blog.domain.repository import VoteRepository
from blog.domain.value import (
    CastStatus,
    CommentId,
    PostId,
    RetractStatus,
    UserId,
    VotableType,
    VoteId,
    VoteValue,
)

from .base import Service
from .comment_service import CommentService
from .post_service import PostService


@dataclass(frozen=True)
class CastResult:
    """Outcome of a cast-or-change."""

    status: CastStatus
    vote: Vote
    total_votes: int


@dataclass(frozen=True)
class RetractResult:
    """Outcome of a retract. ``vote`` is the removed vote, if any."""

    status: RetractStatus
    vote: Vote | None
    total_votes: int


def parse_vote_value(value: object, votable_id: UUID) -> VoteValue:
    """Coerce a raw vote value, rejecting anything but -1, 0 and 1.

    Raises:
        InvalidVoteValueError: If the value is out of range or not an integer
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidVoteValueError(value, votable_id)
    try:
        return VoteValue(value)
    except ValueError:
        raise InvalidVoteValueError(value, votable_id)


def parse_vote_text(raw: str | None, votable_id: UUID) -> VoteValue:
    """Parse a vote value sent as text, e.g. a query parameter.

    Raises:
        InvalidVoteValueError: If the text is missing, not a whole number,
            or out of range
    """
    if raw is None:
        raise InvalidVoteValueError(raw, votable_id)
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidVoteValueError(raw, votable_id)
    return parse_vote_value(value, votable_id)


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        post_service: PostService,
        comment_service: CommentService,
        voting_settings: VotingSettings,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            post_service: Post domain service
            comment_service: Comment domain service
            voting_settings: Retry bound for concurrent vote changes
        """
        self.vote_repository = vote_repository
        self.post_service = post_service
        self.comment_service = comment_service
        self.max_attempts = max(1, voting_settings.max_attempts)

    async def cast_or_change_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
        value: int,
    ) -> CastResult:
        """Cast a first vote or change an existing one.

        Args:
            user_id: Authenticated voter
            votable_type: Post or comment
            votable_id: ID of the item
            value: -1, 0 or +1

        Returns:
            Status, the stored vote and the item's new tally

        Raises:
            InvalidVoteValueError: If value is not -1, 0 or +1
            NotFoundError: If the item does not exist
            VoteConflictError: If the vote kept changing concurrently
        """
        with logfire.span(
            "vote_service.cast_or_change_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
            value=value,
        ):
            vote_value = parse_vote_value(value, votable_id)
            await self._get_target(votable_type, votable_id)

            for attempt in range(1, self.max_attempts + 1):
                existing = await self.vote_repository.find_by_user_and_votable(
                    user_id, votable_type, votable_id
                )

                if existing is None:
                    now = datetime.now()
                    vote = Vote(
                        id=VoteId(uuid4()),
                        user_id=user_id,
                        votable_type=votable_type,
                        votable_id=votable_id,
                        value=vote_value,
                        created_at=now,
                        updated_at=now,
                    )
                    try:
                        saved = await self.vote_repository.save(vote)
                    except IntegrityError:
                        # Another request cast first; decide again against it
                        logfire.warn(
                            "Concurrent first vote",
                            user_id=str(user_id),
                            votable_id=str(votable_id),
                            attempt=attempt,
                        )
                        continue

                    total = await self._add_to_total(
                        votable_type, votable_id, int(vote_value)
                    )
                    logfire.info(
                        "Vote cast",
                        user_id=str(user_id),
                        votable_id=str(votable_id),
                        value=int(vote_value),
                        total=total,
                    )
                    return CastResult(CastStatus.CREATED, saved, total)

                if existing.value == vote_value:
                    target = await self._get_target(votable_type, votable_id)
                    logfire.info(
                        "Duplicate vote",
                        user_id=str(user_id),
                        votable_id=str(votable_id),
                        value=int(vote_value),
                    )
                    return CastResult(
                        CastStatus.DUPLICATE, existing, target.total_votes
                    )

                updated = await self.vote_repository.update_value(
                    existing.id, existing.value, vote_value
                )
                if updated is None:
                    logfire.warn(
                        "Vote changed concurrently",
                        vote_id=str(existing.id),
                        attempt=attempt,
                    )
                    continue

                total = await self._add_to_total(
                    votable_type, votable_id, int(vote_value) - int(existing.value)
                )
                logfire.info(
                    "Vote changed",
                    user_id=str(user_id),
                    votable_id=str(votable_id),
                    old_value=int(existing.value),
                    new_value=int(vote_value),
                    total=total,
                )
                return CastResult(CastStatus.UPDATED, updated, total)

            logfire.error(
                "Vote cast gave up",
                user_id=str(user_id),
                votable_id=str(votable_id),
                attempts=self.max_attempts,
            )
            raise VoteConflictError(votable_id, self.max_attempts)

    async def retract_vote(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> RetractResult:
        """Remove the caller's vote from an item.

        Retracting when there is no vote is a successful no-op.

        Args:
            user_id: Authenticated voter
            votable_type: Post or comment
            votable_id: ID of the item

        Returns:
            Status, the removed vote (if any) and the item's tally

        Raises:
            NotFoundError: If the item does not exist
            VoteConflictError: If the vote kept changing concurrently
        """
        with logfire.span(
            "vote_service.retract_vote",
            user_id=str(user_id),
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            await self._get_target(votable_type, votable_id)

            for attempt in range(1, self.max_attempts + 1):
                existing = await self.vote_repository.find_by_user_and_votable(
                    user_id, votable_type, votable_id
                )

                if existing is None:
                    target = await self._get_target(votable_type, votable_id)
                    logfire.info(
                        "No vote to remove",
                        user_id=str(user_id),
                        votable_id=str(votable_id),
                    )
                    return RetractResult(
                        RetractStatus.NOTHING_TO_REMOVE, None, target.total_votes
                    )

                deleted = await self.vote_repository.delete_if_value(
                    existing.id, existing.value
                )
                if not deleted:
                    logfire.warn(
                        "Vote changed concurrently",
                        vote_id=str(existing.id),
                        attempt=attempt,
                    )
                    continue

                total = await self._add_to_total(
                    votable_type, votable_id, -int(existing.value)
                )
                logfire.info(
                    "Vote removed",
                    user_id=str(user_id),
                    votable_id=str(votable_id),
                    value=int(existing.value),
                    total=total,
                )
                return RetractResult(RetractStatus.REMOVED, existing, total)

            logfire.error(
                "Vote retract gave up",
                user_id=str(user_id),
                votable_id=str(votable_id),
                attempts=self.max_attempts,
            )
            raise VoteConflictError(votable_id, self.max_attempts)

    async def retract_all_for_user(self, user_id: UserId) -> int:
        """Remove every vote a user has cast, taking each off its item's tally.

        Used before an account is deleted. Votes on items that no longer
        exist are removed without a tally write.

        Args:
            user_id: The voter

        Returns:
            Number of votes removed

        Raises:
            VoteConflictError: If the user's votes kept changing concurrently
        """
        with logfire.span("vote_service.retract_all_for_user", user_id=str(user_id)):
            removed = 0
            for attempt in range(1, self.max_attempts + 1):
                votes = await self.vote_repository.find_by_user(user_id)
                if not votes:
                    logfire.info(
                        "User votes retracted", user_id=str(user_id), removed=removed
                    )
                    return removed

                for vote in votes:
                    if not await self.vote_repository.delete_if_value(
                        vote.id, vote.value
                    ):
                        logfire.warn(
                            "Vote changed concurrently",
                            vote_id=str(vote.id),
                            attempt=attempt,
                        )
                        continue
                    await self._apply_delta(
                        vote.votable_type, vote.votable_id, -int(vote.value)
                    )
                    removed += 1

            if await self.vote_repository.find_by_user(user_id):
                logfire.error(
                    "User vote retract gave up",
                    user_id=str(user_id),
                    attempts=self.max_attempts,
                )
                raise VoteConflictError(user_id, self.max_attempts, "Votes by")

            logfire.info("User votes retracted", user_id=str(user_id), removed=removed)
            return removed

    async def list_all_votes(self) -> list[Vote]:
        """Get every recorded vote."""
        with logfire.span("vote_service.list_all_votes"):
            votes = await self.vote_repository.find_all()
            logfire.info("Votes listed", count=len(votes))
            return votes

    async def list_votes_for_targets(self, votable_ids: Sequence[UUID]) -> list[Vote]:
        """Get all votes on any of the given items.

        Args:
            votable_ids: Post and/or comment IDs

        Returns:
            Matching votes; empty input gives an empty list without a query
        """
        if not votable_ids:
            return []
        with logfire.span(
            "vote_service.list_votes_for_targets", count=len(votable_ids)
        ):
            return await self.vote_repository.find_by_votables(votable_ids)

    async def cascade_delete_for_targets(self, votable_ids: Sequence[UUID]) -> int:
        """Delete every vote on the given items.

        Tallies are left alone; the items themselves are about to go.

        Args:
            votable_ids: Post and/or comment IDs

        Returns:
            Number of votes deleted (zero is a valid outcome)
        """
        if not votable_ids:
            return 0
        with logfire.span(
            "vote_service.cascade_delete_for_targets", count=len(votable_ids)
        ):
            deleted = await self.vote_repository.delete_by_votables(votable_ids)
            logfire.info(
                "Votes cascade-deleted", targets=len(votable_ids), deleted=deleted
            )
            return deleted

    async def recompute_total_votes(
        self, votable_type: VotableType, votable_id: UUID
    ) -> int:
        """Rebuild an item's tally from its stored votes.

        Args:
            votable_type: Post or comment
            votable_id: ID of the item

        Returns:
            The recomputed tally

        Raises:
            NotFoundError: If the item does not exist
        """
        with logfire.span(
            "vote_service.recompute_total_votes",
            votable_type=votable_type.value,
            votable_id=str(votable_id),
        ):
            target = await self._get_target(votable_type, votable_id)
            total = await self.vote_repository.sum_by_votable(votable_type, votable_id)

            if votable_type == VotableType.POST:
                written = await self.post_service.set_total_votes(
                    PostId(votable_id), total
                )
            else:
                written = await self.comment_service.set_total_votes(
                    CommentId(votable_id), total
                )
            if written is None:
                raise NotFoundError(votable_type.value.capitalize(), str(votable_id))

            if target.total_votes != total:
                logfire.warn(
                    "Vote tally drift repaired",
                    votable_id=str(votable_id),
                    stored=target.total_votes,
                    recomputed=total,
                )
            return total

    async def _get_target(
        self, votable_type: VotableType, votable_id: UUID
    ) -> Post | Comment:
        if votable_type == VotableType.POST:
            target: Post | Comment | None = await self.post_service.get_post_by_id(
                PostId(votable_id)
            )
        else:
            target = await self.comment_service.get_comment_by_id(
                CommentId(votable_id)
            )

        if target is None:
            raise NotFoundError(votable_type.value.capitalize(), str(votable_id))
        return target

    async def _apply_delta(
        self, votable_type: VotableType, votable_id: UUID, delta: int
    ) -> int | None:
        if votable_type == VotableType.POST:
            return await self.post_service.add_to_total_votes(
                PostId(votable_id), delta
            )
        return await self.comment_service.add_to_total_votes(
            CommentId(votable_id), delta
        )

    async def _add_to_total(
        self, votable_type: VotableType, votable_id: UUID, delta: int
    ) -> int:
        total = await self._apply_delta(votable_type, votable_id, delta)

        # The item vanished between the existence check and the write
        if total is None:
            raise NotFoundError(votable_type.value.capitalize(), str(votable_id))
        return total
