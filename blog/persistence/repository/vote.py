"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List, Optional, Sequence
from uuid import UUID

import logfire
from sqlalchemy import and_, delete, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Vote
from blog.domain.repository import VoteRepository
from blog.domain.value import UserId, VotableType, VoteId, VoteValue
from blog.persistence.mappers import row_to_vote, vote_to_dict
from blog.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_user(self, user_id: UserId) -> List[Vote]:
        """Find every vote a user has cast, oldest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.user_id == user_id)
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_user_and_votable(
        self,
        user_id: UserId,
        votable_type: VotableType,
        votable_id: UUID,
    ) -> Optional[Vote]:
        """Find a user's vote on a specific item."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.votable_type == votable_type.value,
                votes_table.c.votable_id == votable_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_all(self) -> List[Vote]:
        """Find every vote, oldest first."""
        with logfire.span("vote_repository.find_all"):
            stmt = select(votes_table).order_by(votes_table.c.created_at)
            result = await self.session.execute(stmt)
            return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def find_by_votables(self, votable_ids: Sequence[UUID]) -> List[Vote]:
        """Find all votes on any of the given items (batch query)."""
        if not votable_ids:
            return []

        stmt = (
            select(votes_table)
            .where(votes_table.c.votable_id.in_(list(votable_ids)))
            .order_by(votes_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a new vote.

        Runs in a savepoint so a unique-constraint violation leaves the
        surrounding transaction usable.
        """
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return vote

    async def update_value(
        self, vote_id: VoteId, expected: VoteValue, value: VoteValue
    ) -> Optional[Vote]:
        """Compare-and-swap a vote's value."""
        stmt = (
            update(votes_table)
            .where(
                votes_table.c.id == vote_id,
                votes_table.c.value == int(expected),
            )
            .values(value=int(value), updated_at=datetime.now())
            .returning(votes_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_vote(row._asdict()) if row else None

    async def delete_if_value(self, vote_id: VoteId, expected: VoteValue) -> bool:
        """Delete a vote only if it still holds the expected value."""
        stmt = delete(votes_table).where(
            votes_table.c.id == vote_id,
            votes_table.c.value == int(expected),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_votables(self, votable_ids: Sequence[UUID]) -> int:
        """Delete every vote on any of the given items."""
        if not votable_ids:
            return 0

        with logfire.span("vote_repository.delete_by_votables", count=len(votable_ids)):
            stmt = delete(votes_table).where(
                votes_table.c.votable_id.in_(list(votable_ids))
            )
            result = await self.session.execute(stmt)
            await self.session.flush()
            return result.rowcount  # type: ignore[attr-defined]

    async def sum_by_votable(self, votable_type: VotableType, votable_id: UUID) -> int:
        """Sum the values of all votes on an item."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.votable_type == votable_type.value,
            votes_table.c.votable_id == votable_id,
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
