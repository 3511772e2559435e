"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

import logfire
from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Comment
from blog.domain.repository import CommentRepository
from blog.domain.value import CommentId, PostId, UserId
from blog.persistence.mappers import comment_to_dict, row_to_comment
from blog.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Comment]:
        """Find all comments on a post, oldest first."""
        with logfire.span("comment_repository.find_by_post", post_id=str(post_id)):
            stmt = (
                select(comments_table)
                .where(comments_table.c.post_id == post_id)
                .order_by(comments_table.c.created_at)
            )
            result = await self.session.execute(stmt)
            return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_by_author(self, author_id: UserId) -> List[Comment]:
        """Find all comments by a user, newest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.author_id == author_id)
            .order_by(comments_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update), never touching the tally."""
        comment_dict = comment_to_dict(comment)

        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment.id)
            .values(**comment_dict)
            .returning(comments_table.c.total_votes)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            await self.session.execute(
                comments_table.insert().values(
                    **comment_dict, total_votes=comment.total_votes
                )
            )
            await self.session.flush()
            return comment

        await self.session.flush()
        return comment.model_copy(update={"total_votes": row.total_votes})

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        stmt = delete(comments_table).where(comments_table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def add_to_total_votes(
        self, comment_id: CommentId, delta: int
    ) -> Optional[int]:
        """Atomically add a delta to the vote tally."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(total_votes=comments_table.c.total_votes + delta)
            .returning(comments_table.c.total_votes)
        )
        result = await self.session.execute(stmt)
        total = result.scalar_one_or_none()
        await self.session.flush()
        return total

    async def set_total_votes(
        self, comment_id: CommentId, total: int
    ) -> Optional[int]:
        """Overwrite the vote tally."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(total_votes=total)
            .returning(comments_table.c.total_votes)
        )
        result = await self.session.execute(stmt)
        written = result.scalar_one_or_none()
        await self.session.flush()
        return written
