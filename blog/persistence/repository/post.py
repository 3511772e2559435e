"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from blog.domain.model import Post
from blog.domain.repository import PostRepository
from blog.domain.value import PostId, UserId
from blog.persistence.mappers import post_to_dict, row_to_post
from blog.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

    async def find_all(self) -> List[Post]:
        """Find every post, oldest first."""
        with logfire.span("post_repository.find_all"):
            stmt = select(posts_table).order_by(posts_table.c.created_at)
            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]
            logfire.info("Found posts", count=len(posts))
            return posts

    async def find_by_author(self, author_id: UserId) -> List[Post]:
        """Find posts by a specific author, newest first."""
        stmt = (
            select(posts_table)
            .where(posts_table.c.author_id == author_id)
            .order_by(posts_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update).

        An update never touches ``total_votes``.
        """
        with logfire.span("post_repository.save", post_id=str(post.id)):
            post_dict = post_to_dict(post)

            stmt = (
                update(posts_table)
                .where(posts_table.c.id == post.id)
                .values(**post_dict)
                .returning(posts_table.c.total_votes)
            )
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if row is None:
                logfire.info("Inserting new post", post_id=str(post.id))
                await self.session.execute(
                    posts_table.insert().values(
                        **post_dict, total_votes=post.total_votes
                    )
                )
                await self.session.flush()
                return post

            await self.session.flush()
            return post.model_copy(update={"total_votes": row.total_votes})

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post (hard delete)."""
        stmt = posts_table.delete().where(posts_table.c.id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def add_to_total_votes(self, post_id: PostId, delta: int) -> Optional[int]:
        """Atomically add a delta to the vote tally."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(total_votes=posts_table.c.total_votes + delta)
            .returning(posts_table.c.total_votes)
        )
        result = await self.session.execute(stmt)
        total = result.scalar_one_or_none()
        await self.session.flush()
        return total

    async def set_total_votes(self, post_id: PostId, total: int) -> Optional[int]:
        """Overwrite the vote tally."""
        stmt = (
            update(posts_table)
            .where(posts_table.c.id == post_id)
            .values(total_votes=total)
            .returning(posts_table.c.total_votes)
        )
        result = await self.session.execute(stmt)
        written = result.scalar_one_or_none()
        await self.session.flush()
        return written
