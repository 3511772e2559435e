"""In-memory comment repository for testing."""

from typing import Optional

from blog.domain.model.comment import Comment
from blog.domain.repository.comment import CommentRepository
from blog.domain.value import CommentId, PostId, UserId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.comments.get(comment_id)

    async def find_by_post(self, post_id: PostId) -> list[Comment]:
        """Find comments on a post, oldest first."""
        comments = [c for c in self.comments.values() if c.post_id == post_id]
        return sorted(comments, key=lambda c: c.created_at)

    async def find_by_author(self, author_id: UserId) -> list[Comment]:
        """Find comments by author, newest first."""
        comments = [c for c in self.comments.values() if c.author_id == author_id]
        return sorted(comments, key=lambda c: c.created_at, reverse=True)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment, keeping the stored tally on update."""
        existing = self.comments.get(comment.id)
        if existing:
            comment = comment.model_copy(update={"total_votes": existing.total_votes})
        self.comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self.comments.pop(comment_id, None) is not None

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment on a post."""
        doomed = [c.id for c in self.comments.values() if c.post_id == post_id]
        for comment_id in doomed:
            del self.comments[comment_id]
        return len(doomed)

    async def add_to_total_votes(
        self, comment_id: CommentId, delta: int
    ) -> Optional[int]:
        """Add a delta to the vote tally."""
        comment = self.comments.get(comment_id)
        if comment is None:
            return None
        return await self.set_total_votes(comment_id, comment.total_votes + delta)

    async def set_total_votes(
        self, comment_id: CommentId, total: int
    ) -> Optional[int]:
        """Overwrite the vote tally."""
        comment = self.comments.get(comment_id)
        if comment is None:
            return None
        self.comments[comment_id] = comment.model_copy(update={"total_votes": total})
        return total
