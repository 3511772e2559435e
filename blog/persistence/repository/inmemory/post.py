"""In-memory post repository for testing."""

from typing import Optional

from blog.domain.model.post import Post
from blog.domain.repository.post import PostRepository
from blog.domain.value import PostId, UserId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self.posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self.posts.get(post_id)

    async def find_all(self) -> list[Post]:
        """Find every post, oldest first."""
        return sorted(self.posts.values(), key=lambda p: p.created_at)

    async def find_by_author(self, author_id: UserId) -> list[Post]:
        """Find posts by author, newest first."""
        posts = [p for p in self.posts.values() if p.author_id == author_id]
        return sorted(posts, key=lambda p: p.created_at, reverse=True)

    async def save(self, post: Post) -> Post:
        """Save a post, keeping the stored tally on update."""
        existing = self.posts.get(post.id)
        if existing:
            post = post.model_copy(update={"total_votes": existing.total_votes})
        self.posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Delete a post."""
        return self.posts.pop(post_id, None) is not None

    async def add_to_total_votes(self, post_id: PostId, delta: int) -> Optional[int]:
        """Add a delta to the vote tally."""
        post = self.posts.get(post_id)
        if post is None:
            return None
        return await self.set_total_votes(post_id, post.total_votes + delta)

    async def set_total_votes(self, post_id: PostId, total: int) -> Optional[int]:
        """Overwrite the vote tally."""
        post = self.posts.get(post_id)
        if post is None:
            return None
        self.posts[post_id] = post.model_copy(update={"total_votes": total})
        return total
