"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from blog.domain.service import CommentService
from blog.domain.value import CommentId, PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_starts_with_zero_votes(self, unit_env):
        """New comments start at a zero tally."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_id = PostId(uuid4())
        author_id = UserId(uuid4())

        # Act
        comment = await comment_service.create_comment(post_id, author_id, "Nice")

        # Assert
        assert comment.total_votes == 0
        assert comment.post_id == post_id
        assert comment.author_id == author_id
        assert await comment_service.get_comment_by_id(comment.id) == comment


class TestCommentQueries:
    """Tests for per-post and per-author queries."""

    @pytest.mark.asyncio
    async def test_comments_for_post_and_author(self, unit_env):
        """Comments are scoped to their post and their author."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_a, post_b = PostId(uuid4()), PostId(uuid4())
        alice, bob = UserId(uuid4()), UserId(uuid4())
        first = await comment_service.create_comment(post_a, alice, "first")
        second = await comment_service.create_comment(post_a, bob, "second")
        await comment_service.create_comment(post_b, alice, "elsewhere")

        # Act
        on_a = await comment_service.get_comments_for_post(post_a)
        by_bob = await comment_service.get_comments_by_author(bob)

        # Assert
        assert [c.id for c in on_a] == [first.id, second.id]
        assert [c.id for c in by_bob] == [second.id]

    @pytest.mark.asyncio
    async def test_delete_comments_for_post_counts(self, unit_env):
        """Bulk deletion only touches the given post."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post_a, post_b = PostId(uuid4()), PostId(uuid4())
        author = UserId(uuid4())
        await comment_service.create_comment(post_a, author, "one")
        await comment_service.create_comment(post_a, author, "two")
        survivor = await comment_service.create_comment(post_b, author, "three")

        # Act
        deleted = await comment_service.delete_comments_for_post(post_a)

        # Assert
        assert deleted == 2
        assert await comment_service.get_comments_for_post(post_a) == []
        assert await comment_service.get_comment_by_id(survivor.id) is not None

    @pytest.mark.asyncio
    async def test_tally_on_missing_comment_is_none(self, unit_env):
        """Tally writes on an unknown comment report None."""
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.add_to_total_votes(CommentId(uuid4()), 1) is None
