"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.post import DeletePostRequest, DeletePostUseCase
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    VoteRepository,
)
from blog.domain.service import VoteService
from blog.domain.value import UserId, VotableType
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_delete_post_removes_comments_and_all_votes(self, unit_env):
        """The post, its comments and every vote on either go together."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)

        author = UserId(uuid4())
        post = await post_repo.save(make_post(author_id=author))
        other_post = await post_repo.save(make_post())
        comment = await comment_repo.save(make_comment(post_id=post.id))
        await vote_service.cast_or_change_vote(
            UserId(uuid4()), VotableType.POST, post.id, 1
        )
        await vote_service.cast_or_change_vote(
            UserId(uuid4()), VotableType.COMMENT, comment.id, -1
        )
        await vote_service.cast_or_change_vote(
            UserId(uuid4()), VotableType.POST, other_post.id, 1
        )

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=str(author))
        )

        # Assert
        assert response.comments_deleted == 1
        assert response.votes_deleted == 2
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_id(comment.id) is None
        remaining = await vote_repo.find_all()
        assert [v.votable_id for v in remaining] == [other_post.id]

    @pytest.mark.asyncio
    async def test_delete_post_by_non_author_raises(self, unit_env):
        """Only the author may delete a post."""
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(post_id=str(post.id), user_id=str(uuid4()))
            )
        assert await post_repo.find_by_id(post.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_post_raises(self, unit_env):
        """Unknown posts are not found."""
        use_case = await unit_env.get(DeletePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(post_id=str(uuid4()), user_id=str(uuid4()))
            )
