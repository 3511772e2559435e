"""Unit tests for RecomputeVotesUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.vote import (
    RecomputeVotesRequest,
    RecomputeVotesUseCase,
)
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.repository import CommentRepository, PostRepository, UserRepository
from blog.domain.service import VoteService
from blog.domain.value import UserId, VotableType
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRecomputeVotesUseCase:
    """Tests for RecomputeVotesUseCase."""

    @pytest.mark.asyncio
    async def test_admin_repairs_drifted_comment_tally(self, unit_env):
        """The tally is rewritten to the sum of the stored votes."""
        # Arrange
        use_case = await unit_env.get(RecomputeVotesUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        comment_repo = await unit_env.get(CommentRepository)
        admin = await user_repo.save(make_user(is_admin=True))
        comment = await comment_repo.save(make_comment(post_id=uuid4()))
        await vote_service.cast_or_change_vote(
            UserId(uuid4()), VotableType.COMMENT, comment.id, -1
        )
        await comment_repo.set_total_votes(comment.id, 7)

        # Act
        response = await use_case.execute(
            RecomputeVotesRequest(
                votable_type=VotableType.COMMENT,
                votable_id=str(comment.id),
                actor_id=str(admin.id),
            )
        )

        # Assert
        assert response.total_votes == -1
        assert (await comment_repo.find_by_id(comment.id)).total_votes == -1

    @pytest.mark.asyncio
    async def test_non_admin_is_rejected(self, unit_env):
        """Regular users may not rewrite tallies."""
        use_case = await unit_env.get(RecomputeVotesUseCase)
        user_repo = await unit_env.get(UserRepository)
        post_repo = await unit_env.get(PostRepository)
        actor = await user_repo.save(make_user())
        post = await post_repo.save(make_post(total_votes=4))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                RecomputeVotesRequest(
                    votable_type=VotableType.POST,
                    votable_id=str(post.id),
                    actor_id=str(actor.id),
                )
            )
        assert (await post_repo.find_by_id(post.id)).total_votes == 4

    @pytest.mark.asyncio
    async def test_missing_item_raises(self, unit_env):
        """Recomputing an unknown post is not found."""
        use_case = await unit_env.get(RecomputeVotesUseCase)
        user_repo = await unit_env.get(UserRepository)
        admin = await user_repo.save(make_user(is_admin=True))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                RecomputeVotesRequest(
                    votable_type=VotableType.POST,
                    votable_id=str(uuid4()),
                    actor_id=str(admin.id),
                )
            )
