"""Unit tests for ListPostsUseCase and GetPostUseCase."""

from uuid import uuid4

import pytest

from blog.application.usecase.post import (
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.repository import PostRepository, UserRepository
from blog.domain.service import VoteService
from blog.domain.value import VotableType
from tests.conftest import make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_viewer_vote_only_for_authenticated_viewer(self, unit_env):
        """user_vote reflects the viewer's own vote and is None otherwise."""
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user(name="Author"))
        viewer = await user_repo.save(make_user(name="Viewer"))
        voted = await post_repo.save(make_post(author_id=author.id, title="Voted"))
        await post_repo.save(make_post(author_id=author.id, title="Untouched"))
        await vote_service.cast_or_change_vote(
            viewer.id, VotableType.POST, voted.id, -1
        )

        # Act
        as_viewer = await use_case.execute(ListPostsRequest(user_id=str(viewer.id)))
        anonymous = await use_case.execute(ListPostsRequest())

        # Assert
        assert as_viewer.total == 2
        by_title = {p.title: p for p in as_viewer.posts}
        assert by_title["Voted"].user_vote == -1
        assert by_title["Voted"].total_votes == -1
        assert by_title["Untouched"].user_vote is None
        assert all(p.user_vote is None for p in anonymous.posts)
        assert all(p.author_name == "Author" for p in anonymous.posts)

    @pytest.mark.asyncio
    async def test_empty_feed(self, unit_env):
        """No posts is an empty list, not an error."""
        use_case = await unit_env.get(ListPostsUseCase)

        response = await use_case.execute(ListPostsRequest(user_id=str(uuid4())))

        assert response.posts == []
        assert response.total == 0


class TestGetPostUseCase:
    """Tests for GetPostUseCase."""

    @pytest.mark.asyncio
    async def test_get_missing_post_raises(self, unit_env):
        """Unknown posts are not found."""
        use_case = await unit_env.get(GetPostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetPostRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_get_post_with_viewer_vote(self, unit_env):
        """The viewer's vote is included when authenticated."""
        # Arrange
        use_case = await unit_env.get(GetPostUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        viewer_id = uuid4()
        post = await post_repo.save(make_post())
        await vote_service.cast_or_change_vote(viewer_id, VotableType.POST, post.id, 0)

        # Act
        info = await use_case.execute(
            GetPostRequest(post_id=str(post.id), user_id=str(viewer_id))
        )

        # Assert
        assert info.user_vote == 0
        assert info.author_name is None
