"""Unit tests for the comment use cases."""

from uuid import uuid4

import pytest

from blog.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    GetUserCommentsRequest,
    GetUserCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from blog.domain.error import NotFoundError
from blog.domain.repository import (
    CommentRepository,
    PostRepository,
    UserRepository,
    VoteRepository,
)
from blog.domain.service import VoteService
from blog.domain.value import UserId, VotableType
from tests.conftest import make_comment, make_post, make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_on_existing_post(self, unit_env):
        """Comments start with no votes and carry their author."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user(name="Commenter"))
        post = await post_repo.save(make_post())

        # Act
        info = await use_case.execute(
            CreateCommentRequest(
                post_id=str(post.id), author_id=str(author.id), text="Great read"
            )
        )

        # Assert
        assert info.post_id == str(post.id)
        assert info.text == "Great read"
        assert info.total_votes == 0
        assert info.author_name == "Commenter"

    @pytest.mark.asyncio
    async def test_create_comment_on_missing_post_raises(self, unit_env):
        """The post must exist."""
        use_case = await unit_env.get(CreateCommentUseCase)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())

        with pytest.raises(NotFoundError, match="Post"):
            await use_case.execute(
                CreateCommentRequest(
                    post_id=str(uuid4()), author_id=str(author.id), text="Hello?"
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase and GetUserCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_comments_include_viewer_votes(self, unit_env):
        """Each comment reports the viewer's vote, if any."""
        # Arrange
        use_case = await unit_env.get(GetCommentsUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        viewer = UserId(uuid4())
        post = await post_repo.save(make_post())
        liked = await comment_repo.save(make_comment(post_id=post.id, text="liked"))
        await comment_repo.save(make_comment(post_id=post.id, text="ignored"))
        await vote_service.cast_or_change_vote(
            viewer, VotableType.COMMENT, liked.id, 1
        )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(post_id=str(post.id), user_id=str(viewer))
        )

        # Assert
        assert response.total == 2
        votes = {c.text: c.user_vote for c in response.comments}
        assert votes == {"liked": 1, "ignored": None}

    @pytest.mark.asyncio
    async def test_comments_of_missing_post_raise(self, unit_env):
        """Listing comments of an unknown post is not found."""
        use_case = await unit_env.get(GetCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCommentsRequest(post_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_user_comments_carry_post_title(self, unit_env):
        """A user's own comments are listed with their post's title."""
        # Arrange
        use_case = await unit_env.get(GetUserCommentsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = UserId(uuid4())
        post = await post_repo.save(make_post(title="Hosting post"))
        await comment_repo.save(make_comment(post_id=post.id, author_id=author))
        await comment_repo.save(make_comment(post_id=post.id))

        # Act
        response = await use_case.execute(GetUserCommentsRequest(user_id=str(author)))

        # Assert
        assert response.total == 1
        assert response.comments[0].post_title == "Hosting post"


class TestUpdateAndDeleteComment:
    """Tests for UpdateCommentUseCase and DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_update_comment_keeps_tally(self, unit_env):
        """Editing a comment must not reset its votes."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        user_repo = await unit_env.get(UserRepository)
        author = await user_repo.save(make_user())
        post = await post_repo.save(make_post())
        comment = await comment_repo.save(
            make_comment(post_id=post.id, author_id=author.id, text="Original")
        )
        await vote_service.cast_or_change_vote(
            UserId(uuid4()), VotableType.COMMENT, comment.id, 1
        )

        # Act
        info = await use_case.execute(
            UpdateCommentRequest(
                post_id=str(post.id),
                comment_id=str(comment.id),
                user_id=str(author.id),
                text="Edited",
            )
        )

        # Assert
        assert info.text == "Edited"
        assert info.total_votes == 1
        assert info.user_vote is None

    @pytest.mark.asyncio
    async def test_update_someone_elses_comment_is_not_found(self, unit_env):
        """Comments of other users are invisible to update."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        comment = await comment_repo.save(make_comment(post_id=post.id))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    post_id=str(post.id),
                    comment_id=str(comment.id),
                    user_id=str(uuid4()),
                    text="Hijack",
                )
            )

    @pytest.mark.asyncio
    async def test_comment_under_wrong_post_is_not_found(self, unit_env):
        """The comment must belong to the post in the request."""
        use_case = await unit_env.get(DeleteCommentUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = UserId(uuid4())
        post = await post_repo.save(make_post())
        other = await post_repo.save(make_post())
        comment = await comment_repo.save(
            make_comment(post_id=post.id, author_id=author)
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeleteCommentRequest(
                    post_id=str(other.id),
                    comment_id=str(comment.id),
                    user_id=str(author),
                )
            )

    @pytest.mark.asyncio
    async def test_delete_comment_removes_its_votes(self, unit_env):
        """Deleting a comment cascades to its votes."""
        # Arrange
        use_case = await unit_env.get(DeleteCommentUseCase)
        vote_service = await unit_env.get(VoteService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        vote_repo = await unit_env.get(VoteRepository)
        author = UserId(uuid4())
        post = await post_repo.save(make_post())
        comment = await comment_repo.save(
            make_comment(post_id=post.id, author_id=author)
        )
        for value in (1, -1, 1):
            await vote_service.cast_or_change_vote(
                UserId(uuid4()), VotableType.COMMENT, comment.id, value
            )

        # Act
        response = await use_case.execute(
            DeleteCommentRequest(
                post_id=str(post.id), comment_id=str(comment.id), user_id=str(author)
            )
        )

        # Assert
        assert response.votes_deleted == 3
        assert await comment_repo.find_by_id(comment.id) is None
        assert await vote_repo.find_all() == []
