"""Delete user (admin) use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.post import delete_post_with_dependents
from blog.domain.error import NotAuthorizedError, NotFoundError
from blog.domain.service import CommentService, PostService, UserService, VoteService
from blog.domain.value import UserId


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    actor_id: str  # Current user ID (must be admin)
    user_id: str  # User being deleted


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    user_id: str
    deleted: bool
    votes_retracted: int
    posts_deleted: int
    comments_deleted: int


class DeleteUserUseCase:
    """Use case for an admin removing an account and everything it owns."""

    def __init__(
        self,
        user_service: UserService,
        post_service: PostService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize delete user use case.

        Args:
            user_service: User domain service
            post_service: Post domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.user_service = user_service
        self.post_service = post_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Steps:
        1. Retract the user's votes, adjusting the tallies they counted towards
        2. Delete the user's posts with their comments and votes
        3. Delete the user's remaining comments with their votes
        4. Delete the user

        Raises:
            NotAuthorizedError: If the actor is not an admin
            NotFoundError: If the user does not exist
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        if not actor.is_admin:
            raise NotAuthorizedError("user", request.user_id, request.actor_id)

        user_id = UserId(UUID(request.user_id))
        with logfire.span("delete_user.execute", user_id=request.user_id):
            # Raises NotFoundError before anything is touched
            await self.user_service.get_by_id(user_id)

            votes_retracted = await self.vote_service.retract_all_for_user(user_id)

            posts = await self.post_service.get_posts_by_author(user_id)
            comments_deleted = 0
            for post in posts:
                deleted, _ = await delete_post_with_dependents(
                    post.id, self.post_service, self.comment_service, self.vote_service
                )
                comments_deleted += deleted

            comments = await self.comment_service.get_comments_by_author(user_id)
            await self.vote_service.cascade_delete_for_targets(
                [comment.id for comment in comments]
            )
            for comment in comments:
                await self.comment_service.delete_comment(comment.id)
            comments_deleted += len(comments)

            if not await self.user_service.delete_user(user_id):
                raise NotFoundError("User", request.user_id)

            logfire.info(
                "User deleted with dependents",
                user_id=request.user_id,
                votes_retracted=votes_retracted,
                posts_deleted=len(posts),
                comments_deleted=comments_deleted,
            )
            return DeleteUserResponse(
                user_id=request.user_id,
                deleted=True,
                votes_retracted=votes_retracted,
                posts_deleted=len(posts),
                comments_deleted=comments_deleted,
            )
