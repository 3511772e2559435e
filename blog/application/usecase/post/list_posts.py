"""List posts use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.application.usecase.vote.common import viewer_votes
from blog.domain.service import PostService, UserService, VoteService
from blog.domain.value import UserId

from .common import PostInfo, to_post_info


class ListPostsRequest(BaseModel):
    """List posts request."""

    user_id: str | None = None  # Current user ID (if authenticated)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostInfo]
    total: int


class ListPostsUseCase:
    """Use case for listing every post, oldest first."""

    def __init__(
        self,
        post_service: PostService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.post_service = post_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Authors and the viewer's votes are fetched with one batch query
        each to avoid N+1 lookups.
        """
        with logfire.span("list_posts.execute", user_id=request.user_id):
            posts = await self.post_service.get_posts()

            authors = await self.user_service.get_users_by_ids(
                [post.author_id for post in posts]
            )

            user_votes: dict[UUID, int] = {}
            if request.user_id and posts:
                votes = await self.vote_service.list_votes_for_targets(
                    [post.id for post in posts]
                )
                user_votes = viewer_votes(votes, UserId(UUID(request.user_id)))

            items = [
                to_post_info(post, authors.get(post.author_id), user_votes.get(post.id))
                for post in posts
            ]

            logfire.info("Posts listed", count=len(items))
            return ListPostsResponse(posts=items, total=len(items))
