"""List votes use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from blog.domain.service import VoteService

from .common import VoteInfo


class ListVotesRequest(BaseModel):
    """List votes request."""

    # None lists every vote; a list (even empty) restricts to those items
    target_ids: list[str] | None = None


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteInfo]
    total: int


class ListVotesUseCase:
    """Use case for listing all votes or the votes on given items."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow."""
        with logfire.span(
            "list_votes.execute",
            targets=len(request.target_ids) if request.target_ids is not None else None,
        ):
            if request.target_ids is None:
                votes = await self.vote_service.list_all_votes()
            else:
                votes = await self.vote_service.list_votes_for_targets(
                    [UUID(target_id) for target_id in request.target_ids]
                )

            return ListVotesResponse(
                votes=[VoteInfo.from_vote(vote) for vote in votes],
                total=len(votes),
            )
