"""Retract vote use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import VoteService
from blog.domain.value import RetractStatus, UserId, VotableType

from .common import VoteInfo


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class RetractVoteResponse(BaseModel):
    """Retract vote response."""

    status: RetractStatus
    votable_type: VotableType
    votable_id: str
    total_votes: int
    vote: VoteInfo | None  # The removed vote, if there was one


class RetractVoteUseCase(BaseUseCase):
    """Use case for removing a vote from a post or comment."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize retract vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RetractVoteRequest) -> RetractVoteResponse:
        """Execute retract vote flow.

        Args:
            request: Retract vote request

        Returns:
            Outcome status and the item's tally

        Raises:
            NotFoundError: If the item does not exist
            VoteConflictError: If the vote kept changing concurrently
        """
        result = await self.vote_service.retract_vote(
            user_id=UserId(UUID(request.user_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
        )

        return RetractVoteResponse(
            status=result.status,
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            total_votes=result.total_votes,
            vote=VoteInfo.from_vote(result.vote) if result.vote else None,
        )
