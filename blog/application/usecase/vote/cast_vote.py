"""Cast-or-change vote use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import VoteService
from blog.domain.value import CastStatus, UserId, VotableType

from .common import VoteInfo


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    user_id: str  # User ID from authenticated user
    value: int  # Range is checked by the vote service


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    status: CastStatus
    votable_type: VotableType
    votable_id: str
    total_votes: int
    vote: VoteInfo


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a post or comment, or changing that vote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            Outcome status, the stored vote and the item's tally

        Raises:
            InvalidVoteValueError: If the value is not -1, 0 or +1
            NotFoundError: If the item does not exist
            VoteConflictError: If the vote kept changing concurrently
        """
        result = await self.vote_service.cast_or_change_vote(
            user_id=UserId(UUID(request.user_id)),
            votable_type=request.votable_type,
            votable_id=UUID(request.votable_id),
            value=request.value,
        )

        return CastVoteResponse(
            status=result.status,
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            total_votes=result.total_votes,
            vote=VoteInfo.from_vote(result.vote),
        )
