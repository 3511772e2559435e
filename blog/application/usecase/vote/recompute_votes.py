"""Recompute vote tally (admin) use case."""

from uuid import UUID

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.error import NotAuthorizedError
from blog.domain.service import UserService, VoteService
from blog.domain.value import UserId, VotableType


class RecomputeVotesRequest(BaseModel):
    """Recompute vote tally request."""

    votable_type: VotableType
    votable_id: str  # UUID string
    actor_id: str  # Current user ID (must be admin)


class RecomputeVotesResponse(BaseModel):
    """Recompute vote tally response."""

    votable_type: VotableType
    votable_id: str
    total_votes: int


class RecomputeVotesUseCase(BaseUseCase):
    """Use case for an admin rebuilding an item's tally from its votes."""

    def __init__(self, user_service: UserService, vote_service: VoteService) -> None:
        """Initialize recompute votes use case.

        Args:
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: RecomputeVotesRequest) -> RecomputeVotesResponse:
        """Execute recompute flow.

        Raises:
            NotAuthorizedError: If the actor is not an admin
            NotFoundError: If the item does not exist
        """
        actor = await self.user_service.get_by_id(UserId(UUID(request.actor_id)))
        if not actor.is_admin:
            raise NotAuthorizedError(
                request.votable_type.value, request.votable_id, request.actor_id
            )

        total = await self.vote_service.recompute_total_votes(
            request.votable_type, UUID(request.votable_id)
        )
        return RecomputeVotesResponse(
            votable_type=request.votable_type,
            votable_id=request.votable_id,
            total_votes=total,
        )
