"""Shared vote response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from blog.domain.model import Vote
from blog.domain.value import UserId, VotableType


class VoteInfo(BaseModel):
    """Vote as returned by the API."""

    vote_id: str
    user_id: str
    votable_type: VotableType
    votable_id: str
    value: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteInfo":
        return cls(
            vote_id=str(vote.id),
            user_id=str(vote.user_id),
            votable_type=vote.votable_type,
            votable_id=str(vote.votable_id),
            value=int(vote.value),
            created_at=vote.created_at,
            updated_at=vote.updated_at,
        )


def viewer_votes(votes: list[Vote], viewer_id: UserId | None) -> dict[UUID, int]:
    """Pick the viewer's vote value per item out of a batch of votes."""
    if viewer_id is None:
        return {}
    return {v.votable_id: int(v.value) for v in votes if v.user_id == viewer_id}
