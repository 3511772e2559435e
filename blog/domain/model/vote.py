"""Vote entity.

A vote is one user's current stance on one post or comment.
Each user holds at most one vote per item.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import UserId, VotableType, VoteId, VoteValue


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per item (enforced by database unique constraint)
    - Value is one of -1, 0 or +1; anything else fails model validation
    - Polymorphic reference to votable (post or comment)
    - user_id, votable_type and votable_id never change after creation
    """

    id: VoteId
    user_id: UserId
    votable_type: VotableType
    votable_id: UUID  # PostId or CommentId (both are UUIDs)
    value: VoteValue
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
