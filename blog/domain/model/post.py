"""Blog post aggregate root."""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import PostId, UserId

DEFAULT_AVATAR = "/public/uploads/Portrait_Placeholder.png"
MAX_IMAGES = 3


class Post(DomainModel):
    """Blog post aggregate root.

    ``total_votes`` is a denormalized sum of the votes on this post. It is
    written only by the vote ledger and may be negative.
    """

    id: PostId
    title: str = Field(min_length=1, max_length=100)
    content: str = Field(min_length=1, max_length=1000)
    avatar: str = DEFAULT_AVATAR
    images: list[str] = Field(default_factory=list, max_length=MAX_IMAGES)
    author_id: UserId
    total_votes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
