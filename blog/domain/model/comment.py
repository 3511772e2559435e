"""Comment entity.

Comments are flat replies attached to a single blog post.
"""

from datetime import datetime

from pydantic import Field

from blog.domain.model.common import DomainModel
from blog.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Like posts, comments carry a ``total_votes`` aggregate maintained by
    the vote ledger.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    text: str = Field(default="", max_length=1000)
    total_votes: int = 0
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
