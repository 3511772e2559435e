"""Domain value types for the blog.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum, IntEnum

from pydantic import field_validator

from blog.domain.value.common import RootValueObject


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"


class VoteValue(IntEnum):
    """Signed tri-state vote.

    NEUTRAL is a valid stored value and a valid fresh cast.
    """

    DOWN = -1
    NEUTRAL = 0
    UP = 1


class CastStatus(str, Enum):
    """Outcome of a cast-or-change vote operation."""

    CREATED = "created"
    DUPLICATE = "duplicate"
    UPDATED = "updated"


class RetractStatus(str, Enum):
    """Outcome of a retract vote operation."""

    REMOVED = "removed"
    NOTHING_TO_REMOVE = "nothing_to_remove"


class UserName(RootValueObject[str]):
    """Display name of a user, 3-50 characters."""

    @field_validator("root")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name length after trimming whitespace."""
        v = v.strip()
        if len(v) < 3 or len(v) > 50:
            raise ValueError("Name must be 3-50 characters")
        return v
