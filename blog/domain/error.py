"""Domain layer errors."""

from uuid import UUID


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidVoteValueError(ValidationError):
    """Raised when a vote value is not one of -1, 0 or +1."""

    def __init__(self, value: object, votable_id: UUID | str):
        self.value = value
        self.votable_id = str(votable_id)
        super().__init__(
            f"Invalid vote value {value!r} for {votable_id}: must be -1, 0 or 1"
        )


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when credentials cannot be verified."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts an action on a resource they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class VoteConflictError(DomainError):
    """Raised when votes keep changing underneath a cast or retract."""

    def __init__(self, ref: UUID | str, attempts: int, what: str = "Vote on"):
        self.ref = str(ref)
        self.attempts = attempts
        super().__init__(
            f"{what} {ref} changed concurrently; gave up after {attempts} attempts"
        )
