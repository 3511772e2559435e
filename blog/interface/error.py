"""Interface layer errors: translation of domain errors into HTTP errors."""

import logfire
from fastapi import HTTPException, status

from blog.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    VoteConflictError,
)


def to_http_exception(error: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP status.

    Errors without a specific mapping become 500s.
    """
    if isinstance(error, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, (ValidationError, BusinessRuleViolationError)):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, AuthenticationError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, NotAuthorizedError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, VoteConflictError):
        status_code = status.HTTP_409_CONFLICT
    else:
        logfire.error("Unmapped domain error", error=str(error))
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    return HTTPException(status_code=status_code, detail=str(error))
