"""Unit tests for mapping domain errors to HTTP errors."""

from uuid import uuid4

import pytest

from blog.domain.error import (
    AuthenticationError,
    BusinessRuleViolationError,
    DomainError,
    InvalidVoteValueError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
    VoteConflictError,
)
from blog.interface.error import to_http_exception


@pytest.mark.parametrize(
    "error,status_code",
    [
        (NotFoundError("Post", "abc"), 404),
        (ValidationError("bad"), 400),
        (InvalidVoteValueError(2, uuid4()), 400),
        (BusinessRuleViolationError("Email already exists"), 400),
        (AuthenticationError("Invalid credentials"), 401),
        (NotAuthorizedError("post", "abc", "someone"), 403),
        (VoteConflictError(uuid4(), 3), 409),
        (DomainError("surprise"), 500),
    ],
)
def test_domain_error_status(error, status_code):
    """Each domain error maps to its HTTP status with the message as detail."""
    exc = to_http_exception(error)

    assert exc.status_code == status_code
    assert exc.detail == str(error)
