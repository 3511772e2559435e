"""Bearer token helpers for routes."""

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from blog.domain.service import JWTService

# auto_error=False so routes decide between 401 and anonymous access
bearer_scheme = HTTPBearer(auto_error=False)


def optional_user_id(
    jwt_service: JWTService, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    """Resolve the caller's user ID, or None for anonymous callers."""
    token = credentials.credentials if credentials else None
    return jwt_service.get_user_id_from_token(token)


def require_user_id(
    jwt_service: JWTService,
    credentials: HTTPAuthorizationCredentials | None,
    action: str = "access this resource",
) -> str:
    """Resolve the caller's user ID.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = optional_user_id(jwt_service, credentials)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
