"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.domain.entities import ROLES, Caller
from app.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_caller(token: str) -> Caller:
    """Build the :class:`Caller` described by a bearer token."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    subject = payload.get("sub")
    role = payload.get("role")
    shelter_id = payload.get("shelter_id")
    if subject is None or role not in ROLES:
        raise _unauthorized("Invalid credentials")
    try:
        user_id = int(subject)
        shelter = int(shelter_id) if shelter_id is not None else None
    except (TypeError, ValueError) as exc:
        raise _unauthorized("Invalid credentials") from exc

    return Caller(user_id=user_id, role=role, shelter_id=shelter)


def get_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> Caller:
    """Return the caller identified by the request's bearer token."""

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Not authenticated")
    return resolve_caller(credentials.credentials)


__all__ = ["bearer_scheme", "get_caller", "resolve_caller"]
