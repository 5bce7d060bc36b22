"""
auth/dependencies.py -- FastAPI Depends() helpers for authentication.

A single auth method is supported: an `Authorization: Bearer <token>` header
carrying a JWT issued by POST /login.

try_get_claims() is the soft variant (returns None on failure).
require_token() wraps it and raises HTTP 401 if unauthenticated. Routers
that need authentication declare it once:

    router = APIRouter(dependencies=[Depends(require_token)])

Router-level dependencies run before the request body is validated and
before the handler, so a request without a valid token never reaches a store.

Layer rule: no imports from api/ or pizza/.
  auth/dependencies.py may import from fastapi (for Depends/HTTPException/Request)
  because this module is part of the FastAPI dependency injection system.
"""

from __future__ import annotations

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from auth.tokens import decode_access_token

# auto_error=False: we raise our own 401 with the structured error body.
# HTTPBearer is used instead of reading the header by hand so the OpenAPI
# schema declares the bearer scheme and the docs UI shows an Authorize button.
bearer_scheme = HTTPBearer(auto_error=False, description="Paste the token returned by POST /login.")


def try_get_claims(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> dict | None:
    """Return the verified token claims, or None if the request is unauthenticated.

    Never raises -- callers that need a hard 401 should use require_token().
    """
    if credentials is None or not credentials.credentials:
        return None
    return decode_access_token(request.app.state.settings.jwt, credentials.credentials)


def require_token(claims: dict | None = Depends(try_get_claims)) -> dict:
    """Require a valid bearer token. Raises HTTP 401 otherwise.

    Use as a FastAPI dependency:
        @router.get("/protected")
        def route(claims: dict = Depends(require_token)): ...
    """
    if claims is None:
        raise HTTPException(
            status_code=401,
            detail={"code": "unauthorized", "message": "A valid bearer token is required."},
            headers={"WWW-Authenticate": "Bearer"},
        )
    return claims
