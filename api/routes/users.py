"""
api/routes/users.py -- User management endpoints.

Routes:
  POST   /user             -- register a user; 201, 409 if the username is taken
  GET    /user/{username}  -- fetch a user; 404 if unknown
  DELETE /user/{username}  -- delete a user; 404 if unknown

Every route requires a bearer token (router-level require_token dependency).
There is no update route; a user is replaced by deleting and re-creating it.
"""

from __future__ import annotations

from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from api.models import UserCreate, UserResponse
from auth.dependencies import require_token
from auth.store import UsernameTakenError, UserStore

# Auth policy:
# - all routes: require a valid bearer token (require_token)
router = APIRouter(
    dependencies=[Depends(require_token)],
    responses={401: {"description": "Missing or invalid bearer token."}},
)


@router.post(
    "/user",
    status_code=201,
    response_class=Response,
    responses={201: {"description": "User created."}, 409: {"description": "Username taken."}},
)
def create_user(request: Request, body: UserCreate) -> Response:
    """Register a new user account."""
    user_store: UserStore = request.app.state.user_store
    try:
        user_store.create_user(body.to_domain())
    except UsernameTakenError as exc:
        raise HTTPException(
            status_code=409,
            detail={"code": "conflict", "message": "This username is taken."},
        ) from exc
    return Response(status_code=201, headers={"Location": f"/user/{quote(body.username, safe='')}"})


@router.get(
    "/user/{username}",
    response_model=UserResponse,
    responses={404: {"description": "User not found."}},
)
def get_user(request: Request, username: str) -> UserResponse:
    user_store: UserStore = request.app.state.user_store
    user = user_store.get_by_username(username)
    if user is None:
        raise HTTPException(
            status_code=404,
            detail={"code": "not_found", "message": "User not found."},
        )
    return UserResponse.from_domain(user)


@router.delete(
    "/user/{username}",
    response_class=Response,
    responses={200: {"description": "User deleted."}, 404: {"description": "User not found."}},
)
def delete_user(request: Request, username: str) -> Response:
    user_store: UserStore = request.app.state.user_store
    if not user_store.delete_user(username):
        raise HTTPException(
            status_code=404,
            detail={"code": "not_found", "message": "User not found."},
        )
    return Response(status_code=200)
