"""
API request and response models for PizzaStore REST endpoints.

These Pydantic v2 models define the HTTP transport contract for the API layer.
They are intentionally separate from the dataclasses in auth/models.py and
pizza/models.py, which own the internal domain representation. Route handlers
map between the two.

Separation of concerns: domain models = domain truth; api/ models = API contract.
"""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from auth.models import User
from pizza.models import Pizza

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

MAX_FIELD_LENGTH = 255

_RequiredText = Annotated[str, Field(min_length=1, max_length=MAX_FIELD_LENGTH)]
_OptionalText = Annotated[str, Field(max_length=MAX_FIELD_LENGTH)]


def _null_to_empty(value):
    """Treat an explicit JSON null in an optional text field as an empty string."""
    return "" if value is None else value


# ---------------------------------------------------------------------------
# Auth / users
# ---------------------------------------------------------------------------


class LoginRequest(BaseModel):
    """Request body for POST /login.

    No length limits: an oversized username simply matches no user and takes
    the empty-token path instead of failing validation.
    """

    username: str
    password: str = ""


class UserCreate(BaseModel):
    """Request body for POST /user."""

    username: _RequiredText
    password: _OptionalText = ""

    def to_domain(self) -> User:
        return User(username=self.username, password=self.password)


class UserResponse(BaseModel):
    """Response body for GET /user/{username}."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(username=user.username, password=user.password)


# ---------------------------------------------------------------------------
# Pizzas
# ---------------------------------------------------------------------------


class PizzaCreate(BaseModel):
    """Request body for POST /pizza.

    id is accepted only so that a caller-supplied id can be rejected with 400
    rather than silently dropped. Leave it out or send 0.
    """

    id: int = 0
    name: _RequiredText
    description: _OptionalText = ""

    _null_description = field_validator("description", mode="before")(_null_to_empty)

    def to_domain(self) -> Pizza:
        return Pizza(id=self.id, name=self.name, description=self.description)


class PizzaUpdate(BaseModel):
    """Request body for PUT /pizza/{id}. Any id in the body is ignored."""

    name: _RequiredText
    description: _OptionalText = ""

    _null_description = field_validator("description", mode="before")(_null_to_empty)


class PizzaResponse(BaseModel):
    """A stored pizza as returned by the API."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    description: str

    @classmethod
    def from_domain(cls, pizza: Pizza) -> "PizzaResponse":
        return cls(id=pizza.id, name=pizza.name, description=pizza.description)


# ---------------------------------------------------------------------------
# Errors / health
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """Machine-readable error payload."""

    model_config = ConfigDict(frozen=True)

    code: str
    message: str
    detail: str | None = None


class ErrorResponse(BaseModel):
    """Top-level error envelope returned on 4xx/5xx responses."""

    model_config = ConfigDict(frozen=True)

    error: ErrorDetail


class HealthResponse(BaseModel):
    """Response for GET /health."""

    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    version: str
