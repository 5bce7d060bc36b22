"""
api/routes/pizzas.py -- Pizza catalogue endpoints.

Routes:
  GET    /pizza/{id}  -- one pizza; 404 if unknown
  GET    /pizzas      -- every pizza, insertion order, no pagination
  POST   /pizza       -- create; 201 + Location /pizza/{id}; 400 if the body carries an id
  PUT    /pizza/{id}  -- replace name and description; 204; 404 if unknown
  DELETE /pizza/{id}  -- delete; 200; 404 if unknown

Every route requires a bearer token (router-level require_token dependency).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import JSONResponse

from api.models import PizzaCreate, PizzaResponse, PizzaUpdate
from auth.dependencies import require_token
from pizza.store import ExplicitIdError, PizzaStore

# Auth policy:
# - all routes: require a valid bearer token (require_token)
router = APIRouter(
    dependencies=[Depends(require_token)],
    responses={401: {"description": "Missing or invalid bearer token."}},
)

_NOT_FOUND = {"code": "not_found", "message": "Pizza not found."}


@router.get(
    "/pizza/{pizza_id}",
    response_model=PizzaResponse,
    responses={404: {"description": "Pizza not found."}},
)
def get_pizza(request: Request, pizza_id: int) -> PizzaResponse:
    store: PizzaStore = request.app.state.pizza_store
    pizza = store.get_by_id(pizza_id)
    if pizza is None:
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return PizzaResponse.from_domain(pizza)


@router.get("/pizzas", response_model=list[PizzaResponse])
def list_pizzas(request: Request) -> list[PizzaResponse]:
    store: PizzaStore = request.app.state.pizza_store
    return [PizzaResponse.from_domain(p) for p in store.list_pizzas()]


@router.post(
    "/pizza",
    status_code=201,
    response_model=PizzaResponse,
    responses={400: {"description": "Explicit id in request body."}},
)
def create_pizza(request: Request, body: PizzaCreate) -> JSONResponse:
    """Add a pizza. The store assigns the id; callers must not send one."""
    store: PizzaStore = request.app.state.pizza_store
    try:
        pizza = store.create_pizza(body.to_domain())
    except ExplicitIdError as exc:
        raise HTTPException(
            status_code=400,
            detail={
                "code": "explicit_id",
                "message": "Explicit IDs are not allowed. Remove the ID from the request body and try again.",
            },
        ) from exc
    return JSONResponse(
        status_code=201,
        content=PizzaResponse.from_domain(pizza).model_dump(),
        headers={"Location": f"/pizza/{pizza.id}"},
    )


@router.put(
    "/pizza/{pizza_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Pizza not found."}},
)
def update_pizza(request: Request, pizza_id: int, body: PizzaUpdate) -> Response:
    """Replace the name and description of a pizza. The id never changes."""
    store: PizzaStore = request.app.state.pizza_store
    if not store.update_pizza(pizza_id, name=body.name, description=body.description):
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return Response(status_code=204)


@router.delete(
    "/pizza/{pizza_id}",
    response_class=Response,
    responses={200: {"description": "Pizza deleted."}, 404: {"description": "Pizza not found."}},
)
def delete_pizza(request: Request, pizza_id: int) -> Response:
    store: PizzaStore = request.app.state.pizza_store
    if not store.delete_pizza(pizza_id):
        raise HTTPException(status_code=404, detail=_NOT_FOUND)
    return Response(status_code=200)
