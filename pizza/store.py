"""
pizza/store.py -- In-process repository for pizzas.

Pattern: Repository (same shape as auth/store.py). PizzaStore is the only
owner of the id -> Pizza mapping; routes work with Pizza values it returns.

Id assignment:
  Ids come from an itertools.count() advanced under self._lock, starting
  at 1. They follow insertion order, are never handed out twice and are not
  reused after a delete.

Stored values are frozen dataclasses. update_pizza() swaps in a new value
built with dataclasses.replace(), so a Pizza handed to a caller is never
modified behind its back.

Layer rule: no imports from api/, auth/, or core/.
"""

from __future__ import annotations

import itertools
import logging
import threading
from dataclasses import replace

from pizza.models import Pizza

logger = logging.getLogger("pizzastore.store")


class ExplicitIdError(ValueError):
    """Raised by create_pizza() when the caller supplied its own id."""

    def __init__(self, pizza_id: int) -> None:
        super().__init__(f"explicit ids are not allowed (got {pizza_id})")
        self.pizza_id = pizza_id


class PizzaStore:
    """Repository for Pizza entities keyed by store-assigned integer id.

    Usage:
        store = PizzaStore()
        pizza = store.create_pizza(Pizza(name="Margherita"))
        store.update_pizza(pizza.id, name="Marinara", description="No cheese")
        store.delete_pizza(pizza.id)
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pizzas: dict[int, Pizza] = {}
        self._ids = itertools.count(1)

    def get_by_id(self, pizza_id: int) -> Pizza | None:
        """Look up a pizza by id. Returns None if not found."""
        with self._lock:
            return self._pizzas.get(pizza_id)

    def list_pizzas(self) -> list[Pizza]:
        """Return all pizzas in insertion order."""
        with self._lock:
            return list(self._pizzas.values())

    def create_pizza(self, pizza: Pizza) -> Pizza:
        """Insert a pizza and return it with its assigned id.

        Raises ExplicitIdError if pizza.id is non-zero; nothing is stored
        and no id is consumed in that case.
        """
        if pizza.id != 0:
            raise ExplicitIdError(pizza.id)
        with self._lock:
            created = replace(pizza, id=next(self._ids))
            self._pizzas[created.id] = created
        logger.info("Created pizza %d (%s)", created.id, created.name)
        return created

    def update_pizza(self, pizza_id: int, name: str, description: str) -> bool:
        """Replace name and description of an existing pizza.

        Returns True if a pizza was updated, False if pizza_id was not found.
        """
        with self._lock:
            current = self._pizzas.get(pizza_id)
            if current is None:
                return False
            self._pizzas[pizza_id] = replace(current, name=name, description=description)
        return True

    def delete_pizza(self, pizza_id: int) -> bool:
        """Delete a pizza. Returns True if deleted, False if not found."""
        with self._lock:
            removed = self._pizzas.pop(pizza_id, None)
        if removed is None:
            return False
        logger.info("Deleted pizza %d", pizza_id)
        return True
