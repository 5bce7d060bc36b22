"""
pizza/models.py -- Domain dataclass for the pizza catalogue.

Pure data container with zero logic. Id assignment and the explicit-id rule
live in pizza/store.py.

Separation of concerns: this dataclass is the catalogue's domain truth;
api/models.py owns the HTTP contract. Route handlers map between the two.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Pizza:
    """A pizza on the menu.

    id is 0 before the record is written to the store. The store assigns a
    positive id on insert and never changes it afterwards; updates replace
    the whole value with dataclasses.replace().
    """

    name: str
    description: str = ""
    id: int = 0
