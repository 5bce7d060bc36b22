"""
auth/store.py -- In-process repository for user accounts.

Pattern: Repository. UserStore owns the username -> User mapping; route and
dependency code never touch the underlying dict.

Concurrency:
  Route handlers run in the server's thread pool, so every method takes
  self._lock. create_user() does its existence check and insert under a
  single acquisition: two concurrent registrations of the same username
  produce exactly one record and one UsernameTakenError.

Layer rule: no imports from api/, core/, or pizza/.
"""

from __future__ import annotations

import logging
import threading

from auth.models import User

logger = logging.getLogger("pizzastore.store")


class UsernameTakenError(Exception):
    """Raised by create_user() when the username is already registered."""

    def __init__(self, username: str) -> None:
        super().__init__(f"username already exists: {username!r}")
        self.username = username


class UserStore:
    """Repository for User entities keyed by username.

    Usage:
        store = UserStore()
        store.create_user(User(username="Tester", password="x"))
        user = store.get_by_username("Tester")
        store.delete_user("Tester")
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._users: dict[str, User] = {}

    def exists(self, username: str) -> bool:
        """Return True if a user with this exact (case-sensitive) username exists."""
        with self._lock:
            return username in self._users

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def get_by_username(self, username: str) -> User | None:
        """Look up a user by exact username. Returns None if not found."""
        with self._lock:
            return self._users.get(username)

    def create_user(self, user: User) -> None:
        """Insert a new user.

        Raises UsernameTakenError if the username already exists. The store is
        left untouched in that case.
        """
        with self._lock:
            if user.username in self._users:
                raise UsernameTakenError(user.username)
            self._users[user.username] = user
        logger.info("Created user %s", user.username)

    def delete_user(self, username: str) -> bool:
        """Delete a user. Returns True if deleted, False if not found."""
        with self._lock:
            removed = self._users.pop(username, None)
        if removed is None:
            return False
        logger.info("Deleted user %s", username)
        return True
