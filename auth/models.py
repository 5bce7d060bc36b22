"""
auth/models.py -- Domain dataclass for user accounts.

Pattern: Data class (pure data container, zero logic). Mirrors the approach
in pizza/models.py -- dataclasses own domain shape; stores and routes do the
work.

Layer rule: no imports from api/, core/, or pizza/.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered account.

    username is the identity key: unique across the store and never changed.
    password is kept exactly as submitted. There is no update operation, so a
    User value lives unchanged from create_user() to delete_user().
    """

    username: str
    password: str = ""
