"""Unit tests for auth/store.py -- UserStore repository.

Covers:
- create/exists/get/delete round trip
- duplicate usernames raise UsernameTakenError and leave the original intact
- usernames are case-sensitive keys
- concurrent registrations of one username produce exactly one record
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from auth.models import User
from auth.store import UsernameTakenError, UserStore


@pytest.fixture
def store() -> UserStore:
    return UserStore()


def test_create_and_get(store: UserStore) -> None:
    assert store.exists("Tester") is False
    store.create_user(User(username="Tester", password="x"))
    assert store.exists("Tester") is True
    assert store.get_by_username("Tester") == User(username="Tester", password="x")
    assert store.count() == 1


def test_get_unknown(store: UserStore) -> None:
    assert store.get_by_username("nobody") is None


def test_duplicate_username_conflicts(store: UserStore) -> None:
    store.create_user(User(username="Tester", password="x"))
    with pytest.raises(UsernameTakenError) as excinfo:
        store.create_user(User(username="Tester", password="y"))
    assert excinfo.value.username == "Tester"
    # The failed insert must not overwrite the original record.
    assert store.get_by_username("Tester").password == "x"
    assert store.count() == 1


def test_usernames_are_case_sensitive(store: UserStore) -> None:
    store.create_user(User(username="Tester"))
    store.create_user(User(username="tester"))
    assert store.count() == 2


def test_delete(store: UserStore) -> None:
    store.create_user(User(username="Tester"))
    assert store.delete_user("Tester") is True
    assert store.exists("Tester") is False
    assert store.delete_user("Tester") is False


def test_delete_unknown_leaves_others(store: UserStore) -> None:
    store.create_user(User(username="keep"))
    assert store.delete_user("missing") is False
    assert store.exists("keep")


def test_concurrent_duplicate_registration(store: UserStore) -> None:
    def register(i: int) -> bool:
        try:
            store.create_user(User(username="race", password=str(i)))
        except UsernameTakenError:
            return False
        return True

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(register, range(50)))
    assert results.count(True) == 1
    assert store.count() == 1
