"""Tests for user accounts and password checks."""

import bcrypt
import pytest

from portfolio.errors import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def users(core):
    return core.services.user


def test_admin_is_seeded_with_hashed_password(users):
    admin = users.get_user_by_username("admin")
    assert admin.id == 1
    assert admin.password_hash != "admin123"
    assert admin.password_hash.startswith("$2b$")


def test_seeding_twice_keeps_single_admin(users, core):
    users.ensure_admin_user_exists()
    assert core.store.count_users() == 1


def test_verify_password(users):
    assert users.verify_password("admin", "admin123").username == "admin"
    assert users.verify_password("admin", "wrong") is None
    assert users.verify_password("ghost", "admin123") is None


def test_unknown_user_still_runs_a_hash_check(users, monkeypatch):
    calls = []
    real_checkpw = bcrypt.checkpw

    def counting_checkpw(password, hashed):
        calls.append(hashed)
        return real_checkpw(password, hashed)

    monkeypatch.setattr(bcrypt, "checkpw", counting_checkpw)
    assert users.verify_password("ghost", "admin123") is None
    assert users.verify_password("admin", "wrong") is None
    assert len(calls) == 2
    assert calls[0] != users.get_user_by_username("admin").password_hash.encode("utf-8")


def test_create_user_duplicate_raises_conflict(users):
    with pytest.raises(ConflictError):
        users.create_user("admin", "another")


def test_create_user_rejects_weak_password(users):
    with pytest.raises(ValidationError, match="at least 2 characters"):
        users.create_user("editor", "x")
    with pytest.raises(ValidationError, match="whitespace"):
        users.create_user("editor", "has space")
    assert not users.has_username("editor")


def test_create_user_rejects_blank_username(users):
    with pytest.raises(ValidationError, match="Username is required"):
        users.create_user("   ", "secret")


def test_get_user_by_username_not_found(users):
    with pytest.raises(NotFoundError):
        users.get_user_by_username("ghost")
