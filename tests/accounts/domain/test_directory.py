"""Tests for user lookups over the User repository."""

import pytest
from accounts.user.directory import all_users, find_user_by_email, get_user, next_user_id, users_with_role
from accounts.user.user import ADMIN_ROLE, CLIENT_ROLE, SUPER_ADMIN_ROLE, User
from protean import current_domain
from protean.exceptions import ObjectNotFoundError


def _add(name, email, *roles, user_id=None):
    user = User.register(user_id=user_id or next_user_id(), name=name, email=email, roles=roles)
    user._events.clear()
    current_domain.repository_for(User).add(user)
    return user


class TestUserDirectory:
    def test_next_user_id_starts_at_one(self):
        assert next_user_id() == 1

    def test_next_user_id_follows_highest_id(self):
        _add("A", "a@example.com", user_id=10)
        assert next_user_id() == 11

    def test_get_user(self):
        user = _add("Ada", "ada@example.com")
        assert get_user(user.id).email == "ada@example.com"

    def test_get_missing_raises(self):
        with pytest.raises(ObjectNotFoundError):
            get_user(404)

    def test_find_by_email_is_case_insensitive(self):
        user = _add("Ada", "ada@example.com")
        assert find_user_by_email(" ADA@example.com ").id == user.id
        assert find_user_by_email("bob@example.com") is None

    def test_users_with_role_sorted_by_id(self):
        root = _add("Root", "root@example.com", SUPER_ADMIN_ROLE)
        admin = _add("Admin", "admin@example.com", ADMIN_ROLE)
        _add("Client", "client@example.com", CLIENT_ROLE)

        assert [u.id for u in users_with_role(SUPER_ADMIN_ROLE)] == [root.id]
        assert [u.id for u in users_with_role(ADMIN_ROLE, SUPER_ADMIN_ROLE)] == [root.id, admin.id]

    def test_all_users(self):
        second = _add("B", "b@example.com", user_id=2)
        first = _add("A", "a@example.com", user_id=1)
        assert [u.id for u in all_users()] == [first.id, second.id]
