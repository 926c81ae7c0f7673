"""Application tests for user registration."""

import json

import pytest
from accounts.user.directory import all_users, get_user
from accounts.user.events import UserCreated
from accounts.user.registration import RegisterUser, RegisterUserHandler, register_user
from accounts.user.user import SUPER_ADMIN_ROLE
from notifications.queue import get_queue
from protean.exceptions import ValidationError


def _handle(name, email, roles=()):
    return RegisterUserHandler().register_user(RegisterUser(name=name, email=email, roles=json.dumps(list(roles))))


class TestRegisterUser:
    def test_stores_user(self):
        user_id = register_user("Ada", "ada@example.com")

        user = get_user(user_id)
        assert user.name == "Ada"
        assert user.email == "ada@example.com"
        assert user.created_at is not None

    def test_ids_are_sequential(self):
        assert register_user("Ada", "ada@example.com") == 1
        assert register_user("Bob", "bob@example.com") == 2

    def test_email_is_lowercased(self):
        user_id = register_user("Ada", "Ada@Example.com")
        assert get_user(user_id).email == "ada@example.com"

    def test_assigns_roles(self):
        user_id = register_user("Root", "root@example.com", roles=[SUPER_ADMIN_ROLE])
        assert get_user(user_id).has_role(SUPER_ADMIN_ROLE)

    def test_strips_name(self):
        assert get_user(register_user("  Ada  ", "ada@example.com")).name == "Ada"

    def test_queues_welcome_job(self):
        register_user("Ada", "ada@example.com")
        assert get_queue().size() == 1

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _handle("  ", "ada@example.com")

        assert exc.value.messages == {"name": ["is required"]}
        assert all_users() == []

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError):
            _handle("Ada", "ada@")

        assert all_users() == []
        assert get_queue().size() == 0

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _handle("Ada", "ada@example.com", roles=["janitor"])

        assert exc.value.messages == {"roles": ["Unknown role: janitor"]}

    def test_duplicate_email_rejected(self):
        register_user("Ada", "ada@example.com")

        with pytest.raises(ValidationError) as exc:
            _handle("Ada Again", "ADA@example.com")

        assert "email" in exc.value.messages
        assert len(all_users()) == 1
        assert get_queue().size() == 1


class TestUserCreatedEvent:
    def test_register_raises_user_created(self):
        from accounts.user.user import User

        user = User.register(user_id=5, name="Ada", email="ada@example.com")

        [event] = user._events
        assert isinstance(event, UserCreated)
        assert event.user == user.to_record()
