from datetime import UTC, datetime

import pytest
from protean import current_domain

from accounts.user.directory import next_user_id
from accounts.user.user import SUPER_ADMIN_ROLE, User, UserRecord

FIXED_NOW = datetime(2025, 6, 1, 12, 30, 0, tzinfo=UTC)


@pytest.fixture
def ada():
    return UserRecord(id=7, name="Ada", email="ada@example.com", created_at="2024-01-01T00:00:00Z")


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture
def make_user():
    """Store a user directly, without queuing a welcome job."""

    def _make_user(name, email, *roles):
        user = User.register(user_id=next_user_id(), name=name, email=email, roles=roles)
        user._events.clear()
        current_domain.repository_for(User).add(user)
        return user

    return _make_user


@pytest.fixture
def super_admin(make_user):
    return make_user("Root", "root@example.com", SUPER_ADMIN_ROLE)
