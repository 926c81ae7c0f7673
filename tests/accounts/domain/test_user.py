"""Tests for the User aggregate and its UserRecord snapshot."""

from datetime import UTC, datetime

import pytest
from accounts.user.user import (
    ADMIN_ROLE,
    ROLE_IDS,
    SUPER_ADMIN_ROLE,
    User,
    UserRecord,
    validate_role_names,
)
from protean.exceptions import ValidationError


def _user(**overrides):
    defaults = {
        "id": 7,
        "name": "Ada",
        "email": "ada@example.com",
        "created_at": datetime(2024, 1, 1, tzinfo=UTC),
    }
    defaults.update(overrides)
    return User(**defaults)


class TestRoles:
    def test_seeded_role_ids(self):
        assert ROLE_IDS == {SUPER_ADMIN_ROLE: 1, ADMIN_ROLE: 2, "client": 3}

    def test_unknown_role_raises(self):
        with pytest.raises(ValidationError) as exc:
            validate_role_names(["admin", "janitor"])
        assert exc.value.messages == {"roles": ["Unknown role: janitor"]}

    def test_has_role_matches_any(self):
        user = User.register(user_id=1, name="Ada", email="ada@example.com", roles=[ADMIN_ROLE])
        assert user.has_role(SUPER_ADMIN_ROLE, ADMIN_ROLE)
        assert not user.has_role(SUPER_ADMIN_ROLE)

    def test_no_roles_by_default(self):
        assert _user().role_names() == []


class TestToRecord:
    def test_snapshot(self):
        assert _user().to_record() == UserRecord(
            id=7,
            name="Ada",
            email="ada@example.com",
            created_at="2024-01-01T00:00:00+00:00",
        )

    def test_missing_fields(self):
        record = UserRecord(id=1, name=" ", email="a@b.com")
        assert record.missing_fields("id", "name", "email", "created_at") == ["name", "created_at"]
