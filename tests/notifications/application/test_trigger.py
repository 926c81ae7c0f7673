"""Application tests for manually triggering NewUserRegistered."""

import pytest
from accounts.user.user import ADMIN_ROLE, CLIENT_ROLE
from notifications.notification.inbox import notifications_for
from notifications.trigger import trigger_user_created
from protean.exceptions import ObjectNotFoundError


def _only_payload(notifiable_id):
    rows = notifications_for(notifiable_id)
    assert len(rows) == 1
    return rows[0].payload()


class TestTriggerUserCreated:
    def test_notifies_admins_and_super_admins(self, make_user, super_admin):
        admin = make_user("Admin", "admin@example.com", ADMIN_ROLE)
        client = make_user("Client", "client@example.com", CLIENT_ROLE)

        ids = trigger_user_created(user_id=client.id)

        assert len(ids) == 2
        assert _only_payload(super_admin.id)["id"] == client.id
        assert _only_payload(admin.id)["id"] == client.id

    def test_single_admin(self, make_user, super_admin):
        admin = make_user("Admin", "admin@example.com", ADMIN_ROLE)
        client = make_user("Client", "client@example.com")

        ids = trigger_user_created(user_id=client.id, admin_id=admin.id)

        assert len(ids) == 1
        assert notifications_for(super_admin.id) == []

    def test_random_user_when_none_given(self, make_user, super_admin):
        client = make_user("Client", "client@example.com")

        trigger_user_created(chooser=lambda users: users[-1])

        assert _only_payload(super_admin.id)["id"] == client.id

    def test_unknown_user_raises(self, super_admin):
        with pytest.raises(ObjectNotFoundError):
            trigger_user_created(user_id=404)

    def test_unknown_admin_raises(self, super_admin):
        with pytest.raises(ObjectNotFoundError):
            trigger_user_created(user_id=super_admin.id, admin_id=404)

    def test_no_users_raises(self):
        with pytest.raises(ObjectNotFoundError, match="No users found"):
            trigger_user_created()

    def test_no_admins_raises(self, make_user):
        client = make_user("Client", "client@example.com")

        with pytest.raises(ObjectNotFoundError, match="No admin users found"):
            trigger_user_created(user_id=client.id)
