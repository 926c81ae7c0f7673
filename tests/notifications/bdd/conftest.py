"""Shared BDD fixtures and step definitions for the Notifications context."""

import pytest
from accounts.user.directory import find_user_by_email
from accounts.user.registration import register_user
from accounts.user.user import SUPER_ADMIN_ROLE, UserRecord
from notifications.notification.inbox import notifications_for
from notifications.queue import get_queue
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps: users
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('a super-admin "{name}" with email "{email}"'),
    target_fixture="admin",
)
def super_admin_user(make_user, name, email):
    return make_user(name, email, SUPER_ADMIN_ROLE)


@given(parsers.cfparse('a registered user "{name}" with email "{email}"'))
def registered_user(name, email):
    register_user(name=name, email=email)


@given(
    parsers.cfparse('a registered user record for "{name}" with email "{email}"'),
    target_fixture="record",
)
def user_record(name, email):
    return UserRecord(id=7, name=name, email=email, created_at="2024-01-01T00:00:00Z")


# ---------------------------------------------------------------------------
# Then steps: queue and inbox
# ---------------------------------------------------------------------------
@then(parsers.cfparse("{count:d} welcome job is queued"))
@then(parsers.cfparse("{count:d} welcome jobs are queued"))
def welcome_jobs_queued(count):
    assert get_queue().size() == count


@then(parsers.cfparse('"{email}" has {count:d} notification saying "{message}"'))
def inbox_has_notification(email, count, message):
    user = find_user_by_email(email)
    rows = notifications_for(user.id)
    assert len(rows) == count
    assert rows[0].payload()["message"] == message


@then(parsers.cfparse('the event is rejected for "{field}"'))
@then(parsers.cfparse('the notification is rejected for "{field}"'))
def rejected_for(error, field):
    assert error["exc"] is not None
    assert field in error["exc"].messages
