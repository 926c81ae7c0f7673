"""Application tests for the UserCreated handler that queues the welcome job."""

import pytest
from accounts.user.events import UserCreated
from accounts.user.registration import register_user
from accounts.user.user import UserRecord
from notifications.jobs import SendWelcomeEmail
from notifications.notification.account_events import AccountEventsHandler
from notifications.queue import get_queue
from notifications.queue.port import QueueUnavailableError
from protean.exceptions import ValidationError


def _event(**user_fields):
    return UserCreated(user=UserRecord(**user_fields))


def _send(event):
    AccountEventsHandler().send_welcome_email(event)


class TestSendWelcomeEmailHandler:
    def test_queues_exactly_one_job(self, ada):
        _send(UserCreated(user=ada))

        assert get_queue().jobs == [SendWelcomeEmail(recipient_email="ada@example.com", recipient_name="Ada")]

    def test_email_and_name_are_enough(self):
        _send(_event(email="a@b.com", name="Bob"))

        queue = get_queue()
        assert len(queue.pushed_jobs) == 1
        assert queue.jobs[0].model_dump() == {"recipient_email": "a@b.com", "recipient_name": "Bob"}

    def test_no_deduplication(self, ada):
        _send(UserCreated(user=ada))
        _send(UserCreated(user=ada))

        assert get_queue().size() == 2

    def test_missing_user_raises_and_queues_nothing(self):
        with pytest.raises(ValidationError) as exc:
            _send(UserCreated(user=None))

        assert exc.value.messages == {"user": ["is required"]}
        assert get_queue().pushed_jobs == []

    def test_missing_email_raises_and_queues_nothing(self):
        with pytest.raises(ValidationError) as exc:
            _send(_event(name="Bob"))

        assert exc.value.messages == {"email": ["is required"]}
        assert get_queue().pushed_jobs == []

    def test_missing_both_reports_both(self):
        with pytest.raises(ValidationError) as exc:
            _send(_event(id=3))

        assert set(exc.value.messages) == {"email", "name"}

    def test_queue_failure_propagates(self, ada):
        get_queue().configure(should_succeed=False)

        with pytest.raises(QueueUnavailableError):
            _send(UserCreated(user=ada))


class TestUserCreatedDelivery:
    def test_event_is_versioned(self):
        assert UserCreated.__version__ == "v1"

    def test_registering_a_user_queues_job(self):
        register_user(name="Ada", email="ada@example.com")

        assert get_queue().jobs == [SendWelcomeEmail(recipient_email="ada@example.com", recipient_name="Ada")]
