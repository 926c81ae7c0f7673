"""Domain events for the User aggregate."""

from protean.fields import ValueObject

from accounts.user.user import UserRecord
from shared.domain import rilltech


@rilltech.event(part_of="User")
class UserCreated:
    """A user account was created on the platform."""

    __version__ = "v1"

    user: ValueObject(UserRecord)
