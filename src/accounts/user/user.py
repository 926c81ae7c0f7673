"""User aggregate and the UserRecord snapshot other contexts receive.

Roles are stored as a JSON array of role names. Role and permission shapes
for the admin UI are built in the API layer from those names.
"""

import json
from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Integer, String, Text

from shared.domain import rilltech

SUPER_ADMIN_ROLE = "super-admin"
ADMIN_ROLE = "admin"
CLIENT_ROLE = "client"
DEFAULT_GUARD = "web"

# Seeded role ids, in seeding order
ROLE_IDS = {SUPER_ADMIN_ROLE: 1, ADMIN_ROLE: 2, CLIENT_ROLE: 3}


def validate_role_names(names) -> list[str]:
    """Return ``names`` as a list, rejecting any role that is not seeded."""
    names = list(names or [])
    unknown = [name for name in names if name not in ROLE_IDS]
    if unknown:
        raise ValidationError({"roles": [f"Unknown role: {name}" for name in unknown]})
    return names


@rilltech.value_object
class UserRecord:
    """Snapshot of a user as carried by UserCreated and NewUserRegistered.

    Every field is optional here; consumers check the ones they need with
    :meth:`missing_fields` and fail fast.
    """

    id: Integer()
    name: String(max_length=255)
    email: String(max_length=254)
    created_at: String(max_length=50)

    def missing_fields(self, *names: str) -> list[str]:
        """Names from ``names`` whose value is None or blank."""
        missing = []
        for name in names:
            value = getattr(self, name)
            if value is None or (isinstance(value, str) and not value.strip()):
                missing.append(name)
        return missing


@rilltech.aggregate
class User:
    """A person with an account on the platform."""

    id: Integer(identifier=True)
    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    avatar: String(max_length=2048)
    email_verified_at: DateTime()
    roles: Text()  # JSON array of role names
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def register(cls, user_id, name, email, roles=None, email_verified_at=None):
        """Create a user and raise UserCreated."""
        from accounts.user.events import UserCreated

        now = datetime.now(UTC)
        user = cls(
            id=user_id,
            name=name,
            email=email,
            roles=json.dumps(validate_role_names(roles)),
            email_verified_at=email_verified_at,
            created_at=now,
            updated_at=now,
        )
        user.raise_(UserCreated(user=user.to_record()))
        return user

    def role_names(self) -> list[str]:
        return json.loads(self.roles) if self.roles else []

    def has_role(self, *names: str) -> bool:
        """True if the user holds any of the given roles."""
        return any(name in names for name in self.role_names())

    def to_record(self) -> UserRecord:
        """Snapshot this user for events and notifications."""
        return UserRecord(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at.isoformat() if self.created_at else None,
        )
