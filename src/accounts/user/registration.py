"""User registration: command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String, Text
from protean.utils.globals import current_domain

from accounts.user.directory import find_user_by_email, next_user_id
from accounts.user.email import validate_email_address
from accounts.user.user import User
from shared.domain import rilltech

logger = structlog.get_logger(__name__)


@rilltech.command(part_of="User")
class RegisterUser:
    """Create a user account, optionally with roles."""

    name: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    roles: Text()  # JSON array of role names


@rilltech.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        """Store a new user; UserCreated is raised with it.

        Raises:
            ValidationError: if the name is blank, the email is malformed or
                already registered, or a role is unknown.
        """
        name = (command.name or "").strip()
        if not name:
            raise ValidationError({"name": ["is required"]})
        email = validate_email_address(command.email)

        if find_user_by_email(email) is not None:
            raise ValidationError({"email": [f"Email already registered: {email}"]})

        user = User.register(
            user_id=next_user_id(),
            name=name,
            email=email,
            roles=json.loads(command.roles) if command.roles else [],
        )
        current_domain.repository_for(User).add(user)

        logger.info("User registered", user_id=user.id, email=user.email)
        return user.id


def register_user(name: str, email: str, roles=None) -> int:
    """Process RegisterUser synchronously and return the new user's id."""
    command = RegisterUser(name=name, email=email, roles=json.dumps(list(roles or [])))
    return current_domain.process(command, asynchronous=False)
