"""Seed the accounts every fresh install starts with."""

import structlog

from accounts.user.directory import find_user_by_email
from accounts.user.registration import register_user
from accounts.user.user import CLIENT_ROLE, SUPER_ADMIN_ROLE

logger = structlog.get_logger(__name__)

SEED_USERS = (
    ("Super Admin", "admin@example.com", (SUPER_ADMIN_ROLE,)),
    ("Test Client", "client@example.com", (CLIENT_ROLE,)),
)


def seed_users() -> list[int]:
    """Register the seed users that do not exist yet. Returns the new ids."""
    created = []
    for name, email, roles in SEED_USERS:
        if find_user_by_email(email) is not None:
            logger.info("Seed user already present", email=email)
            continue
        created.append(register_user(name=name, email=email, roles=roles))
    return created
