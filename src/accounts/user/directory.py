"""User lookups over the User repository.

The notifications context reads users through these helpers: find the new
user by email, find every super-admin, pick users for the manual trigger.
"""

from protean.utils.globals import current_domain

from accounts.user.user import User


def get_user(user_id: int) -> User:
    """Return the user or raise ``ObjectNotFoundError``."""
    return current_domain.repository_for(User).get(user_id)


def all_users() -> list[User]:
    """Every user, ordered by id."""
    users = current_domain.repository_for(User)._dao.query.all().items
    return sorted(users, key=lambda user: user.id)


def find_user_by_email(email: str) -> User | None:
    """Case-insensitive lookup; emails are stored lowercased."""
    repo = current_domain.repository_for(User)
    users = repo._dao.query.filter(email=(email or "").strip().lower()).all().items
    return users[0] if users else None


def users_with_role(*role_names: str) -> list[User]:
    """Users holding any of ``role_names``, ordered by id."""
    return [user for user in all_users() if user.has_role(*role_names)]


def next_user_id() -> int:
    users = all_users()
    return users[-1].id + 1 if users else 1
