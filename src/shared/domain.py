"""RillTech domain: the single Protean domain both bounded contexts register on.

Accounts and Notifications share one domain so that UserCreated, raised when
a User is added, reaches the notifications handler inside the same unit of
work (``event_processing = "sync"`` in domain.toml).

DATABASE_URL selects the store: unset keeps everything in memory, a
``sqlite://`` or ``postgresql://`` URL persists across processes (the CLI and
the queue worker rely on that).
"""

import importlib

import structlog
from protean.domain import Domain

rilltech = Domain(name="rilltech")

logger = structlog.get_logger(__name__)

# Modules that register aggregates, events, commands and handlers
ELEMENT_MODULES = (
    "accounts.user.user",
    "accounts.user.events",
    "accounts.user.registration",
    "notifications.notification.notification",
    "notifications.notification.inbox",
    "notifications.notification.account_events",
    "notifications.queue.database_queue",
)

_initialized = False


def database_config(database_url: str | None) -> dict:
    """Provider settings for ``database_url`` (memory when unset)."""
    if not database_url:
        return {"provider": "memory"}
    if database_url.startswith("sqlite"):
        return {"provider": "sqlite", "database_uri": database_url}
    if database_url.startswith("postgres"):
        return {"provider": "postgresql", "database_uri": database_url}
    raise ValueError(f"Unsupported DATABASE_URL: {database_url}")


def init_domain() -> Domain:
    """Register every element and initialize the domain once per process."""
    global _initialized
    if _initialized:
        return rilltech

    from shared.config import get_app_settings

    for module in ELEMENT_MODULES:
        importlib.import_module(module)

    rilltech.config["databases"]["default"] = database_config(get_app_settings().database_url)
    rilltech.init()
    _initialized = True

    logger.info(
        "Domain initialized",
        domain=rilltech.name,
        database=rilltech.config["databases"]["default"]["provider"],
    )
    return rilltech
