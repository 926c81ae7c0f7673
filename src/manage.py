"""RillTech management CLI.

Every command runs against the store DATABASE_URL points at, so a SQLite or
PostgreSQL URL is needed for state to outlive the command.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py seed           # Create the default admin and client users
    python src/manage.py trigger-user-created [USER_ID] [--admin ADMIN_ID]
    python src/manage.py work [--queue default] [--once]
    python src/manage.py setting ses.region
"""

import argparse
import sys

from protean.exceptions import ObjectNotFoundError

from shared.domain import init_domain, rilltech
from shared.utils.logging import configure_logging


def setup_database():
    """Create tables for the configured SQL store."""
    from shared.utils.db import setup_db

    print("Creating database schema...")
    touched = setup_db(rilltech)
    if not touched:
        print("  No SQL database configured (set DATABASE_URL); nothing to create.")
    print("Done.")
    return 0


def drop_database():
    """Drop tables for the configured SQL store."""
    from shared.utils.db import drop_db

    print("Dropping database schema...")
    drop_db(rilltech)
    print("Done.")
    return 0


def seed():
    """Create the default users, skipping any that already exist."""
    from accounts.user.seed import seed_users

    with rilltech.domain_context():
        created = seed_users()

    print(f"Seeded {len(created)} user(s).")
    return 0


def trigger_user_created(user_id=None, admin_id=None):
    """Send NewUserRegistered for an existing user to one or all admins."""
    from notifications.trigger import trigger_user_created as trigger

    try:
        with rilltech.domain_context():
            notification_ids = trigger(user_id=user_id, admin_id=admin_id)
    except ObjectNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(f"Notified {len(notification_ids)} admin(s).")
    print("User created event triggered successfully!")
    return 0


def work(queue_name="default", once=False):
    """Run queued jobs until the queue is empty."""
    from notifications.worker import work as run_worker

    with rilltech.domain_context():
        result = run_worker(queue_name=queue_name, max_jobs=1 if once else None)

    print(f"Processed {result.processed} job(s), {result.failed} failed.")
    return 1 if result.failed else 0


def show_setting(path):
    """Print one service setting by dotted path."""
    from shared.config import service_setting

    try:
        value = service_setting(path)
    except KeyError:
        print(f"Unknown setting: {path}", file=sys.stderr)
        return 1

    print("" if value is None else value)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="RillTech management commands")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Create the default admin and client users")

    trigger_parser = subparsers.add_parser(
        "trigger-user-created",
        help="Trigger a user created notification for testing",
    )
    trigger_parser.add_argument("user_id", nargs="?", type=int, help="User to announce (default: random user)")
    trigger_parser.add_argument("--admin", type=int, dest="admin_id", help="Admin to notify (default: all admins)")

    work_parser = subparsers.add_parser("work", help="Run queued jobs until the queue is empty")
    work_parser.add_argument("--queue", default="default", dest="queue_name", help="Queue to work (default: default)")
    work_parser.add_argument("--once", action="store_true", help="Run at most one job")

    setting_parser = subparsers.add_parser("setting", help="Show a third-party service setting")
    setting_parser.add_argument("path", help="Dotted setting path, e.g. ses.region")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    configure_logging()

    if args.command == "setting":
        return show_setting(args.path)

    init_domain()

    if args.command == "setup-db":
        return setup_database()
    elif args.command == "drop-db":
        return drop_database()
    elif args.command == "seed":
        return seed()
    elif args.command == "trigger-user-created":
        return trigger_user_created(user_id=args.user_id, admin_id=args.admin_id)
    elif args.command == "work":
        return work(queue_name=args.queue_name, once=args.once)


if __name__ == "__main__":
    sys.exit(main())
