"""Walkthrough of the CRUD helpers and transactions.

Runs against the database configured through ``DB_*`` environment variables
(or a ``.env`` file), or against a throwaway in-memory SQLite database with
``--sqlite-memory``. The target must have a ``users`` table with ``id``,
``name`` and ``age`` columns; the in-memory database creates it.
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from simple_database.core import Database
from simple_database.exceptions import DatabaseError
from simple_database.utils import row_to_json

logger = logging.getLogger(__name__)

USERS_TABLE_SQLITE = """
CREATE TABLE users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    age INTEGER NOT NULL
)
"""


def run_demo(db: Database) -> None:
    """Insert, fetch, update, list, delete, then insert two users in a transaction."""
    print("Example 1: Inserting a new user")
    user_id = db.insert("users", {"name": "John Doe", "age": 30})
    print(f"Inserted user with ID: {user_id}")
    row_id = int(user_id)

    print("\nExample 2: Fetching a single user")
    user = db.fetch("SELECT * FROM users WHERE id = :id", {"id": row_id})
    if user:
        print(f"User found: {row_to_json(user)}")
    else:
        print("User not found")

    print("\nExample 3: Updating a user")
    affected = db.update("users", {"name": "John Smith", "age": 31}, {"id": row_id})
    print(f"Updated {affected} user(s)")

    print("\nExample 4: Fetching all users")
    for user in db.fetch_all("SELECT * FROM users"):
        print(f"User: {user['name']} (Age: {user['age']})")

    print("\nExample 5: Deleting a user")
    affected = db.delete("users", {"id": row_id})
    print(f"Deleted {affected} user(s)")

    print("\nExample 6: Using a transaction")
    try:
        db.begin_transaction()
        db.insert("users", {"name": "Alice", "age": 25})
        db.insert("users", {"name": "Bob", "age": 35})
        db.commit()
        print("Transaction committed: 2 users inserted")
    except DatabaseError as e:
        if db.in_transaction:
            db.rollback()
        print(f"Transaction failed: {e.message}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple-database-demo",
        description="Run the simple_database CRUD walkthrough",
    )
    parser.add_argument(
        "--sqlite-memory",
        action="store_true",
        help="Use an in-memory SQLite database instead of DB_* settings",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help="Path to a .env file with DB_* settings",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Console entry point. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.sqlite_memory:
            db = Database("sqlite", database=":memory:")
        else:
            db = Database.from_env(env_file=args.env_file)
    except ValueError as e:
        print(f"Error: Invalid database configuration: {e}", file=sys.stderr)
        return 2

    try:
        with db:
            if args.sqlite_memory:
                db.query(USERS_TABLE_SQLITE)
            run_demo(db)
    except DatabaseError as e:
        logger.error(f"Demo failed: {e.message}", exc_info=args.verbose)
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
