#!/usr/bin/env python3
"""
Seed the posts collection with sample data.

Inserts four posts titled Create, Read, Update and Delete (author
``Sherlock``, today's date, empty summary, no votes) and prints their
generated ids.  Pending migrations are applied first, so the script
also works on a fresh database file.

Usage:
    python seed_posts.py --db ./message_board_development.db --reset

If --db is omitted, the database configured through DATABASE_URL /
MESSAGE_BOARD_ENV is used.
"""

import argparse
import datetime
from typing import List, Optional

from message_board_api.app.core.config import settings
from message_board_api.app.core.db import get_database_path, init_db
from message_board_api.app.core.document_store import DocumentCollection

SAMPLE_TITLES = ("Create", "Read", "Update", "Delete")


def sample_posts(today: Optional[datetime.date] = None) -> List[dict]:
    """Return the sample posts as plain documents."""
    today = today or datetime.date.today()
    return [
        {
            "title": title,
            "author": "Sherlock",
            "date": today.isoformat(),
            "summary": "",
            "votes": 0,
        }
        for title in SAMPLE_TITLES
    ]


def seed(database_path: str, reset: bool = False) -> List[str]:
    """Insert the sample posts and return their ids in insertion order."""
    init_db(database_path)
    collection = DocumentCollection("posts", database_path)
    if reset:
        removed = collection.delete_all()
        print(f"[-] Removed {removed} existing posts")
    return [str(collection.insert_one(post)) for post in sample_posts()]


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Seed the message board with sample posts.")
    ap.add_argument("--db", help="Path to SQLite DB file (default: configured DATABASE_URL)")
    ap.add_argument("--reset", action="store_true", help="Delete all posts before seeding")
    args = ap.parse_args(argv)

    database_path = get_database_path(args.db or settings.database_url)
    for post_id in seed(database_path, reset=args.reset):
        print(f"[+] Created post {post_id}")


if __name__ == "__main__":
    main()
