"""Utility script to create (or reset) the configured database tables."""
from __future__ import annotations

import argparse
import sys

from sqlalchemy.exc import SQLAlchemyError

from rankboard.core.settings import settings
from rankboard.db.session import create_tables, drop_tables


def main() -> None:
    parser = argparse.ArgumentParser(description="Ensure or reset the configured database")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop every table before creating them again.",
    )
    args = parser.parse_args()

    try:
        if args.drop_tables:
            drop_tables()
            print("[ensure_db] dropped all tables")
        create_tables()
    except SQLAlchemyError as exc:
        print(f"[ensure_db] ERROR: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"[ensure_db] tables ready at {settings.effective_database_url}")


if __name__ == "__main__":
    main()
