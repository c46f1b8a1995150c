#!/usr/bin/env python3
"""
Seed the CMS database with baseline authors and news for local development.
Safe to rerun: existing rows are updated in place. Prints a JSON summary and
exits non-zero on failure.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from src.api.db_access import DatabaseClient
from src.common.logging import configure_logging
from src.common.settings import get_settings
from src.seed.seed_data import run_seed

LOGGER = logging.getLogger("seed")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Seed authors and news for local development")
    parser.add_argument("--database-url", default=None, help="Overrides DATABASE_URL")
    parser.add_argument("--skip-schema", action="store_true", help="Do not create missing tables")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging()
    database_url = args.database_url or get_settings().DATABASE_URL

    db = DatabaseClient(database_url=database_url)
    try:
        summary = run_seed(db, create_schema=not args.skip_schema)
    except Exception:
        LOGGER.exception("Seeding failed")
        sys.exit(1)
    finally:
        db.engine.dispose()

    print(json.dumps(summary, indent=2))


if __name__ == "__main__":
    main()
