#!/usr/bin/env python
"""
Database initialization script for the Cinema API.

This script creates the movies and users tables and can load the sample
rows used for local development.

Usage:
    # Create missing tables only
    python scripts/init_database.py

    # Drop everything, recreate, and load the sample rows
    python scripts/init_database.py --reset --seed

    # Target another database
    python scripts/init_database.py --database-url sqlite:///data/other.db
"""

import sys
import argparse
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from cinema_api.database import get_db_manager, init_database, seed_database, verify_schema, crud
from cinema_api.utils.logging_config import setup_logging


def print_section(title):
    """Print a formatted section header."""
    print(f"\n{'='*60}")
    print(f"{title}")
    print('='*60)


def main():
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(
        description="Initialize the Cinema API database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/init_database.py --reset --seed
  python scripts/init_database.py --database-url sqlite:///data/cinema.db
        """
    )
    parser.add_argument(
        '--reset',
        action='store_true',
        help='Drop and recreate database tables (WARNING: deletes all data)'
    )
    parser.add_argument(
        '--seed',
        action='store_true',
        help='Load sample movies and users into empty tables'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        help='SQLAlchemy database URL (default: from environment)'
    )
    parser.add_argument(
        '--quiet',
        action='store_true',
        help='Suppress verbose output'
    )
    args = parser.parse_args()
    verbose = not args.quiet

    setup_logging(level="WARNING" if args.quiet else "INFO")

    db_manager = get_db_manager(database_url=args.database_url)
    try:
        if verbose:
            print_section("Creating schema")
        init_database(reset=args.reset, db_manager=db_manager)

        if args.seed:
            if verbose:
                print_section("Loading sample data")
            movies, users = seed_database(db_manager)
            if verbose:
                print(f"  Movies inserted: {movies}")
                print(f"  Users inserted:  {users}")

        success = verify_schema(db_manager)
        if verbose:
            print_section("Summary")
            with db_manager.session_scope() as session:
                print(f"  Movies: {crud.get_movie_count(session):,}")
                print(f"  Users:  {crud.get_user_count(session):,}")
            print("\nDatabase initialization successful!" if success else "\nDatabase initialization failed!")
    finally:
        db_manager.close()

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
