"""Create the MvcMovie schema and optionally load sample movies.

Usage:
    mvcmovie init-db            # Create missing tables
    mvcmovie init-db --drop     # Drop and recreate (data is lost)
    mvcmovie init-db --seed     # Also insert sample movies and reviews
    mvcmovie init-db --check    # Report tables and row counts only
"""

import argparse
import sys
from collections.abc import Sequence

from sqlalchemy import func, inspect, select

from mvcmovie.database.connection import DatabaseConnection, get_database
from mvcmovie.database.gateway import SqlAlchemyMovieGateway
from mvcmovie.database.models import Base
from mvcmovie.database.repositories import MovieRepository

SAMPLE_MOVIES: list[tuple[str, str, list[tuple[str, int]]]] = [
    ("Spaceballs", "Comedy", [("Great", 4), ("Just ok", 2)]),
    ("Young Frankenstein", "Comedy", [("A classic", 5)]),
    ("Back to the Future", "Science Fiction", []),
    ("Elf", "Holiday", [("Watch it every December", 4)]),
]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse ``init-db`` options.

    Args:
        argv: Arguments to parse (defaults to sys.argv).

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="mvcmovie init-db",
        description="Create the MvcMovie database schema",
    )
    parser.add_argument("--drop", action="store_true", help="Drop catalog tables first")
    parser.add_argument("--seed", action="store_true", help="Insert sample movies and reviews")
    parser.add_argument("--check", action="store_true", help="Report the schema, change nothing")
    return parser.parse_args(argv)


def seed_movies(db: DatabaseConnection) -> int:
    """Load SAMPLE_MOVIES through the gateway into an empty catalog.

    Args:
        db: Target database.

    Returns:
        Number of movies inserted (0 if the catalog was not empty).
    """
    with db.session() as session:
        if MovieRepository(session).count():
            print("⏭️  Catalog already has movies, not seeding")
            return 0

    gateway = SqlAlchemyMovieGateway(db)
    for title, genre, reviews in SAMPLE_MOVIES:
        movie = gateway.create_movie(title, genre)
        for content, rating in reviews:
            gateway.create_review(movie.id, content, rating)

    print(f"🌱 Inserted {len(SAMPLE_MOVIES)} sample movies")
    return len(SAMPLE_MOVIES)


def table_row_counts(db: DatabaseConnection) -> dict[str, int | None]:
    """Row count of each catalog table, None for a missing table."""
    existing = set(inspect(db.engine).get_table_names())
    counts: dict[str, int | None] = {}
    with db.session() as session:
        for name, table in sorted(Base.metadata.tables.items()):
            if name in existing:
                counts[name] = session.scalar(select(func.count()).select_from(table))
            else:
                counts[name] = None
    return counts


def print_table_summary(db: DatabaseConnection) -> None:
    """Print one line per catalog table with its row count."""
    print("\n📊 Catalog tables")
    for name, rows in table_row_counts(db).items():
        state = "missing" if rows is None else f"{rows} rows"
        print(f"   {name:<10} {state}")


def run(db: DatabaseConnection, args: argparse.Namespace) -> int:
    """Apply the requested schema changes.

    Returns:
        Exit code.
    """
    if args.check:
        print_table_summary(db)
        return 0

    if args.drop:
        print("🗑️  Dropping catalog tables")
        db.drop_schema()

    db.create_schema()
    print("📋 Schema is up to date")

    if args.seed:
        seed_movies(db)

    print_table_summary(db)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for ``mvcmovie init-db``.

    Args:
        argv: Command line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success, 1 if the database is unreachable).
    """
    args = parse_args(argv)
    db = get_database()
    print(f"🎬 MvcMovie database: {db.url}")

    if not db.check_connection():
        print("❌ Cannot connect to database")
        return 1

    return run(db, args)


if __name__ == "__main__":
    sys.exit(main())
