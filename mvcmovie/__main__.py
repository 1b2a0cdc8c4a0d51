"""Command line entry point: ``python -m mvcmovie`` or ``mvcmovie``."""

import argparse
import sys
from collections.abc import Sequence

from mvcmovie.settings import settings


def serve(host: str, port: int, reload: bool) -> None:
    """Run the web application under uvicorn."""
    import uvicorn

    print(f"🎬 MvcMovie on http://{host}:{port}/movies")
    uvicorn.run("mvcmovie.api.main:app", host=host, port=port, reload=reload)


def build_parser() -> argparse.ArgumentParser:
    """Top-level parser with the ``serve`` and ``init-db`` subcommands."""
    parser = argparse.ArgumentParser(
        prog="mvcmovie",
        description="MvcMovie - movie catalog with reviews",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mvcmovie serve --port 8080     # Web application
  mvcmovie init-db --seed        # Create tables with sample data
        """,
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    serve_parser = commands.add_parser("serve", help="Run the web application")
    serve_parser.add_argument("--host", default=settings.api.host, help="Interface to bind")
    serve_parser.add_argument("--port", type=int, default=settings.api.port, help="TCP port")
    serve_parser.add_argument(
        "--reload",
        action="store_true",
        default=settings.api.reload,
        help="Restart on code changes",
    )

    commands.add_parser("init-db", help="Create the database schema", add_help=False)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Dispatch a subcommand.

    Args:
        argv: Command line arguments (defaults to sys.argv).

    Returns:
        Process exit code.
    """
    parser = build_parser()
    args, extra = parser.parse_known_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    try:
        if args.command == "init-db":
            from mvcmovie.scripts.init_database import main as init_database

            return init_database(extra)
        if extra:
            parser.error(f"unrecognized arguments: {' '.join(extra)}")
        serve(args.host, args.port, args.reload)
    except KeyboardInterrupt:
        print("\n⚠️  Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
