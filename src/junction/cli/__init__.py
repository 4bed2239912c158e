"""Junction CLI — route table inspection, path matching and a local server.

Entry point registered as ``junction`` in ``pyproject.toml``::

    [project.scripts]
    junction = "junction.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``junction`` command."""
    parser = argparse.ArgumentParser(
        prog="junction",
        description="Junction — a small ASGI request router.",
    )
    parser.add_argument(
        "--log-level",
        default="warning",
        choices=("debug", "info", "warning", "error"),
        help="Logging level (default: warning)",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- junction routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    # -- junction match ---------------------------------------------------
    match_parser = subparsers.add_parser("match", help="Show how a URL is routed")
    match_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    match_parser.add_argument("url", help="Request path with optional query (e.g. /users/1?x=2)")

    # -- junction run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Serve the app with pounce")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(level=args.log_level.upper())

    if args.command == "routes":
        from junction.cli._routes import run_routes

        run_routes(args)
    elif args.command == "match":
        from junction.cli._match import run_match

        run_match(args)
    elif args.command == "run":
        from junction.cli._run import run_server

        run_server(args)
