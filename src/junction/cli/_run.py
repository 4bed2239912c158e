"""``junction run`` — serve an app with pounce."""

import argparse

from junction.cli._resolve import resolve_or_exit


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and start the server."""
    app = resolve_or_exit(args.app)
    app.run(host=args.host, port=args.port)
