"""``junction match`` — show how a URL would be routed.

Prints the winning template, the bound path parameters and the parsed
query string, without calling the handler.
"""

import argparse
import json

from junction.cli._resolve import resolve_or_exit
from junction.http.query import parse_query_string


def run_match(args: argparse.Namespace) -> None:
    """Resolve ``args.url`` against the app's route table.

    Exits with status 1 when nothing matches and no ``"404"`` route is
    registered.
    """
    app = resolve_or_exit(args.app)
    path, _, query_string = args.url.partition("?")

    match = app.match(path)
    if match is not None:
        print(f"route:  {match.route.template}")
        print(f"params: {json.dumps(match.path_params)}")
    elif app.router.not_found_route is not None:
        print("route:  404")
    else:
        print(f"No route matches {path!r}")
        raise SystemExit(1)

    print(f"query:  {json.dumps(parse_query_string(query_string))}")
