"""``junction routes`` — list registered routes."""

import argparse

from junction.cli._resolve import resolve_or_exit


def run_routes(args: argparse.Namespace) -> None:
    """Print TEMPLATE, PARAMS and HANDLER for every route, in match order."""
    app = resolve_or_exit(args.app)

    routes = app.router.routes
    if not routes:
        print("No routes registered.")
        return

    rows: list[tuple[str, str, str]] = []
    for route in routes.values():
        params = ", ".join(route.param_names) or "-"
        handler_name = getattr(route.handler, "__name__", str(route.handler))
        rows.append((route.template, params, handler_name))

    max_template = max(max(len(r[0]) for r in rows), 8)  # "TEMPLATE" header
    max_params = max(max(len(r[1]) for r in rows), 6)  # "PARAMS" header

    fmt = f"{{:<{max_template}}}  {{:<{max_params}}}  {{}}"
    print(fmt.format("TEMPLATE", "PARAMS", "HANDLER"))
    sep_len = max_template + max_params + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for template, params, handler_name in rows:
        print(fmt.format(template, params, handler_name))
