"""Local server.

Starts a pounce ASGI server with the live junction App object.
Requires the ``server`` extra (``pip install junction-router[server]``).
"""

from __future__ import annotations


def run_dev_server(
    app: object,
    host: str,
    port: int,
    *,
    reload: bool = False,
    log_level: str = "info",
) -> None:
    """Start a single-worker pounce server with the given App.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but here we have a live ``App`` object, so ``pounce.Server`` is
    used directly with the ASGI callable.

    Args:
        app: ASGI callable (junction App instance).
        host: Bind host address.
        port: Bind port number.
        reload: Restart on file changes.
        log_level: Pounce log level (debug, info, warning, error, critical).
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(host=host, port=port, workers=1, reload=reload, log_level=log_level)
    server = Server(config, app)
    server.run()
