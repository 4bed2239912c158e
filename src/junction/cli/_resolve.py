"""Locate the app a ``junction`` subcommand should work on.

The target is named ``"module:attribute"`` (attribute defaults to
``app``) and may be an ``App``, a bare route mapping such as
``{"/users/:id": show_user}``, or a zero-argument factory returning an
``App``.
"""

import importlib
import sys
from collections.abc import Mapping
from typing import Any

from junction.app import App
from junction.errors import JunctionError

DEFAULT_ATTRIBUTE = "app"


def resolve_app(import_string: str) -> App:
    """Import *import_string* and turn what it names into an ``App``.

    Raises:
        ModuleNotFoundError: If the module cannot be imported.
        AttributeError: If the attribute does not exist on the module.
        TypeError: If the target is none of the accepted shapes, or a
            factory fails or returns something other than an ``App``.
        RegistrationError: If a route mapping does not compile.
    """
    module_name, _, attr = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attr or DEFAULT_ATTRIBUTE)
    return _as_app(target, import_string)


def _as_app(target: Any, origin: str) -> App:
    match target:
        case App():
            return target
        case Mapping():
            return App(routes=target)
        case _ if callable(target):
            try:
                built = target()
            except Exception as exc:
                msg = f"App factory {origin!r} raised an error: {exc}"
                raise TypeError(msg) from exc
            if not isinstance(built, App):
                msg = f"App factory {origin!r} returned {type(built).__name__}, not a junction.App"
                raise TypeError(msg)
            return built
        case _:
            msg = (
                f"{origin!r} is a {type(target).__name__}; expected a junction.App, "
                "a route mapping or an app factory"
            )
            raise TypeError(msg)


def resolve_or_exit(import_string: str) -> App:
    """``resolve_app`` that prints the error and exits with status 1."""
    try:
        return resolve_app(import_string)
    except (ModuleNotFoundError, AttributeError, TypeError, JunctionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
