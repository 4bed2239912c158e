"""Shared type aliases used across junction modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler, called with (request, state), returns a response value
Handler: TypeAlias = Callable[..., Any]

# Logger capability: a unary function accepting a message
LogHook: TypeAlias = Callable[[str], None]

# Per-request hook, called with (request, response) after dispatch
RequestHook: TypeAlias = Callable[..., None]
