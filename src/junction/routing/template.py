"""Path-template compilation.

Turns a route template such as ``/users/:id`` into a full-match regex
and the ordered list of parameter names it captures.
"""

import re
from dataclasses import dataclass

from junction.errors import RegistrationError

PARAM_PREFIX = ":"
SEPARATOR = "/"

# One path segment bound to a parameter: one or more word characters
PARAM_PATTERN = r"([A-Za-z0-9_]+)"


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    """A template's matcher plus its parameter names, in template order."""

    pattern: re.Pattern[str]
    param_names: tuple[str, ...]


def split_template(template: str) -> list[str]:
    """Split a template into segments.

    The root template ``"/"`` is a single literal segment::

        "/"            -> ["/"]
        "/users/:id"   -> ["", "users", ":id"]
    """
    if template == SEPARATOR:
        return [template]
    return template.split(SEPARATOR)


def is_param_segment(segment: str) -> bool:
    """True if *segment* binds a path parameter (``:name``)."""
    return segment.startswith(PARAM_PREFIX)


def compile_template(template: str) -> CompiledTemplate:
    """Compile *template* into a regex and its parameter names.

    Parameter segments become capture groups; every other segment is
    matched literally. Segments are joined with an escaped ``/``::

        compiled = compile_template("/users/:id")
        compiled.param_names                        # ("id",)
        compiled.pattern.fullmatch("/users/42")[1]  # "42"

    A parameter name is the segment after ``:``, taken verbatim, so
    ``/users/:user-id`` binds ``user-id``. Raises ``RegistrationError``
    for an unnamed or repeated parameter.
    """
    fragments: list[str] = []
    names: list[str] = []
    for segment in split_template(template):
        if is_param_segment(segment):
            name = segment[len(PARAM_PREFIX) :]
            if not name:
                raise RegistrationError(template, "unnamed parameter")
            if name in names:
                raise RegistrationError(template, f"duplicate parameter {name!r}")
            names.append(name)
            fragments.append(PARAM_PATTERN)
        else:
            fragments.append(re.escape(segment))

    pattern = re.compile(re.escape(SEPARATOR).join(fragments))
    return CompiledTemplate(pattern=pattern, param_names=tuple(names))
