"""Query string parsing with value coercion.

``parse_query_string`` turns ``a=1&user[name]=ada&debug=true`` into::

    {"a": 1, "user": {"name": "ada"}, "debug": True}

Values are coerced by an ordered rule table (quoted string, boolean,
integer, float, plain string). Bracketed keys are rebuilt into nested
dicts and deep-merged, so ``a[b]=1&a[c]=2`` keeps both entries.
"""

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias
from urllib.parse import unquote

QueryValue: TypeAlias = bool | int | float | str

# name[a][b]...[n], a bare word followed by one or more bracketed sub-keys
_OBJECT_KEY = re.compile(r"([A-Za-z0-9_]+)((?:\[[^\[\]]+\])+)")
_SUBKEY = re.compile(r"\[([^\[\]]+)\]")


@dataclass(frozen=True, slots=True)
class CoercionRule:
    """One step of the coercion cascade: a full-match gate and a converter."""

    name: str
    pattern: re.Pattern[str]
    convert: Callable[[re.Match[str]], QueryValue]


def _unquote(m: re.Match[str]) -> str:
    # group 1 for '...', group 2 for "..."
    return m.group(m.lastindex or 0)


# Order matters: the first rule whose pattern fully matches wins.
COERCION_RULES: tuple[CoercionRule, ...] = (
    CoercionRule("quoted", re.compile(r"'(.*)'|\"(.*)\"", re.DOTALL), _unquote),
    CoercionRule("bool", re.compile(r"true|false"), lambda m: m.group(0) == "true"),
    # int() refuses more than 4300 digits by default; longer runs stay strings
    CoercionRule("int", re.compile(r"[0-9]{1,4300}"), lambda m: int(m.group(0))),
    CoercionRule("float", re.compile(r"[-+]?[0-9]+\.[0-9]+"), lambda m: float(m.group(0))),
)


def coerce_value(value: str) -> QueryValue:
    """Coerce a decoded query value to bool, int, float or str.

    The rule patterns only admit strings the converters accept, so
    conversion cannot fail. A value no rule matches is returned as is.
    """
    for rule in COERCION_RULES:
        m = rule.pattern.fullmatch(value)
        if m is not None:
            return rule.convert(m)
    return value


def deep_merge(base: Mapping[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively union two nested mappings.

    Keys present in both are merged when both values are mappings;
    otherwise the value from *incoming* wins. Neither input is modified.
    """
    result = dict(base)
    for key, value in incoming.items():
        current = result.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value
    return result


def merge_into(target: dict[str, Any], incoming: Mapping[str, Any]) -> dict[str, Any]:
    """In-place ``deep_merge``: fold *incoming* into *target* and return it.

    Only the dicts along *incoming*'s key paths are touched, so folding
    many small assignments into one result stays linear.
    """
    for key, value in incoming.items():
        current = target.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merge_into(current, value)
        else:
            target[key] = value
    return target


def parse_object_key(key: str) -> list[str] | None:
    """Split ``name[a][b]`` into ``["name", "a", "b"]``.

    Returns ``None`` if *key* is not in bracket notation.
    """
    m = _OBJECT_KEY.fullmatch(key)
    if m is None:
        return None
    return [m.group(1), *_SUBKEY.findall(m.group(2))]


def nest(path: list[str], value: Any) -> dict[str, Any]:
    """Build ``{path[0]: {path[1]: ... {path[-1]: value}}}``."""
    result: Any = value
    for key in reversed(path):
        result = {key: result}
    return result


def split_pairs(raw: str) -> list[tuple[str, str]]:
    """Tokenize a raw query string into decoded ``(key, value)`` pairs.

    Empty tokens (``a=1&&b=2``) are dropped. A token without ``=`` has
    an empty value.
    """
    pairs: list[tuple[str, str]] = []
    for token in raw.split("&"):
        if not token:
            continue
        key, _, value = token.partition("=")
        pairs.append((unquote(key), unquote(value)))
    return pairs


def parse_query_string(raw: str | bytes | None) -> dict[str, Any]:
    """Parse a raw query string into a nested dict of coerced values.

    Empty or missing input gives ``{}``::

        parse_query_string("a[b][c]=5")   # {"a": {"b": {"c": 5}}}
        parse_query_string("e='hi'")      # {"e": "hi"}
    """
    if not raw:
        return {}
    if isinstance(raw, bytes):
        raw = raw.decode("latin-1")

    result: dict[str, Any] = {}
    for key, value in split_pairs(raw):
        coerced = coerce_value(value)
        path = parse_object_key(key)
        if path is None:
            result[key] = coerced
        else:
            merge_into(result, nest(path, coerced))
    return result
