"""
Query string helpers.

``parse_query`` reads an explicit string or, when none is given, the host
location (search plus the query part of the hash). Repeated keys collect
their values into a list: ``?user=tom&user=jerry`` gives
``{"user": ["tom", "jerry"]}``.
"""

import re
from typing import Any, Dict, List, Optional, Union
from urllib.parse import unquote

from ..core.context import HostContext, resolve_context
from ..core.errors import DecodeError


QueryValue = Optional[str]
QueryMapping = Dict[str, Union[QueryValue, List[QueryValue]]]

_MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_LEADING_MARKER = re.compile(r"^[?#&]")


def decode_component(text: str) -> str:
    """Strict percent-decoding.

    Raises ``DecodeError`` for a ``%`` not followed by two hex digits or for
    escapes that do not form valid UTF-8.
    """
    if "%" not in text:
        return text
    if _MALFORMED_ESCAPE.search(text):
        raise DecodeError(text)
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as e:
        raise DecodeError(text, "invalid UTF-8 sequence") from e


def _location_query(context: HostContext) -> str:
    location = context.location
    hash_parts = location.hash.split("?")
    hash_query = hash_parts[1] if len(hash_parts) > 1 else ""
    return f"{location.search}&{hash_query}" if hash_query else location.search


def parse_query(query_string: str = "", context: Optional[HostContext] = None) -> QueryMapping:
    """Parse a ``&``-separated parameter string into a mapping.

    Keys without ``=`` map to ``None``. ``DecodeError`` from a malformed
    escape is not caught.
    """
    res: QueryMapping = {}
    query = query_string if query_string else _location_query(resolve_context(context))
    query = _LEADING_MARKER.sub("", query.strip(), count=1)

    if not query:
        return res

    for param in query.split("&"):
        parts = param.replace("+", " ").split("=")
        key = decode_component(parts[0])
        val = decode_component("=".join(parts[1:])) if len(parts) > 1 else None

        if key not in res:
            res[key] = val
        elif isinstance(res[key], list):
            res[key].append(val)
        else:
            res[key] = [res[key], val]

    return res


def filter_empty_params(query: Dict[str, Any]) -> Dict[str, Any]:
    """Drop ``None``, blank strings and the literal string ``"null"``."""
    res: Dict[str, Any] = {}
    for key, val in query.items():
        if isinstance(val, str):
            if not val.strip() or val == "null":
                continue
        elif val is None:
            continue
        res[key] = val
    return res
