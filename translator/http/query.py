from __future__ import annotations

import re
from typing import Any, Iterator, List, Mapping, Tuple
from urllib.parse import quote_plus

# "dt%5B0%5D=" -> "dt=", also collapses nested indexes such as "a%5B0%5D%5B1%5D=".
_INDEX_MARKER = re.compile(r"(?:%5B\d+%5D)+=")


def urlencode_form(data: Mapping[str, Any]) -> str:
    """Encode a mapping as application/x-www-form-urlencoded.

    Nested sequences and mappings become bracketed keys (``a[0]=x``,
    ``a[k]=y``), ``None`` values and empty containers are dropped and booleans
    are sent as ``1``/``0``. Key order is preserved.
    """
    pairs = list(_flatten(data, prefix=None))
    return "&".join(f"{quote_plus(key, safe='')}={quote_plus(value, safe='')}" for key, value in pairs)


def build_query(data: str | Mapping[str, Any]) -> str:
    """Build a query string, collapsing indexed keys into repeated bare keys.

    Strings pass through untouched. ``{"dt": ["t", "at"]}`` becomes
    ``dt=t&dt=at`` instead of ``dt%5B0%5D=t&dt%5B1%5D=at``.
    """
    if isinstance(data, str):
        return data
    if not isinstance(data, Mapping):
        return ""
    return _INDEX_MARKER.sub("=", urlencode_form(data))


def _flatten(value: Any, prefix: str | None) -> Iterator[Tuple[str, str]]:
    if isinstance(value, Mapping):
        items: List[Tuple[Any, Any]] = list(value.items())
    elif isinstance(value, (list, tuple)):
        items = list(enumerate(value))
    else:
        if prefix is not None and value is not None:
            yield prefix, _scalar(value)
        return

    for key, item in items:
        if item is None:
            continue
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        if isinstance(item, (Mapping, list, tuple)):
            yield from _flatten(item, name)
        else:
            yield name, _scalar(item)


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)
