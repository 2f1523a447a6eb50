from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Mapping

# Option fields whose values are mappings merged key by key.
_MAPPING_FIELDS = ("headers", "cookies", "settings")
# Option fields where a per-call value simply replaces the default.
_SCALAR_FIELDS = ("method", "data", "json", "form", "query")


@dataclass(frozen=True, slots=True)
class RequestOptions:
    """Everything that shapes a single HTTP exchange.

    For body-bearing methods the body comes from ``json``, then ``form``,
    then ``data``; only the first non-empty one is used. ``settings`` holds
    transport tuning such as ``timeout`` or ``proxy``.
    """

    method: str | None = None
    headers: Mapping[str, str] = field(default_factory=dict)
    data: str | Mapping[str, Any] | None = None
    json: Any = None
    form: Mapping[str, Any] | None = None
    query: str | Mapping[str, Any] | None = None
    cookies: Mapping[str, str] = field(default_factory=dict)
    settings: Mapping[str, Any] = field(default_factory=dict)

    def merge(self, override: RequestOptions | None) -> RequestOptions:
        """Return a new instance with ``override`` layered on top of ``self``."""
        if override is None:
            return self
        changes: dict[str, Any] = {}
        for name in _MAPPING_FIELDS:
            changes[name] = {**getattr(self, name), **getattr(override, name)}
        for name in _SCALAR_FIELDS:
            value = getattr(override, name)
            if value is not None:
                changes[name] = value
        return replace(self, **changes)

    def with_updates(self, **changes: Any) -> RequestOptions:
        return replace(self, **changes)
