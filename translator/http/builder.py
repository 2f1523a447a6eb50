"""Turns resolved URL components plus request options into a wire request."""
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping

from .options import RequestOptions
from .query import build_query, urlencode_form
from .url import UrlComponents

JSON_CONTENT_TYPE = "application/json"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


@dataclass(slots=True)
class PreparedRequest:
    method: str
    path: str
    body: str | None = None
    headers: Dict[str, str] = field(default_factory=dict)
    cookies: Dict[str, str] = field(default_factory=dict)
    settings: Dict[str, Any] = field(default_factory=dict)


def encode_json(payload: Any) -> str:
    return json.dumps(payload, separators=(",", ":"))


def config_request(info: UrlComponents, options: RequestOptions) -> PreparedRequest:
    """Build the final path, body and headers for one exchange.

    ``data`` feeds the body for POST/PUT/PATCH and the query string for every
    other method, never both. An explicit ``query`` is always appended to the
    path, after any data-derived segment. Caller headers are applied last and
    win over the content type chosen here.
    """
    path = info.path
    if info.query:
        path = f"{path}?{info.query}"

    method = (options.method or "GET").upper()
    headers: Dict[str, str] = {}
    body: str | None = None

    if method in BODY_METHODS:
        payload = ""
        if options.json:
            payload = encode_json(options.json)
            headers["Content-Type"] = JSON_CONTENT_TYPE
        elif options.form:
            payload = _encode_form(options.form)
            headers["Content-Type"] = FORM_CONTENT_TYPE
        elif options.data:
            if isinstance(options.data, Mapping):
                payload = urlencode_form(options.data)
                headers["Content-Type"] = FORM_CONTENT_TYPE
            else:
                payload = str(options.data)

        if payload:
            body = payload
    elif options.data:
        path = append_query(path, build_query(options.data))

    if options.query:
        path = append_query(path, build_query(options.query))

    return PreparedRequest(
        method=method,
        path=path,
        body=body,
        headers=merge_headers(headers, options.headers),
        cookies=dict(options.cookies),
        settings=dict(options.settings),
    )


def append_query(path: str, query: str) -> str:
    if not query:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{query}"


def merge_headers(base: Mapping[str, str], override: Mapping[str, str]) -> Dict[str, str]:
    """Apply ``override`` on top of ``base``; header names compare case-insensitively."""
    merged = dict(base)
    for name, value in override.items():
        for existing in [key for key in merged if key.lower() == name.lower()]:
            del merged[existing]
        merged[name] = value
    return merged


def _encode_form(form: Any) -> str:
    if isinstance(form, Mapping):
        return urlencode_form(form)
    return build_query(form)
