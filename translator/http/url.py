from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

# Components missing from a URL fall back to these values.
DEFAULT_URL_DATA = {
    "scheme": "http",
    "host": "localhost",
    "port": 80,
    "user": "",
    "password": "",
    "path": "/",
    "query": "",
    "fragment": "",
}

HTTPS_PORT = 443


@dataclass(frozen=True, slots=True)
class UrlComponents:
    scheme: str = "http"
    host: str = "localhost"
    port: int = 80
    user: str = ""
    password: str = ""
    path: str = "/"
    query: str = ""
    fragment: str = ""

    @property
    def is_secure(self) -> bool:
        """TLS is used exactly when the resolved port is 443."""
        return self.port == HTTPS_PORT

    def origin(self) -> str:
        scheme = "https" if self.is_secure else "http"
        host = f"[{self.host}]" if ":" in self.host else self.host
        auth = ""
        if self.user:
            auth = f"{self.user}:{self.password}@" if self.password else f"{self.user}@"
        return f"{scheme}://{auth}{host}:{self.port}"


def parse_url(url: str) -> UrlComponents:
    """Split ``url`` into components, filling every missing one with a default.

    Never raises. Input that cannot be parsed at all yields a fully defaulted
    result, so a malformed URL silently resolves to ``http://localhost:80/``.
    An ``https`` scheme always forces port 443.
    """
    try:
        parts = urlsplit(url)
        port = parts.port
        host = parts.hostname
    except (TypeError, ValueError, AttributeError):
        return UrlComponents()

    info = dict(DEFAULT_URL_DATA)
    extracted = {
        "scheme": parts.scheme,
        "host": host,
        "port": port,
        "user": parts.username,
        "password": parts.password,
        "path": parts.path,
        "query": parts.query,
        "fragment": parts.fragment,
    }
    info.update({key: value for key, value in extracted.items() if value})

    if info["scheme"] == "https":
        info["port"] = HTTPS_PORT

    return UrlComponents(**info)
