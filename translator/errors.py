"""Exceptions shared by the HTTP transport and the translators."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .http.client import HttpResponse


class TranslatorError(Exception):
    """Base exception for every translator failure."""


class ValidationError(TranslatorError, ValueError):
    """Raised before any request is built when the input is unacceptable."""


class ConfigurationError(ValidationError):
    """Raised when a translator lacks a required setting such as an API key."""


class TransportError(TranslatorError):
    """Raised when the network exchange itself fails (DNS, connect, timeout)."""

    def __init__(
        self,
        message: str,
        *,
        url: str = "",
        code: int = 0,
        response: HttpResponse | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.code = code
        self.message = message
        self.response = response


class ProtocolAnomaly(TranslatorError):
    """Empty or unparseable provider body, usually a sign of anti-bot blocking."""

    def __init__(self, message: str, *, body: str = "") -> None:
        super().__init__(message)
        self.body = body


class DecodeError(TranslatorError):
    """The body was valid JSON but did not have the expected shape."""

    def __init__(self, message: str, *, body: str = "") -> None:
        super().__init__(f"{message}. raw: {body}")
        self.body = body


class ProviderError(TranslatorError):
    """Structured error payload returned by a provider."""

    def __init__(self, code: int | str | None, message: str) -> None:
        super().__init__(f"[{code}] {message}")
        self.code = code
        self.message = message
