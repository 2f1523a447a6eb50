"""Shared fixtures: a fake aiohttp session factory that never touches the network."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import pytest

from translator.http import HttpClient


@dataclass
class RecordedCall:
    method: str
    url: str
    data: Optional[str]
    headers: Dict[str, str]
    proxy: Optional[str]
    skip_auto_headers: tuple = ()
    session_kwargs: Dict[str, Any] = field(default_factory=dict)


class FakeResponse:
    def __init__(self, status: int, body: str) -> None:
        self.status = status
        self._body = body

    async def read(self) -> bytes:
        return self._body.encode("utf-8")

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        return False


class FakeSession:
    def __init__(self, factory: "FakeSessionFactory", kwargs: Dict[str, Any]) -> None:
        self.factory = factory
        self.kwargs = kwargs
        self.closed = False

    async def __aenter__(self) -> "FakeSession":
        return self

    async def __aexit__(self, *exc_info) -> bool:
        self.closed = True
        return False

    def request(self, method: str, url: str, **kwargs: Any) -> FakeResponse:
        self.factory.calls.append(
            RecordedCall(
                method=method,
                url=url,
                data=kwargs.get("data"),
                headers=dict(kwargs.get("headers") or {}),
                proxy=kwargs.get("proxy"),
                skip_auto_headers=tuple(kwargs.get("skip_auto_headers") or ()),
                session_kwargs=self.kwargs,
            )
        )
        if self.factory.error is not None:
            raise self.factory.error
        return FakeResponse(self.factory.status, self.factory.body)


class FakeSessionFactory:
    """Callable passed as ``session_factory``; counts exchanges and returns canned bodies."""

    def __init__(self, body: str = "", status: int = 200, error: Exception | None = None) -> None:
        self.body = body
        self.status = status
        self.error = error
        self.calls: List[RecordedCall] = []
        self.sessions: List[FakeSession] = []

    def __call__(self, **kwargs: Any) -> FakeSession:
        session = FakeSession(self, kwargs)
        self.sessions.append(session)
        return session

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


@pytest.fixture
def fake_factory():
    return FakeSessionFactory()


@pytest.fixture
def fake_client(fake_factory):
    return HttpClient(session_factory=fake_factory)
