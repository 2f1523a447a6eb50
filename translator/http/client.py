"""Single-shot async HTTP transport built on aiohttp."""
from __future__ import annotations

import asyncio
import errno
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

import aiohttp
from loguru import logger

from ..errors import TransportError
from .builder import PreparedRequest, config_request
from .options import RequestOptions
from .url import parse_url

SessionFactory = Callable[..., aiohttp.ClientSession]

_KNOWN_SETTINGS = {"timeout", "connect_timeout", "proxy", "verify_ssl", "allow_redirects"}


@dataclass(frozen=True, slots=True)
class HttpResponse:
    status: int
    body: str
    error_code: int = 0
    error_message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_code == 0 and 200 <= self.status < 300


def open_session(
    *,
    verify_ssl: bool = True,
    timeout: aiohttp.ClientTimeout | None = None,
    cookies: Mapping[str, str] | None = None,
) -> aiohttp.ClientSession:
    """Create a session owning exactly one connection that is never reused."""
    connector = aiohttp.TCPConnector(force_close=True, limit=1, ssl=None if verify_ssl else False)
    return aiohttp.ClientSession(
        connector=connector,
        timeout=timeout or aiohttp.ClientTimeout(total=None),
        cookies=cookies or None,
    )


class HttpClient:
    """Runs one request/response exchange per call over a fresh connection.

    ``options`` are instance-wide defaults; per-call options are layered on
    top of them and win on conflicting keys. Replace the defaults with
    :meth:`set_options` rather than mutating them while calls are in flight.
    """

    def __init__(
        self,
        options: RequestOptions | None = None,
        *,
        session_factory: SessionFactory | None = None,
    ) -> None:
        self._options = options or RequestOptions()
        self._session_factory = session_factory or open_session
        self.last_url = ""
        self.last_response: Optional[HttpResponse] = None

    @property
    def options(self) -> RequestOptions:
        return self._options

    def set_options(self, options: RequestOptions) -> None:
        self._options = options

    async def get(
        self,
        url: str,
        data: str | Mapping[str, Any] | None = None,
        options: RequestOptions | None = None,
    ) -> HttpResponse:
        options = options or RequestOptions()
        if data is not None:
            options = options.with_updates(data=data)
        return await self.request("GET", url, options)

    async def post(
        self,
        url: str,
        data: str | Mapping[str, Any],
        options: RequestOptions | None = None,
    ) -> HttpResponse:
        options = (options or RequestOptions()).with_updates(data=data)
        return await self.request("POST", url, options)

    async def json(self, url: str, data: Any, options: RequestOptions | None = None) -> HttpResponse:
        options = (options or RequestOptions()).with_updates(json=data)
        return await self.request("POST", url, options)

    async def request(self, method: str, url: str, options: RequestOptions | None = None) -> HttpResponse:
        call = options or RequestOptions()
        merged = self._options.merge(call).with_updates(method=call.method or method)

        info = parse_url(url)
        prepared = config_request(info, merged)
        target = info.origin() + prepared.path
        self.last_url = target

        try:
            response = await self._exchange(prepared, target)
        except asyncio.TimeoutError as exc:
            raise self._failure(target, errno.ETIMEDOUT, f"request timed out: {exc}") from exc
        except aiohttp.ClientConnectorError as exc:
            raise self._failure(target, exc.errno or -1, str(exc)) from exc
        except aiohttp.ClientError as exc:
            raise self._failure(target, -1, str(exc) or exc.__class__.__name__) from exc

        self.last_response = response
        logger.debug(
            "request {} {}, status={} errCode={} errMsg={!r}",
            prepared.method,
            target,
            response.status,
            response.error_code,
            response.error_message,
        )
        return response

    async def _exchange(self, prepared: PreparedRequest, target: str) -> HttpResponse:
        settings = prepared.settings
        unknown = set(settings) - _KNOWN_SETTINGS
        if unknown:
            logger.debug("ignoring unsupported transport settings: {}", sorted(unknown))

        session = self._session_factory(
            verify_ssl=bool(settings.get("verify_ssl", True)),
            timeout=_build_timeout(settings),
            cookies=prepared.cookies,
        )
        # A raw body without an explicit content type goes out without one.
        skip_auto_headers = ()
        if not any(name.lower() == "content-type" for name in prepared.headers):
            skip_auto_headers = ("Content-Type",)

        async with session:
            async with session.request(
                prepared.method,
                target,
                data=prepared.body,
                headers=prepared.headers,
                skip_auto_headers=skip_auto_headers,
                proxy=settings.get("proxy"),
                allow_redirects=bool(settings.get("allow_redirects", False)),
            ) as resp:
                raw = await resp.read()
                return HttpResponse(status=resp.status, body=raw.decode("utf-8", errors="replace"))

    def _failure(self, url: str, code: int, message: str) -> TransportError:
        response = HttpResponse(status=0, body="", error_code=code, error_message=message)
        self.last_response = response
        logger.warning("request {} failed, errCode={} errMsg={!r}", url, code, message)
        return TransportError(message, url=url, code=code, response=response)


def _build_timeout(settings: Mapping[str, Any]) -> aiohttp.ClientTimeout:
    total = settings.get("timeout")
    connect = settings.get("connect_timeout")
    return aiohttp.ClientTimeout(
        total=float(total) if total is not None else None,
        sock_connect=float(connect) if connect is not None else None,
    )
