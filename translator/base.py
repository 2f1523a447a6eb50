from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Mapping

from .decoders import ResponseDecoder, TranslationResult
from .errors import ValidationError
from .http import HttpClient, RequestOptions


@dataclass(frozen=True, slots=True)
class ProviderConfig:
    base_url: str
    api_key: str = ""
    endpoint: str = "default"
    defaults: Mapping[str, Any] = field(default_factory=dict)


class BaseTranslator(ABC):
    name: str = "base"
    max_chars_per_request: int = 5000

    def __init__(
        self,
        config: ProviderConfig,
        decoder: ResponseDecoder,
        *,
        client: HttpClient | None = None,
        timeout: float | None = None,
        proxy: str | None = None,
    ) -> None:
        self.config = config
        self.decoder = decoder
        self.timeout = timeout
        self.proxy = proxy
        self.client = client or HttpClient(self._transport_options())

    def _transport_options(self) -> RequestOptions:
        settings: dict[str, Any] = {}
        if self.timeout is not None:
            settings["timeout"] = self.timeout
        if self.proxy:
            settings["proxy"] = self.proxy
        return RequestOptions(settings=settings)

    @property
    def key(self) -> str:
        return self.config.api_key

    def set_key(self, key: str) -> None:
        self.config = replace(self.config, api_key=key)

    def check_length(self, text: str) -> None:
        if len(text) >= self.max_chars_per_request:
            raise ValidationError(f"Maximum number of characters exceeded: {self.max_chars_per_request}")

    @abstractmethod
    async def translate(self, text: str, params: Mapping[str, Any] | None = None) -> TranslationResult:
        """Translate ``text`` and return the canonical result."""
