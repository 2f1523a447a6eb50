"""
Google Cloud Translation API v2.

@see https://cloud.google.com/translate/docs/reference/rest/v2/translate
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from .base import BaseTranslator, ProviderConfig
from .decoders import GoogleCloudDecoder, TranslationResult
from .http import HttpClient, RequestOptions


class GoogleV2Translator(BaseTranslator):
    name = "google_v2"

    TRANS_API = "https://translation.googleapis.com/language/translate/v2"

    POST_PARAMS: Dict[str, Any] = {
        "q": "",
        "key": "",
        "model": "nmt",  # nmt | base
        "format": "html",  # html | text
        "source": None,  # omitted -> detected by the API
        "target": "en",
    }

    def __init__(
        self,
        *,
        api_key: str = "",
        client: HttpClient | None = None,
        timeout: float | None = 20.0,
        proxy: str | None = None,
    ) -> None:
        config = ProviderConfig(base_url=self.TRANS_API, api_key=api_key, defaults=self.POST_PARAMS)
        super().__init__(config, GoogleCloudDecoder(), client=client, timeout=timeout, proxy=proxy)
        self.logger = logging.getLogger(self.__class__.__name__)

    def build_params(self, text: str, params: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        form: Dict[str, Any] = {**self.config.defaults, **(params or {})}
        form["q"] = text
        form["key"] = self.key
        return form

    async def translate(self, text: str, params: Mapping[str, Any] | None = None) -> TranslationResult:
        """Translate ``text``; ``params`` may set source, target, format and model."""
        self.check_length(text)
        resp = await self.client.post(
            self.config.base_url,
            self.build_params(text, params),
            RequestOptions(headers={"Accept": "application/json"}),
        )
        result = self.decoder.decode(resp.body)
        if not result.ok:
            self.logger.warning("Google Cloud error %s: %s", result.error_code, result.error_message)
        return result
