"""
Microsoft Translator Text API v3.

@see https://learn.microsoft.com/azure/ai-services/translator/reference/v3-0-translate
"""
from __future__ import annotations

import logging
import uuid
from typing import Any, Dict, List, Mapping, Sequence

from .base import BaseTranslator, ProviderConfig
from .decoders import MicrosoftDecoder, TranslationResult
from .errors import ConfigurationError, ValidationError
from .http import HttpClient, RequestOptions


class MicrosoftTranslator(BaseTranslator):
    name = "microsoft"
    max_items_per_request = 100

    BASE_URL = "https://api.cognitive.microsofttranslator.com/translate?api-version=3.0"

    QUERY_PARAMS: Dict[str, Any] = {
        "from": None,  # omitted -> detected by the API
        "to": "en",
        "textType": "plain",  # plain | html
    }

    decoder: MicrosoftDecoder

    def __init__(
        self,
        *,
        api_key: str = "",
        region: str | None = None,
        client: HttpClient | None = None,
        timeout: float | None = 20.0,
        proxy: str | None = None,
    ) -> None:
        config = ProviderConfig(base_url=self.BASE_URL, api_key=api_key, defaults=self.QUERY_PARAMS)
        super().__init__(config, MicrosoftDecoder(), client=client, timeout=timeout, proxy=proxy)
        self.region = region
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def gen_trace_id() -> str:
        return str(uuid.uuid4())

    def build_headers(self) -> Dict[str, str]:
        headers = {
            "Ocp-Apim-Subscription-Key": self.key,
            "X-ClientTraceId": self.gen_trace_id(),
        }
        if self.region:
            headers["Ocp-Apim-Subscription-Region"] = self.region
        return headers

    async def translate(self, text: str, params: Mapping[str, Any] | None = None) -> TranslationResult:
        """Translate one text by submitting a single-item batch."""
        results = await self.translate_batch([text], params)
        return results[0]

    async def translate_batch(
        self,
        texts: Sequence[str],
        params: Mapping[str, Any] | None = None,
    ) -> List[TranslationResult]:
        """Translate ``texts`` in one call; results keep the input order.

        Params:
            from: source language, detected when omitted
            to: target language
            textType: plain or html
        """
        if not self.key:
            raise ConfigurationError("must be set the key for use translate service")

        texts = list(texts)
        if not texts:
            return []
        if len(texts) > self.max_items_per_request:
            raise ValidationError(f"Maximum number of texts per request exceeded: {self.max_items_per_request}")
        for text in texts:
            self.check_length(text)

        query = {**self.config.defaults, **(params or {})}
        options = RequestOptions(query=query, headers=self.build_headers())
        resp = await self.client.json(self.config.base_url, [{"Text": text} for text in texts], options)

        results = self.decoder.decode_batch(resp.body, len(texts))
        failed = sum(1 for result in results if not result.ok)
        if failed:
            self.logger.warning("Microsoft translated %d/%d texts", len(texts) - failed, len(texts))
        return results
