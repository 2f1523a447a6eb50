"""
Google Translate web endpoint (the one the browser widget talks to).

No API key is needed; heavy use gets answered with an empty or HTML body,
which surfaces as :class:`ProtocolAnomaly`.
"""
from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Dict, Mapping

from .base import BaseTranslator, ProviderConfig
from .decoders import GoogleWebDecoder, TranslationResult
from .http import HttpClient, RequestOptions


class GoogleTranslator(BaseTranslator):
    name = "google"

    EN_BASE_URL = "https://translate.google.com/translate_a/single"
    CN_BASE_URL = "https://translate.google.cn/translate_a/single"
    ENDPOINTS = {"en": EN_BASE_URL, "cn": CN_BASE_URL}

    # Sub-options requested through repeated bare "dt" keys. Only "t" feeds the
    # sentences we decode; the rest mirror what the web widget asks for.
    DT_OPTIONS = [
        "at",  # alternative translations
        "bd",  # dictionary entries with synonyms
        "ex",  # usage examples
        "gt",  # gender-specific translations
        "ld",  # language detection details
        "md",  # definitions with examples
        "qca",  # spelling correction
        "rw",  # "see also" words
        "rm",  # transliteration
        "sos",  # alternate sources
        "ss",  # full synonyms
        "t",  # translation
    ]

    QUERY_PARAMS: Dict[str, Any] = {
        "client": "gtx",
        "hl": None,  # follows "tl"
        "sl": "auto",
        "tl": "en",
        "q": None,
        "ie": "UTF-8",
        "oe": "UTF-8",
        "multires": 1,
        "otf": 2,
        "pc": 1,
        "trs": 1,
        "ssel": 0,
        "tsel": 0,
        "kc": 1,
        "tk": None,
        "dj": 1,
        "key": None,
    }

    def __init__(
        self,
        *,
        api_key: str = "",
        endpoint: str = "en",
        client: HttpClient | None = None,
        timeout: float | None = 20.0,
        proxy: str | None = None,
    ) -> None:
        self._check_endpoint(endpoint)
        config = ProviderConfig(
            base_url=self.ENDPOINTS[endpoint],
            api_key=api_key,
            endpoint=endpoint,
            defaults=self.QUERY_PARAMS,
        )
        super().__init__(config, GoogleWebDecoder(), client=client, timeout=timeout, proxy=proxy)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _check_endpoint(self, endpoint: str) -> None:
        if endpoint not in self.ENDPOINTS:
            raise ValueError(f"Unknown Google endpoint {endpoint!r}, expected one of {sorted(self.ENDPOINTS)}")

    @property
    def endpoint(self) -> str:
        return self.config.endpoint

    def set_endpoint(self, endpoint: str) -> None:
        """Switch between the ``en`` and ``cn`` hosts."""
        self._check_endpoint(endpoint)
        self.config = replace(self.config, endpoint=endpoint, base_url=self.ENDPOINTS[endpoint])

    def build_params(self, text: str, params: Mapping[str, Any] | None = None) -> Dict[str, Any]:
        query: Dict[str, Any] = dict(self.config.defaults)
        query.update(params or {})
        query["q"] = text
        query["hl"] = query.get("hl") or query["tl"]
        query["key"] = self.key or None
        query["dt"] = list(self.DT_OPTIONS)
        return query

    async def translate(self, text: str, params: Mapping[str, Any] | None = None) -> TranslationResult:
        """Translate a single text.

        Params:
            sl: source language, ``auto`` by default
            tl: target language
        """
        self.check_length(text)
        options = RequestOptions(
            query=self.build_params(text, params),
            headers={"Accept": "application/json"},
        )
        resp = await self.client.request("GET", self.config.base_url, options)
        self.logger.debug("Google web responded with HTTP %s", resp.status)
        return self.decoder.decode(resp.body)
