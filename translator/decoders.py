"""Decoders that map each provider's JSON dialect onto one result type."""
from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, List

from .errors import DecodeError, ProtocolAnomaly, ProviderError

BLOCKED_MESSAGE = "Google detected unusual traffic from your computer network, try again later (2 - 48 hours)"


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Provider-agnostic outcome: either ``text`` or the error fields are set."""

    text: str | None = None
    source_lang: str | None = None
    target_lang: str | None = None
    error_code: int | str | None = None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.error_code is None and self.error_message is None

    @classmethod
    def failure(cls, code: int | str | None, message: str) -> TranslationResult:
        return cls(error_code=code, error_message=message)

    def raise_for_error(self) -> TranslationResult:
        if not self.ok:
            raise ProviderError(self.error_code, self.error_message or "")
        return self


def _load_json(body: str) -> Any:
    if not body or not body.strip():
        return None
    try:
        return json.loads(body)
    except ValueError:
        return None


class ResponseDecoder(ABC):
    @abstractmethod
    def decode(self, body: str) -> TranslationResult:
        """Convert a raw response body into a :class:`TranslationResult`."""


class GoogleWebDecoder(ResponseDecoder):
    """Decodes ``{"sentences": [{"trans": ...}, ...], "src": ...}``."""

    def decode(self, body: str) -> TranslationResult:
        payload = _load_json(body)
        if not payload:
            raise ProtocolAnomaly(f"{BLOCKED_MESSAGE}. raw: {body}", body=body)
        if not isinstance(payload, dict) or not isinstance(payload.get("sentences"), list):
            raise DecodeError("unexpected response, no sentences found", body=body)

        text = "".join(
            sentence.get("trans") or ""
            for sentence in payload["sentences"]
            if isinstance(sentence, dict)
        )
        return TranslationResult(text=text, source_lang=payload.get("src") or None)


class GoogleCloudDecoder(ResponseDecoder):
    """Decodes ``{"data": {"translations": [...]}}`` or ``{"error": {...}}``."""

    def decode(self, body: str) -> TranslationResult:
        payload = _load_json(body)
        if not payload:
            raise ProtocolAnomaly(f"{BLOCKED_MESSAGE}. raw: {body}", body=body)
        if not isinstance(payload, dict):
            return TranslationResult.failure(500, f"not found data. raw: {body}")

        error = payload.get("error")
        if error is not None:
            if isinstance(error, dict):
                return TranslationResult.failure(error.get("code"), str(error.get("message", "")))
            return TranslationResult.failure(500, str(error))

        data = payload.get("data")
        translations = data.get("translations") if isinstance(data, dict) else None
        if not isinstance(translations, list):
            return TranslationResult.failure(500, f"not found data. raw: {body}")

        text = "".join(item.get("translatedText") or "" for item in translations if isinstance(item, dict))
        detected = None
        if translations and isinstance(translations[0], dict):
            detected = translations[0].get("detectedSourceLanguage")
        return TranslationResult(text=text, source_lang=detected)


class MicrosoftDecoder(ResponseDecoder):
    """Decodes the batch array returned by the Translator v3 API.

    A top-level ``error`` object becomes the result of every requested slot.
    """

    def decode(self, body: str) -> TranslationResult:
        return self.decode_batch(body, 1)[0]

    def decode_batch(self, body: str, count: int) -> List[TranslationResult]:
        payload = _load_json(body)
        if payload is None:
            raise DecodeError("empty or invalid JSON response", body=body)

        if isinstance(payload, dict):
            error = payload.get("error")
            if error is None:
                raise DecodeError("unexpected response, expected a list", body=body)
            if isinstance(error, dict):
                failed = TranslationResult.failure(error.get("code"), str(error.get("message", "")))
            else:
                failed = TranslationResult.failure(500, str(error))
            return [failed] * count

        if not isinstance(payload, list):
            raise DecodeError("unexpected response, expected a list", body=body)

        results = [self._decode_item(item, body) for item in payload[:count]]
        while len(results) < count:
            results.append(TranslationResult.failure(500, f"missing translation for item {len(results)}. raw: {body}"))
        return results

    def _decode_item(self, item: Any, body: str) -> TranslationResult:
        translations = item.get("translations") if isinstance(item, dict) else None
        if not isinstance(translations, list) or not translations or not isinstance(translations[0], dict):
            return TranslationResult.failure(500, f"not found translations. raw: {body}")

        first = translations[0]
        detected = item.get("detectedLanguage")
        return TranslationResult(
            text=first.get("text", ""),
            source_lang=detected.get("language") if isinstance(detected, dict) else None,
            target_lang=first.get("to"),
        )
