from __future__ import annotations

from dataclasses import dataclass, field
import os


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    return float(value) if value else default


@dataclass(slots=True)
class TranslatorSettings:
    session_timeout: float = field(default_factory=lambda: _env_float("TRANSLATOR_TIMEOUT", 20.0))
    proxy_url: str | None = field(default_factory=lambda: os.getenv("TRANSLATOR_PROXY"))


@dataclass(slots=True)
class EngineSecrets:
    google_api_key: str | None = field(default_factory=lambda: os.getenv("GOOGLE_TRANSLATE_KEY"))
    google_endpoint: str = field(default_factory=lambda: os.getenv("GOOGLE_TRANSLATE_ENDPOINT", "en"))
    google_cloud_api_key: str | None = field(default_factory=lambda: os.getenv("GOOGLE_CLOUD_TRANSLATE_KEY"))
    microsoft_api_key: str | None = field(default_factory=lambda: os.getenv("MICROSOFT_TRANSLATOR_KEY"))
    microsoft_region: str | None = field(default_factory=lambda: os.getenv("MICROSOFT_TRANSLATOR_REGION"))


@dataclass(slots=True)
class AppSettings:
    translator: TranslatorSettings = field(default_factory=TranslatorSettings)
    secrets: EngineSecrets = field(default_factory=EngineSecrets)
    default_source_lang: str = field(default_factory=lambda: os.getenv("TRANSLATOR_SOURCE", "auto"))
    default_target_lang: str = field(default_factory=lambda: os.getenv("TRANSLATOR_TARGET", "en"))


SETTINGS = AppSettings()
