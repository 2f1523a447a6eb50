"""
Translator Factory

Factory for creating translator instances.
Supports: Google web, Google Cloud v2, Microsoft Translator
"""
from __future__ import annotations

from typing import Optional

from config import SETTINGS
from .base import BaseTranslator
from .google import GoogleTranslator
from .google_v2 import GoogleV2Translator
from .microsoft import MicrosoftTranslator


# Available translation engines
AVAILABLE_ENGINES = {
    "google": "Google Translate (web)",
    "google_v2": "Google Cloud Translation v2",
    "microsoft": "Microsoft Translator v3",
}


def get_available_engines() -> dict[str, str]:
    """Get available translation engines with display names."""
    return AVAILABLE_ENGINES.copy()


def build_translator(
    engine_name: str,
    *,
    api_key: Optional[str] = None,
    endpoint: Optional[str] = None,
    region: Optional[str] = None,
    proxy: Optional[str] = None,
    timeout: Optional[float] = None,
) -> BaseTranslator:
    """Build a translator instance.
    
    Args:
        engine_name: Name of the engine (google, google_v2, microsoft)
        api_key: API key, falls back to the engine's key in settings
        endpoint: Google web endpoint variant (en/cn)
        region: Microsoft resource region
        proxy: Optional proxy URL
        timeout: Request timeout in seconds
    
    Returns:
        BaseTranslator instance
    
    Raises:
        ValueError: If engine is not supported
    """
    engine = engine_name.lower()
    secrets = SETTINGS.secrets
    timeout = timeout if timeout is not None else SETTINGS.translator.session_timeout
    proxy = proxy or SETTINGS.translator.proxy_url

    if engine == "google":
        return GoogleTranslator(
            api_key=api_key or secrets.google_api_key or "",
            endpoint=endpoint or secrets.google_endpoint,
            proxy=proxy,
            timeout=timeout,
        )

    if engine == "google_v2":
        return GoogleV2Translator(
            api_key=api_key or secrets.google_cloud_api_key or "",
            proxy=proxy,
            timeout=timeout,
        )

    if engine == "microsoft":
        return MicrosoftTranslator(
            api_key=api_key or secrets.microsoft_api_key or "",
            region=region or secrets.microsoft_region,
            proxy=proxy,
            timeout=timeout,
        )

    raise ValueError(f"Unsupported translator engine: {engine_name}")
