"""
Translation Engines

Supported engines:
- Google Translate web endpoint (no API key required)
- Google Cloud Translation v2
- Microsoft Translator v3 (batch)
"""
from .base import BaseTranslator, ProviderConfig
from .decoders import (
    GoogleCloudDecoder,
    GoogleWebDecoder,
    MicrosoftDecoder,
    ResponseDecoder,
    TranslationResult,
)
from .errors import (
    ConfigurationError,
    DecodeError,
    ProtocolAnomaly,
    ProviderError,
    TranslatorError,
    TransportError,
    ValidationError,
)
from .google import GoogleTranslator
from .google_v2 import GoogleV2Translator
from .microsoft import MicrosoftTranslator
from .factory import build_translator, get_available_engines, AVAILABLE_ENGINES

__all__ = [
    "BaseTranslator",
    "ProviderConfig",
    "GoogleCloudDecoder",
    "GoogleWebDecoder",
    "MicrosoftDecoder",
    "ResponseDecoder",
    "TranslationResult",
    "ConfigurationError",
    "DecodeError",
    "ProtocolAnomaly",
    "ProviderError",
    "TranslatorError",
    "TransportError",
    "ValidationError",
    "GoogleTranslator",
    "GoogleV2Translator",
    "MicrosoftTranslator",
    "build_translator",
    "get_available_engines",
    "AVAILABLE_ENGINES",
]
