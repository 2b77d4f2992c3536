"""Translation providers and batch processing."""

from .provider import (
    ProviderError,
    ProviderResponseError,
    ProviderUnavailableError,
    TranslationProvider,
)
from .browser import BrowserProvider
from .batch import BatchTranslator, BatchResult, PassResult, PassStatus, LineProgress

__all__ = [
    "ProviderError",
    "ProviderResponseError",
    "ProviderUnavailableError",
    "TranslationProvider",
    "BrowserProvider",
    "BatchTranslator",
    "BatchResult",
    "PassResult",
    "PassStatus",
    "LineProgress",
]
