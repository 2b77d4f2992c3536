"""Translation provider capability and its error taxonomy."""

from abc import ABC, abstractmethod
from typing import Optional


class ProviderError(Exception):
    """Base error for failures while talking to a translation provider."""


class ProviderUnavailableError(ProviderError):
    """The provider cannot be engaged for a language (unsupported or unreachable)."""


class ProviderResponseError(ProviderError):
    """The provider did not produce a usable result for a request."""


class TranslationProvider(ABC):
    """Abstract base class for translation providers.

    A provider holds at most one live session, scoped to a single target
    language. ``translate`` blocks until the round trip completes, so one
    request is always finished before the next begins.
    """

    def __init__(self):
        self.current_language: Optional[str] = None

    @abstractmethod
    def open_session(self, target_lang: str) -> None:
        """Point the provider at a target language.

        Raises:
            ProviderUnavailableError: If the language cannot be engaged.
        """
        pass

    @abstractmethod
    def translate(self, text: str, target_lang: str) -> str:
        """Translate text into the target language.

        Args:
            text: Text to translate.
            target_lang: Target language code.

        Returns:
            Translated text.

        Raises:
            ProviderError: If the round trip fails.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""
        self.current_language = None

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the provider is reachable and ready."""
        pass

    def __enter__(self) -> "TranslationProvider":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
