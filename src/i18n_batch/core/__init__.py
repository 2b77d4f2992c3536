"""Service orchestration."""

from .service import InvalidInputError, TranslationService

__all__ = ["InvalidInputError", "TranslationService"]
