"""Translation services - abstract interface and Gemini implementation."""

from ai_translator.services.translation.translation_service import (
    TRANSLATION_FAILED_MESSAGE,
    TranslationFailed,
    TranslationService,
)
from ai_translator.services.translation.gemini_translation_service import GeminiTranslationService

__all__ = [
    "TranslationService",
    "TranslationFailed",
    "TRANSLATION_FAILED_MESSAGE",
    "GeminiTranslationService",
]
