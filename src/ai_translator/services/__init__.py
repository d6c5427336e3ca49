"""Services layer - business logic and external integrations."""

from ai_translator.services.settings_manager import MissingApiKeyError, SettingsManager
from ai_translator.services.pdf_text_extractor import (
    EXTRACTION_FAILED_MESSAGE,
    PdfExtractionError,
    PdfTextExtractor,
    join_pages,
)

# Translation services
from ai_translator.services.translation import (
    TRANSLATION_FAILED_MESSAGE,
    GeminiTranslationService,
    TranslationFailed,
    TranslationService,
)

# Background workers
from ai_translator.services.api_workers import PdfExtractionWorker, TranslationWorker, WorkerSignals

__all__ = [
	"SettingsManager",
	"MissingApiKeyError",
	"PdfTextExtractor",
	"PdfExtractionError",
	"EXTRACTION_FAILED_MESSAGE",
	"join_pages",
	"TranslationService",
	"TranslationFailed",
	"TRANSLATION_FAILED_MESSAGE",
	"GeminiTranslationService",
	"TranslationWorker",
	"PdfExtractionWorker",
	"WorkerSignals",
]
