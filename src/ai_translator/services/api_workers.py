"""Async workers for non-blocking API and file calls using Qt threading."""

from pathlib import Path

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from ai_translator.core import Language
from ai_translator.core.translation_state import READ_FAILED_MESSAGE
from ai_translator.logging_config import get_logger
from ai_translator.services.pdf_text_extractor import PdfExtractionError, PdfTextExtractor
from ai_translator.services.translation import (
    TRANSLATION_FAILED_MESSAGE,
    TranslationFailed,
    TranslationService,
)

logger = get_logger(__name__)


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(str)
    extraction_result = Signal(object)  # List[str] of page texts


class TranslationWorker(QRunnable):
    """
    Worker that runs the translation API call in a background thread.

    Emits translation_result with the translated text, or error with a
    user-facing message.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        source_lang: Language,
        target_lang: Language,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.source_lang = source_lang
        self.target_lang = target_lang
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(
                self.text,
                self.source_lang,
                self.target_lang,
            )
            self.signals.translation_result.emit(result)
        except TranslationFailed as e:
            self.signals.error.emit(str(e))
        except Exception:
            # Catch any unexpected exceptions not handled by service
            logger.exception("Unexpected translation error")
            self.signals.error.emit(TRANSLATION_FAILED_MESSAGE)
        finally:
            self.signals.finished.emit()


class PdfExtractionWorker(QRunnable):
    """
    Worker that reads a PDF from disk and extracts its page texts.

    Emits extraction_result with the list of page texts, or error with a
    user-facing message.
    """

    def __init__(self, extractor: PdfTextExtractor, path: Path):
        super().__init__()
        self.extractor = extractor
        self.path = path
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Read and parse the PDF in background thread."""
        try:
            try:
                data = self.path.read_bytes()
            except OSError:
                logger.exception("Failed to read %s", self.path)
                self.signals.error.emit(READ_FAILED_MESSAGE)
                return

            try:
                pages = self.extractor.extract_pages(data)
            except PdfExtractionError as e:
                self.signals.error.emit(str(e))
                return

            self.signals.extraction_result.emit(pages)
        finally:
            self.signals.finished.emit()
