"""Unit tests for background workers (run synchronously)."""

from unittest.mock import MagicMock

import pytest

from ai_translator.core import Language
from ai_translator.core.translation_state import READ_FAILED_MESSAGE
from ai_translator.services import (
    EXTRACTION_FAILED_MESSAGE,
    TRANSLATION_FAILED_MESSAGE,
    PdfExtractionError,
    PdfExtractionWorker,
    TranslationFailed,
    TranslationWorker,
)


def connect_spies(worker):
    """Attach MagicMock slots to every worker signal."""
    spies = {
        "finished": MagicMock(),
        "error": MagicMock(),
        "translation_result": MagicMock(),
        "extraction_result": MagicMock(),
    }
    for name, spy in spies.items():
        getattr(worker.signals, name).connect(spy)
    return spies


@pytest.fixture
def translation_service():
    service = MagicMock()
    service.translate = MagicMock(return_value="Hello")
    return service


class TestTranslationWorker:
    """Tests for TranslationWorker."""

    def test_emits_result_and_finished(self, translation_service):
        worker = TranslationWorker(translation_service, "مرحبا", Language.ARABIC, Language.ENGLISH)
        spies = connect_spies(worker)

        worker.run()

        translation_service.translate.assert_called_once_with("مرحبا", Language.ARABIC, Language.ENGLISH)
        spies["translation_result"].assert_called_once_with("Hello")
        spies["error"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_translation_failure_emits_message(self, translation_service):
        translation_service.translate.side_effect = TranslationFailed()
        worker = TranslationWorker(translation_service, "x", Language.ARABIC, Language.ENGLISH)
        spies = connect_spies(worker)

        worker.run()

        spies["error"].assert_called_once_with(TRANSLATION_FAILED_MESSAGE)
        spies["translation_result"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_unexpected_exception_emits_generic_message(self, translation_service):
        translation_service.translate.side_effect = KeyError("boom")
        worker = TranslationWorker(translation_service, "x", Language.ARABIC, Language.ENGLISH)
        spies = connect_spies(worker)

        worker.run()

        spies["error"].assert_called_once_with(TRANSLATION_FAILED_MESSAGE)
        spies["finished"].assert_called_once()


class TestPdfExtractionWorker:
    """Tests for PdfExtractionWorker."""

    def test_reads_file_and_emits_pages(self, tmp_path):
        pdf = tmp_path / "doc.pdf"
        pdf.write_bytes(b"%PDF-1.4 fake")
        extractor = MagicMock()
        extractor.extract_pages.return_value = ["A", "B"]
        worker = PdfExtractionWorker(extractor, pdf)
        spies = connect_spies(worker)

        worker.run()

        extractor.extract_pages.assert_called_once_with(b"%PDF-1.4 fake")
        spies["extraction_result"].assert_called_once_with(["A", "B"])
        spies["error"].assert_not_called()
        spies["finished"].assert_called_once()

    def test_unreadable_file_emits_read_error(self, tmp_path):
        extractor = MagicMock()
        worker = PdfExtractionWorker(extractor, tmp_path / "gone.pdf")
        spies = connect_spies(worker)

        worker.run()

        extractor.extract_pages.assert_not_called()
        spies["error"].assert_called_once_with(READ_FAILED_MESSAGE)
        spies["finished"].assert_called_once()

    def test_extraction_failure_emits_extraction_error(self, tmp_path):
        pdf = tmp_path / "doc.pdf"
        pdf.write_bytes(b"corrupt")
        extractor = MagicMock()
        extractor.extract_pages.side_effect = PdfExtractionError()
        worker = PdfExtractionWorker(extractor, pdf)
        spies = connect_spies(worker)

        worker.run()

        spies["error"].assert_called_once_with(EXTRACTION_FAILED_MESSAGE)
        spies["extraction_result"].assert_not_called()
        spies["finished"].assert_called_once()
