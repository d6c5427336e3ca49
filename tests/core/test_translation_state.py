"""Unit tests for translator state entities."""

from dataclasses import FrozenInstanceError

import pytest

from ai_translator.core import (
    MAX_FILE_SIZE_BYTES,
    InputMode,
    Language,
    TranslationState,
    UploadedFile,
)
from ai_translator.core.translation_state import (
    FILE_TOO_LARGE_MESSAGE,
    UNSUPPORTED_FILE_MESSAGE,
)


class TestLanguage:
    """Tests for Language metadata."""

    def test_display_names(self):
        assert Language.ARABIC.display_name == "Arabic"
        assert Language.ENGLISH.display_name == "English"

    def test_only_arabic_is_rtl(self):
        assert Language.ARABIC.is_rtl
        assert not Language.ENGLISH.is_rtl

    def test_placeholder_matches_language(self):
        assert Language.ENGLISH.placeholder == "Enter text here..."
        assert Language.ARABIC.placeholder != Language.ENGLISH.placeholder


class TestUploadedFile:
    """Tests for upload validation."""

    def test_from_path_reads_name_size_and_mime(self, tmp_path):
        pdf = tmp_path / "report.pdf"
        pdf.write_bytes(b"%PDF-1.4 test")

        uploaded = UploadedFile.from_path(pdf)

        assert uploaded.name == "report.pdf"
        assert uploaded.size_bytes == len(b"%PDF-1.4 test")
        assert uploaded.mime_type == "application/pdf"

    def test_from_path_unknown_extension_has_empty_mime(self, tmp_path):
        blob = tmp_path / "blob.unknownext"
        blob.write_bytes(b"x")

        assert UploadedFile.from_path(blob).mime_type == ""

    def test_from_path_missing_file_raises(self, tmp_path):
        with pytest.raises(OSError):
            UploadedFile.from_path(tmp_path / "missing.pdf")

    def test_valid_pdf_has_no_error(self):
        uploaded = UploadedFile("a.pdf", 1024, "application/pdf")
        assert uploaded.validation_error() is None

    def test_pdf_at_exact_limit_is_accepted(self):
        uploaded = UploadedFile("a.pdf", MAX_FILE_SIZE_BYTES, "application/pdf")
        assert uploaded.validation_error() is None

    def test_oversized_file_is_rejected(self):
        uploaded = UploadedFile("a.pdf", MAX_FILE_SIZE_BYTES + 1, "application/pdf")
        assert uploaded.validation_error() == FILE_TOO_LARGE_MESSAGE

    def test_non_pdf_is_rejected(self):
        uploaded = UploadedFile("notes.txt", 10, "text/plain")
        assert uploaded.validation_error() == UNSUPPORTED_FILE_MESSAGE

    def test_size_checked_before_type(self):
        uploaded = UploadedFile("big.txt", MAX_FILE_SIZE_BYTES + 1, "text/plain")
        assert uploaded.validation_error() == FILE_TOO_LARGE_MESSAGE


class TestTranslationState:
    """Tests for the state record."""

    def test_defaults(self):
        state = TranslationState()
        assert state.source_lang is Language.ARABIC
        assert state.target_lang is Language.ENGLISH
        assert state.input_mode is InputMode.TEXT
        assert state.input_text == ""
        assert state.translated_text == ""
        assert not state.is_loading
        assert state.error_message is None
        assert state.file_name is None
        assert not state.copy_feedback_active

    def test_state_is_immutable(self):
        state = TranslationState()
        with pytest.raises(FrozenInstanceError):
            state.input_text = "x"

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_cannot_translate_blank_input(self, text):
        assert not TranslationState(input_text=text).can_translate

    def test_cannot_translate_while_loading(self):
        assert not TranslationState(input_text="hi", is_loading=True).can_translate

    def test_can_translate_with_text(self):
        assert TranslationState(input_text="hi").can_translate

    def test_can_copy_only_with_translation(self):
        assert not TranslationState().can_copy
        assert TranslationState(translated_text="Hello").can_copy

    def test_to_request_carries_text_and_languages(self):
        state = TranslationState(
            input_text="Hello",
            source_lang=Language.ENGLISH,
            target_lang=Language.ARABIC,
        )
        request = state.to_request()
        assert request.source_text == "Hello"
        assert request.source_lang is Language.ENGLISH
        assert request.target_lang is Language.ARABIC
