"""Translation state entities - the UI state record and its value objects."""

import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .language import InputMode, Language

MAX_FILE_SIZE_BYTES = 100 * 1024 * 1024
PDF_MIME_TYPE = "application/pdf"

FILE_TOO_LARGE_MESSAGE = "File size exceeds 100MB limit."
UNSUPPORTED_FILE_MESSAGE = "Only PDF files are supported."
READ_FAILED_MESSAGE = "Failed to read file."


@dataclass(frozen=True)
class TranslationRequest:
    """A single translate action's input."""

    source_text: str
    source_lang: Language
    target_lang: Language


@dataclass(frozen=True)
class UploadedFile:
    """Metadata of a file picked for upload."""

    name: str
    size_bytes: int
    mime_type: str

    @classmethod
    def from_path(cls, path: Path) -> "UploadedFile":
        """
        Build file metadata from a path on disk.

        Raises:
            OSError: If the file cannot be stat'ed.
        """
        size = path.stat().st_size
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, size_bytes=size, mime_type=mime_type or "")

    def validation_error(self) -> Optional[str]:
        """Return a user-facing message if the file can't be used, else None."""
        if self.size_bytes > MAX_FILE_SIZE_BYTES:
            return FILE_TOO_LARGE_MESSAGE
        if self.mime_type != PDF_MIME_TYPE:
            return UNSUPPORTED_FILE_MESSAGE
        return None


@dataclass(frozen=True)
class TranslationState:
    """
    Everything the translator window displays.

    Instances are immutable; the coordinator replaces the whole record on
    every transition.
    """

    source_lang: Language = Language.ARABIC
    target_lang: Language = Language.ENGLISH
    input_mode: InputMode = InputMode.TEXT
    input_text: str = ""
    translated_text: str = ""
    is_loading: bool = False
    error_message: Optional[str] = None
    file_name: Optional[str] = None
    copy_feedback_active: bool = False

    @property
    def can_translate(self) -> bool:
        return bool(self.input_text.strip()) and not self.is_loading

    @property
    def can_copy(self) -> bool:
        return bool(self.translated_text)

    def to_request(self) -> TranslationRequest:
        return TranslationRequest(
            source_text=self.input_text,
            source_lang=self.source_lang,
            target_lang=self.target_lang,
        )
