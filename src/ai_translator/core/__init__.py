"""Domain layer - Pure value types describing translator state."""

from .language import InputMode, Language
from .translation_state import (
    MAX_FILE_SIZE_BYTES,
    PDF_MIME_TYPE,
    TranslationRequest,
    TranslationState,
    UploadedFile,
)

__all__ = [
    "Language",
    "InputMode",
    "TranslationRequest",
    "TranslationState",
    "UploadedFile",
    "MAX_FILE_SIZE_BYTES",
    "PDF_MIME_TYPE",
]
