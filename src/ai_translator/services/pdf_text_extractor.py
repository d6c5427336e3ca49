"""PDF Text Extractor - pulls per-page plain text out of a PDF buffer."""

from typing import List, Sequence

import fitz  # PyMuPDF

from ai_translator.logging_config import get_logger

logger = get_logger(__name__)

EXTRACTION_FAILED_MESSAGE = (
    "Failed to extract text from PDF. The file might be corrupted, "
    "password-protected, or contain only images."
)

PAGE_SEPARATOR = "\n\n"


class PdfExtractionError(Exception):
    """Raised when a PDF cannot be turned into text."""

    def __init__(self, message: str = EXTRACTION_FAILED_MESSAGE):
        super().__init__(message)


def join_pages(pages: Sequence[str]) -> str:
    """Concatenate page texts with a blank line between pages."""
    return PAGE_SEPARATOR.join(pages)


class PdfTextExtractor:
    """Adapter over PyMuPDF returning one string per page."""

    def extract_pages(self, data: bytes) -> List[str]:
        """
        Extract text from every page of a PDF, in page order.

        Args:
            data: Raw PDF bytes.

        Returns:
            Page texts with surrounding whitespace stripped.

        Raises:
            PdfExtractionError: If the data isn't a readable PDF, is password
                protected, or has no extractable text at all.
        """
        try:
            with fitz.open(stream=data, filetype="pdf") as doc:
                if doc.needs_pass:
                    raise PdfExtractionError()
                pages = [page.get_text().strip() for page in doc]
        except PdfExtractionError:
            logger.warning("PDF is password-protected")
            raise
        except Exception as e:
            logger.exception("PDF parsing error")
            raise PdfExtractionError() from e

        if not any(pages):
            logger.warning("PDF has no extractable text (%d pages)", len(pages))
            raise PdfExtractionError()

        logger.debug("Extracted text from %d pages", len(pages))
        return pages
