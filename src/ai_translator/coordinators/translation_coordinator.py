"""Translation Coordinator - Owns translator state and reacts to user actions."""

from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot
from PySide6.QtGui import QGuiApplication

from ai_translator.core import InputMode, TranslationState, UploadedFile
from ai_translator.core.translation_state import READ_FAILED_MESSAGE
from ai_translator.logging_config import get_logger
from ai_translator.services import PdfTextExtractor, TranslationService, join_pages
from ai_translator.services.api_workers import PdfExtractionWorker, TranslationWorker

logger = get_logger(__name__)

COPY_FEEDBACK_MS = 2000


class _TranslationRequest(QObject):
    """Helper class to hold translation request context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, text: str):
        self.parent_ref._handle_translation_result(text, self.worker_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        self.parent_ref._handle_translation_error(error, self.worker_id)


class _ExtractionRequest(QObject):
    """Helper class to hold PDF extraction context and handle results safely."""

    def __init__(self, worker_id: int, parent: "TranslationCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_extraction_result(self, pages):
        self.parent_ref._handle_extraction_result(pages, self.worker_id)

    @Slot(str)
    def on_extraction_error(self, error: str):
        self.parent_ref._handle_extraction_error(error, self.worker_id)


class TranslationCoordinator(QObject):
    """
    Orchestrates the translator window.

    Responsibilities:
    - Own the single TranslationState record and replace it on every transition.
    - Validate uploads and run PDF extraction off the UI thread.
    - Run translation requests off the UI thread and apply their results.
    - Swap languages, copy results and drive the copy feedback timer.

    Views subscribe to state_changed and render whatever state they receive.
    """

    state_changed = Signal(object)  # TranslationState

    def __init__(
        self,
        translation_service: TranslationService,
        pdf_extractor: PdfTextExtractor,
        clipboard=None,
        thread_pool: Optional[QThreadPool] = None,
        initial_state: Optional[TranslationState] = None,
    ):
        super().__init__()

        self.translation_service = translation_service
        self.pdf_extractor = pdf_extractor
        self._clipboard = clipboard
        self.thread_pool = thread_pool if thread_pool is not None else QThreadPool.globalInstance()

        self._state = initial_state if initial_state is not None else TranslationState()

        # Completions whose id is no longer active are dropped
        self._active_translation_worker_id: Optional[int] = None
        self._active_extraction_worker_id: Optional[int] = None
        self._worker_counter = 0

        # Keep references to helper objects so they don't get garbage collected
        # while workers are running in background threads
        self._translation_request_helper: Optional[_TranslationRequest] = None
        self._extraction_request_helper: Optional[_ExtractionRequest] = None

    @property
    def state(self) -> TranslationState:
        return self._state

    def _update(self, **changes) -> None:
        self._state = replace(self._state, **changes)
        self.state_changed.emit(self._state)

    def _next_worker_id(self) -> int:
        self._worker_counter += 1
        return self._worker_counter

    # User actions

    def on_text_edited(self, text: str) -> None:
        """Store text typed into the input box."""
        if self._state.input_mode is not InputMode.TEXT:
            logger.debug("Ignoring text edit outside text mode")
            return
        if text == self._state.input_text:
            return
        self._update(input_text=text)

    def on_input_mode_changed(self, mode: InputMode) -> None:
        """Switch between typed text and file upload without losing text."""
        if mode is self._state.input_mode:
            return
        self._update(input_mode=mode)

    def on_file_selected(self, path: Path) -> None:
        """
        Validate a picked file and start extracting its text.

        Rejected files only set an error; the current input is left alone.
        """
        if self._state.input_mode is not InputMode.FILE:
            logger.debug("Ignoring file selection outside file mode: %s", path)
            return

        try:
            uploaded = UploadedFile.from_path(path)
        except OSError:
            logger.exception("Failed to read %s", path)
            self._update(error_message=READ_FAILED_MESSAGE, file_name=None)
            return

        error = uploaded.validation_error()
        if error:
            logger.info(
                "Rejected upload %s (%d bytes, %r): %s",
                uploaded.name, uploaded.size_bytes, uploaded.mime_type, error,
            )
            self._update(error_message=error, file_name=None)
            return

        # The upload owns the loading flag from here on
        self._active_translation_worker_id = None
        worker_id = self._next_worker_id()
        self._active_extraction_worker_id = worker_id

        self._update(
            file_name=uploaded.name,
            is_loading=True,
            input_text="",
            translated_text="",
            error_message=None,
        )

        worker = PdfExtractionWorker(extractor=self.pdf_extractor, path=path)
        request_helper = _ExtractionRequest(worker_id, self)
        self._extraction_request_helper = request_helper
        worker.signals.extraction_result.connect(request_helper.on_extraction_result)
        worker.signals.error.connect(request_helper.on_extraction_error)

        logger.info("Extracting text from %s", uploaded.name)
        self.thread_pool.start(worker)

    def on_swap_languages(self) -> None:
        """Swap languages; the previous translation becomes the new input."""
        state = self._state
        self._update(
            source_lang=state.target_lang,
            target_lang=state.source_lang,
            input_text=state.translated_text,
            translated_text=state.input_text,
        )

    def request_translation(self) -> None:
        """Translate the current input text."""
        state = self._state
        if state.is_loading:
            logger.debug("Translation requested while loading, ignoring")
            return
        if not state.input_text.strip():
            self._update(translated_text="")
            return

        worker_id = self._next_worker_id()
        self._active_translation_worker_id = worker_id

        self._update(is_loading=True, error_message=None, translated_text="")

        request = state.to_request()
        worker = TranslationWorker(
            translation_service=self.translation_service,
            text=request.source_text,
            source_lang=request.source_lang,
            target_lang=request.target_lang,
        )

        # IMPORTANT: Store reference so it doesn't get garbage collected while worker runs
        request_helper = _TranslationRequest(worker_id, self)
        self._translation_request_helper = request_helper
        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)

        logger.info(
            "Translating %d chars from %s to %s",
            len(request.source_text), request.source_lang.value, request.target_lang.value,
        )
        self.thread_pool.start(worker)

    def copy_result(self) -> None:
        """Copy the translation to the clipboard and flash the feedback flag."""
        if not self._state.can_copy:
            return

        clipboard = self._clipboard if self._clipboard is not None else QGuiApplication.clipboard()
        clipboard.setText(self._state.translated_text)

        self._update(copy_feedback_active=True)
        QTimer.singleShot(COPY_FEEDBACK_MS, self._clear_copy_feedback)

    def _clear_copy_feedback(self) -> None:
        self._update(copy_feedback_active=False)

    # Worker completions (run on the UI thread)

    def _handle_translation_result(self, text: str, worker_id: int) -> None:
        if worker_id != self._active_translation_worker_id:
            logger.debug(
                "Ignoring stale translation result (worker %s, current %s)",
                worker_id, self._active_translation_worker_id,
            )
            return
        self._active_translation_worker_id = None
        self._update(translated_text=text, is_loading=False)

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_translation_worker_id:
            logger.debug(
                "Ignoring stale translation error (worker %s, current %s)",
                worker_id, self._active_translation_worker_id,
            )
            return
        self._active_translation_worker_id = None
        self._update(error_message=error, is_loading=False)

    def _handle_extraction_result(self, pages: List[str], worker_id: int) -> None:
        if worker_id != self._active_extraction_worker_id:
            logger.debug(
                "Ignoring stale extraction result (worker %s, current %s)",
                worker_id, self._active_extraction_worker_id,
            )
            return
        self._active_extraction_worker_id = None
        # Show the extracted content in the text view
        self._update(
            input_text=join_pages(pages).strip(),
            input_mode=InputMode.TEXT,
            is_loading=False,
        )

    def _handle_extraction_error(self, error: str, worker_id: int) -> None:
        if worker_id != self._active_extraction_worker_id:
            logger.debug(
                "Ignoring stale extraction error (worker %s, current %s)",
                worker_id, self._active_extraction_worker_id,
            )
            return
        self._active_extraction_worker_id = None
        self._update(error_message=error, is_loading=False)
