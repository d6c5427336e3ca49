"""Main entry point for the translator application."""

import sys

from PySide6.QtWidgets import QApplication

from ai_translator.coordinators import TranslationCoordinator
from ai_translator.logging_config import get_logger, setup_logging
from ai_translator.services import (
    GeminiTranslationService,
    MissingApiKeyError,
    PdfTextExtractor,
    SettingsManager,
)
from ai_translator.ui import MainWindow

logger = get_logger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    # 1. Load configuration; a missing API key aborts before any window exists
    settings = SettingsManager()
    setup_logging(settings.get_log_level())
    try:
        api_key = settings.require_gemini_api_key()
    except MissingApiKeyError as e:
        logger.error("%s", e)
        return 1

    # 2. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("AI Translator Pro")
    app.setOrganizationName("AITranslator")

    # 3. Initialize Services
    translation_service = GeminiTranslationService(
        api_key=api_key,
        model_name=settings.get_model_name(),
    )
    pdf_extractor = PdfTextExtractor()

    # 4. Instantiate Coordinator (Dependency Injection)
    coordinator = TranslationCoordinator(
        translation_service=translation_service,
        pdf_extractor=pdf_extractor,
        clipboard=app.clipboard(),
    )

    # 5. Construct UI and wire signals
    main_window = MainWindow()
    main_window.set_coordinator(coordinator)

    # 6. Show UI and start event loop
    main_window.show()
    logger.info("Using model %s", translation_service.model_name)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
