"""Tests for application bootstrap."""

from unittest.mock import MagicMock, patch

from ai_translator import main as main_module
from ai_translator.services import MissingApiKeyError


def test_missing_api_key_aborts_before_ui():
    settings = MagicMock()
    settings.get_log_level.return_value = "INFO"
    settings.require_gemini_api_key.side_effect = MissingApiKeyError("no key")

    with patch.object(main_module, "SettingsManager", return_value=settings), \
            patch.object(main_module, "QApplication") as app_cls, \
            patch.object(main_module, "MainWindow") as window_cls:
        exit_code = main_module.main()

    assert exit_code == 1
    app_cls.assert_not_called()
    window_cls.assert_not_called()


def test_configured_key_builds_service_with_model():
    settings = MagicMock()
    settings.get_log_level.return_value = "INFO"
    settings.require_gemini_api_key.return_value = "key-123"
    settings.get_model_name.return_value = "gemini-2.5-flash"

    with patch.object(main_module, "SettingsManager", return_value=settings), \
            patch.object(main_module, "QApplication") as app_cls, \
            patch.object(main_module, "GeminiTranslationService") as service_cls, \
            patch.object(main_module, "TranslationCoordinator"), \
            patch.object(main_module, "MainWindow") as window_cls:
        app_cls.return_value.exec.return_value = 0
        exit_code = main_module.main()

    assert exit_code == 0
    service_cls.assert_called_once_with(api_key="key-123", model_name="gemini-2.5-flash")
    window_cls.return_value.set_coordinator.assert_called_once()
    window_cls.return_value.show.assert_called_once()
