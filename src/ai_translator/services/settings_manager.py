"""Settings Manager - Handles API key and runtime configuration."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_MODEL = "gemini-2.5-flash"
DEFAULT_LOG_LEVEL = "INFO"


class MissingApiKeyError(RuntimeError):
    """Raised at startup when no Gemini API key is configured."""


class SettingsManager:
    """
    Manages settings and API key configuration.

    Values come from the process environment, seeded from a .env file in
    the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_gemini_api_key(self) -> Optional[str]:
        """Get the Gemini API key from environment (GEMINI_API_KEY, then API_KEY)."""
        for name in ("GEMINI_API_KEY", "API_KEY"):
            key = os.getenv(name)
            if key and key.strip():
                return key.strip()
        return None

    def require_gemini_api_key(self) -> str:
        """
        Get the Gemini API key or fail.

        Raises:
            MissingApiKeyError: If neither variable holds a non-blank value.
        """
        key = self.get_gemini_api_key()
        if key is None:
            raise MissingApiKeyError(
                "API key not configured. Add GEMINI_API_KEY to .env file."
            )
        return key

    def get_model_name(self) -> str:
        model = os.getenv("GEMINI_MODEL")
        return model.strip() if model and model.strip() else DEFAULT_MODEL

    def get_log_level(self) -> str:
        level = os.getenv("LOG_LEVEL")
        return level.strip().upper() if level and level.strip() else DEFAULT_LOG_LEVEL

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)
