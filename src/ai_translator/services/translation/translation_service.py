"""Translation Service - abstract interface for text translation."""

from abc import ABC, abstractmethod

from ai_translator.core import Language

TRANSLATION_FAILED_MESSAGE = "Failed to translate text. Please check the API key and try again."


class TranslationFailed(Exception):
    """
    Generic translation failure shown to the user.

    The underlying cause is chained for logging but never displayed.
    """

    def __init__(self, message: str = TRANSLATION_FAILED_MESSAGE):
        super().__init__(message)


class TranslationService(ABC):
    """
    Abstract service for translating text between two languages.

    Implementations (e.g., GeminiTranslationService) handle API calls.
    """

    @abstractmethod
    def translate(self, text: str, source_lang: Language, target_lang: Language) -> str:
        """
        Translate text from source_lang to target_lang.

        Args:
            text: Text to translate. Blank text yields "" without any call.
            source_lang: Language of the text.
            target_lang: Language to translate into.

        Returns:
            The translated text, trimmed.

        Raises:
            TranslationFailed: If the backing service could not produce text.
        """
        pass
