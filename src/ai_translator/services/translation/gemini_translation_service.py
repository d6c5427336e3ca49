"""Gemini Translation Service - Implements translation via Google Gemini API."""

from typing import Optional

import google.genai as genai
from google.genai import types

from ai_translator.core import Language
from ai_translator.logging_config import get_logger
from ai_translator.services.settings_manager import DEFAULT_MODEL
from ai_translator.services.translation.translation_service import (
    TranslationFailed,
    TranslationService,
)

logger = get_logger(__name__)


class GeminiTranslationService(TranslationService):
    """
    Translation service using Google Gemini API.

    Thinking is disabled (budget 0) so the model answers without a
    deliberation pass.
    """

    TRANSLATION_PROMPT = """You are an expert translator. Translate the following text from {source} to {target}.
Do not add any commentary, preamble, or explanation. Only return the translated text.
Preserve the original formatting (like line breaks) as much as possible.

Text to translate:
---
{text}
---"""

    def __init__(self, api_key: str, model_name: str = DEFAULT_MODEL, client: Optional[genai.Client] = None):
        self.model_name = model_name
        self._client = client if client is not None else genai.Client(api_key=api_key)

    def build_prompt(self, text: str, source_lang: Language, target_lang: Language) -> str:
        return self.TRANSLATION_PROMPT.format(
            source=source_lang.display_name,
            target=target_lang.display_name,
            text=text,
        )

    def translate(self, text: str, source_lang: Language, target_lang: Language) -> str:
        """
        Translate text using Gemini API.

        Args:
            text: Text to translate.
            source_lang: Language of the text.
            target_lang: Language to translate into.

        Returns:
            Translated text with surrounding whitespace removed, or "" for
            blank input.

        Raises:
            TranslationFailed: On any SDK error or a response without text.
        """
        if not text.strip():
            return ""

        prompt = self.build_prompt(text, source_lang, target_lang)
        logger.debug(
            "Translating %d chars %s -> %s with %s",
            len(text), source_lang.value, target_lang.value, self.model_name,
        )

        try:
            response = self._client.models.generate_content(
                model=self.model_name,
                contents=prompt,
                config=types.GenerateContentConfig(
                    thinking_config=types.ThinkingConfig(thinking_budget=0),
                ),
            )
            result = response.text
            if result is None:
                raise ValueError("Empty response from API")
        except Exception as e:
            logger.exception("Gemini API error")
            raise TranslationFailed() from e

        return result.strip()
