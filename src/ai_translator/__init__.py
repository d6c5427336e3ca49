"""
AI Translator Pro - Arabic/English translation desktop app backed by Gemini.

This package provides:
- Typed text and PDF document input
- One-click language swap for reverse translation
- Copy-to-clipboard of the result
"""

__version__ = "0.1.0"

from ai_translator.core import InputMode, Language, TranslationState

__all__ = [
    "Language",
    "InputMode",
    "TranslationState",
]
