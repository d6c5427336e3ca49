"""Language and input mode value types."""

from enum import Enum


class Language(Enum):
    """Closed set of languages the translator supports."""

    ARABIC = "arabic"
    ENGLISH = "english"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def is_rtl(self) -> bool:
        """True if text in this language is written right-to-left."""
        return self is Language.ARABIC

    @property
    def placeholder(self) -> str:
        """Prompt shown in an empty input box for this language."""
        return _PLACEHOLDERS[self]


_DISPLAY_NAMES = {
    Language.ARABIC: "Arabic",
    Language.ENGLISH: "English",
}

_PLACEHOLDERS = {
    Language.ARABIC: "اكتب النص هنا...",
    Language.ENGLISH: "Enter text here...",
}


class InputMode(Enum):
    """Which input surface is active."""

    TEXT = "text"
    FILE = "file"
