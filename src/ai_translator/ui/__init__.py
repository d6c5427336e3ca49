"""UI layer - PySide6 presentation components."""

from .input_panel import FileDropArea, InputPanel
from .main_window import MainWindow
from .output_panel import OutputPanel

__all__ = ["MainWindow", "InputPanel", "OutputPanel", "FileDropArea"]
