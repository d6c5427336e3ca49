"""Output Panel - translated text, copy button, loading and error display."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ai_translator.core import TranslationState


class OutputPanel(QWidget):
    """Right panel showing the translation result."""

    copy_clicked = Signal()

    def __init__(self):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        header_layout = QHBoxLayout()
        self.status_label = QLabel("")
        self.status_label.setStyleSheet("color: gray;")
        header_layout.addWidget(self.status_label)
        header_layout.addStretch()
        self.copy_button = QPushButton("Copy")
        self.copy_button.clicked.connect(self.copy_clicked.emit)
        header_layout.addWidget(self.copy_button)
        layout.addLayout(header_layout)

        self.translation_text = QPlainTextEdit()
        self.translation_text.setReadOnly(True)
        self.translation_text.setMinimumHeight(300)
        self.translation_text.setPlaceholderText("Translation will appear here...")
        layout.addWidget(self.translation_text, 1)

        self.error_label = QLabel("")
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet("color: red;")
        layout.addWidget(self.error_label)

    def render(self, state: TranslationState) -> None:
        if self.translation_text.toPlainText() != state.translated_text:
            self.translation_text.setPlainText(state.translated_text)
        self.translation_text.setLayoutDirection(
            Qt.LayoutDirection.RightToLeft if state.target_lang.is_rtl else Qt.LayoutDirection.LeftToRight
        )

        self.status_label.setText("Loading..." if state.is_loading else "")

        self.copy_button.setVisible(state.can_copy)
        self.copy_button.setText("Copied!" if state.copy_feedback_active else "Copy")

        if state.error_message:
            self.error_label.setText(f"Error: {state.error_message}")
            self.error_label.show()
        else:
            self.error_label.clear()
            self.error_label.hide()
