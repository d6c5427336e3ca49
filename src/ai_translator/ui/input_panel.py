"""Input Panel - text entry and PDF upload surfaces with the Translate button."""

from pathlib import Path
from typing_extensions import override

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QDragEnterEvent, QDropEvent
from PySide6.QtWidgets import (
    QButtonGroup,
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QPlainTextEdit,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from ai_translator.core import InputMode, TranslationState


class FileDropArea(QWidget):
    """Upload surface accepting a chosen or dropped PDF."""

    file_selected = Signal(Path)

    def __init__(self):
        super().__init__()
        self.setAcceptDrops(True)

        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        hint = QLabel("Drag & drop a PDF file or")
        hint.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint)

        self.choose_button = QPushButton("Choose File")
        self.choose_button.clicked.connect(self._on_choose_file)
        layout.addWidget(self.choose_button, alignment=Qt.AlignmentFlag.AlignCenter)

        limit = QLabel("Max file size: 100MB")
        limit.setStyleSheet("color: gray; font-size: 11px;")
        limit.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(limit)

        self.processing_label = QLabel("")
        self.processing_label.setStyleSheet("color: green;")
        self.processing_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.processing_label)

    def _on_choose_file(self):
        file_path, _ = QFileDialog.getOpenFileName(
            self,
            "Choose PDF Document",
            str(Path.home()),
            "PDF Files (*.pdf)",
        )
        if file_path:
            self.file_selected.emit(Path(file_path))

    def set_file_name(self, file_name):
        self.processing_label.setText(f"Processing: {file_name}" if file_name else "")

    @override
    def dragEnterEvent(self, event: QDragEnterEvent):
        if event.mimeData().hasUrls():
            event.acceptProposedAction()
        else:
            super().dragEnterEvent(event)

    @override
    def dropEvent(self, event: QDropEvent):
        urls = event.mimeData().urls()
        if urls and urls[0].isLocalFile():
            event.acceptProposedAction()
            self.file_selected.emit(Path(urls[0].toLocalFile()))


class InputPanel(QWidget):
    """Left panel: mode tabs, text box or upload area, and Translate button."""

    text_edited = Signal(str)
    mode_changed = Signal(object)  # InputMode
    file_selected = Signal(Path)
    translate_clicked = Signal()

    def __init__(self):
        super().__init__()

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        layout.setSpacing(8)

        tabs_layout = QHBoxLayout()
        self.text_mode_button = QPushButton("Text")
        self.text_mode_button.setCheckable(True)
        self.file_mode_button = QPushButton("PDF Document")
        self.file_mode_button.setCheckable(True)
        self._mode_group = QButtonGroup(self)
        self._mode_group.setExclusive(True)
        self._mode_group.addButton(self.text_mode_button)
        self._mode_group.addButton(self.file_mode_button)
        self.text_mode_button.clicked.connect(lambda: self.mode_changed.emit(InputMode.TEXT))
        self.file_mode_button.clicked.connect(lambda: self.mode_changed.emit(InputMode.FILE))
        tabs_layout.addWidget(self.text_mode_button)
        tabs_layout.addWidget(self.file_mode_button)
        layout.addLayout(tabs_layout)

        self.stack = QStackedWidget()
        self.text_edit = QPlainTextEdit()
        self.text_edit.setMinimumHeight(300)
        self.text_edit.textChanged.connect(self._on_text_changed)
        self.drop_area = FileDropArea()
        self.drop_area.file_selected.connect(self.file_selected.emit)
        self.stack.addWidget(self.text_edit)
        self.stack.addWidget(self.drop_area)
        layout.addWidget(self.stack, 1)

        self.translate_button = QPushButton("Translate")
        self.translate_button.setMinimumHeight(40)
        self.translate_button.clicked.connect(self.translate_clicked.emit)
        layout.addWidget(self.translate_button)

    def _on_text_changed(self):
        self.text_edited.emit(self.text_edit.toPlainText())

    def render(self, state: TranslationState) -> None:
        is_text = state.input_mode is InputMode.TEXT
        self.text_mode_button.setChecked(is_text)
        self.file_mode_button.setChecked(not is_text)
        self.stack.setCurrentWidget(self.text_edit if is_text else self.drop_area)

        if self.text_edit.toPlainText() != state.input_text:
            # Programmatic updates must not echo back as user edits
            self.text_edit.blockSignals(True)
            self.text_edit.setPlainText(state.input_text)
            self.text_edit.blockSignals(False)

        self.text_edit.setPlaceholderText(state.source_lang.placeholder)
        self.text_edit.setLayoutDirection(
            Qt.LayoutDirection.RightToLeft if state.source_lang.is_rtl else Qt.LayoutDirection.LeftToRight
        )

        self.drop_area.set_file_name(state.file_name)

        self.translate_button.setEnabled(state.can_translate)
        self.translate_button.setText("Translating..." if state.is_loading else "Translate")
