"""Main Window - Application shell with language bar and input/output panels."""

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from ai_translator.core import TranslationState

from .input_panel import InputPanel
from .output_panel import OutputPanel


class MainWindow(QMainWindow):
    """Provides the application shell and renders translator state."""

    swap_clicked = Signal()

    def __init__(self):
        super().__init__()
        self.setWindowTitle("AI Translator Pro")
        self.setGeometry(100, 100, 1200, 800)

        self._setup_ui()
        self._create_menu_bar()

    def _setup_ui(self):
        """Initialize the main UI layout."""
        central_widget = QWidget()
        self.setCentralWidget(central_widget)

        self.main_layout = QVBoxLayout(central_widget)
        self.main_layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("AI Translator Pro")
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        title.setStyleSheet("font-size: 28px; font-weight: bold;")
        self.main_layout.addWidget(title)

        subtitle = QLabel("Instant Arabic-English translation powered by Gemini")
        subtitle.setAlignment(Qt.AlignmentFlag.AlignCenter)
        subtitle.setStyleSheet("color: gray;")
        self.main_layout.addWidget(subtitle)

        # Language bar
        language_layout = QHBoxLayout()
        language_layout.addStretch()
        self.source_label = QLabel()
        self.source_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        language_layout.addWidget(self.source_label)
        self.swap_button = QPushButton("⇄")
        self.swap_button.setToolTip("Swap languages")
        self.swap_button.clicked.connect(self.swap_clicked.emit)
        language_layout.addWidget(self.swap_button)
        self.target_label = QLabel()
        self.target_label.setStyleSheet("font-size: 16px; font-weight: bold;")
        language_layout.addWidget(self.target_label)
        language_layout.addStretch()
        self.main_layout.addLayout(language_layout)

        panels_layout = QHBoxLayout()
        self.input_panel = InputPanel()
        self.output_panel = OutputPanel()
        panels_layout.addWidget(self.input_panel, 1)
        panels_layout.addWidget(self.output_panel, 1)
        self.main_layout.addLayout(panels_layout, 1)

    def _create_menu_bar(self):
        """Create the application menu bar."""
        menu_bar = self.menuBar()
        file_menu = menu_bar.addMenu("&File")

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Ctrl+Q")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

    def set_coordinator(self, coordinator):
        """Inject the coordinator, wire UI signals to its slots and render its state.

        The coordinator is expected to expose:
        - on_text_edited(str), on_input_mode_changed(InputMode), on_file_selected(Path)
        - on_swap_languages(), request_translation(), copy_result()
        - state_changed signal and a state property
        """
        self._coordinator = coordinator
        # Signal wiring
        self.input_panel.text_edited.connect(coordinator.on_text_edited)
        self.input_panel.mode_changed.connect(coordinator.on_input_mode_changed)
        self.input_panel.file_selected.connect(coordinator.on_file_selected)
        self.input_panel.translate_clicked.connect(coordinator.request_translation)
        self.output_panel.copy_clicked.connect(coordinator.copy_result)
        self.swap_clicked.connect(coordinator.on_swap_languages)
        coordinator.state_changed.connect(self.render)
        self.render(coordinator.state)

    def render(self, state: TranslationState) -> None:
        self.source_label.setText(state.source_lang.display_name)
        self.target_label.setText(state.target_lang.display_name)
        self.input_panel.render(state)
        self.output_panel.render(state)

