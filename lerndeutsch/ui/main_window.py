from __future__ import annotations

import logging
from typing import Optional, Tuple

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent
from PySide6.QtWidgets import (
    QApplication,
    QComboBox,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from lerndeutsch.core.flashcards import FlashcardSession
from lerndeutsch.core.host import GameError, GameHost
from lerndeutsch.core.keyboard import KEY_ENTER, KEY_LEFT, KEY_RIGHT, KEY_SPACE
from lerndeutsch.core.memory import MemorySession
from lerndeutsch.core.quiz import QuizSession
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.typing_game import TypingSession
from lerndeutsch.core.words import LessonRepository, WordEntry
from lerndeutsch.ui.colors import HomeColors
from lerndeutsch.ui.game_views import FlashcardView, GameView, MemoryView, QuizView, TypingView
from lerndeutsch.ui.models import GAME_OPTIONS, GameOption, game_option
from lerndeutsch.ui.overlays import NoticeOverlay
from lerndeutsch.ui.widgets import CoolBackground, GameCard, GlassCard, WordCard

logger = logging.getLogger(__name__)

_KEY_NAMES = {
    Qt.Key.Key_Left: KEY_LEFT,
    Qt.Key.Key_Right: KEY_RIGHT,
    Qt.Key.Key_Space: KEY_SPACE,
    Qt.Key.Key_Return: KEY_ENTER,
    Qt.Key.Key_Enter: KEY_ENTER,
}


class MainWindow(QMainWindow):
    """Main application window with a learn view and a games view.

    The lesson/page selectors feed the selected words to the
    :class:`GameHost`. Starting a game mounts the matching view into the
    game viewport; leaving a game stops the session and clears the viewport.
    """

    def __init__(
        self,
        lessons: Optional[LessonRepository],
        host: GameHost,
        load_error: Optional[str] = None,
    ) -> None:
        super().__init__()
        self._lessons = lessons
        self._host = host
        self._load_error = load_error
        self._current_words: Tuple[WordEntry, ...] = ()
        self._current_lesson: Optional[int] = None
        self._game_view: Optional[GameView] = None

        self._stack: Optional[QStackedWidget] = None
        self._learn_screen: Optional[QWidget] = None
        self._games_screen: Optional[QWidget] = None
        self._games_stack: Optional[QStackedWidget] = None
        self._games_grid: Optional[QWidget] = None
        self._game_container: Optional[QWidget] = None
        self._viewport_layout: Optional[QVBoxLayout] = None
        self._game_title_label: Optional[QLabel] = None
        self._lesson_select: Optional[QComboBox] = None
        self._page_select: Optional[QComboBox] = None
        self._word_count_badge: Optional[QLabel] = None
        self._word_list_layout: Optional[QVBoxLayout] = None
        self._nav_buttons: dict[str, QPushButton] = {}
        self._notice_overlay: Optional[NoticeOverlay] = None

        self._build_ui()
        self._populate_lesson_select()
        self._render_words()
        self._switch_view("learn")

        app = QApplication.instance()
        if app is not None:
            app.installEventFilter(self)

    @property
    def host(self) -> GameHost:
        return self._host

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        """Construct the widget tree: header, learn screen, games screen, overlay."""
        self.setWindowTitle("LernDeutsch")
        self.setMinimumSize(960, 700)

        root = CoolBackground()
        root_layout = QVBoxLayout(root)
        root_layout.setContentsMargins(16, 16, 16, 16)
        root_layout.setSpacing(16)
        self.setCentralWidget(root)

        root_layout.addWidget(self._build_header())

        self._stack = QStackedWidget()
        self._learn_screen = self._build_learn_screen()
        self._games_screen = self._build_games_screen()
        self._stack.addWidget(self._learn_screen)
        self._stack.addWidget(self._games_screen)
        root_layout.addWidget(self._stack, 1)

        self._notice_overlay = NoticeOverlay(root)

    def _build_header(self) -> QWidget:
        header = GlassCard()
        row = QHBoxLayout(header)
        row.setContentsMargins(16, 12, 16, 12)
        row.setSpacing(14)

        title = QLabel("LernDeutsch")
        title.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 24px; font-weight: 900;")
        row.addWidget(title)

        self._lesson_select = QComboBox()
        self._lesson_select.setMinimumWidth(160)
        self._lesson_select.currentIndexChanged.connect(self._on_lesson_changed)
        row.addWidget(self._lesson_select)

        self._page_select = QComboBox()
        self._page_select.setMinimumWidth(130)
        self._page_select.addItem("All Pages", None)
        self._page_select.setEnabled(False)
        self._page_select.currentIndexChanged.connect(self._on_page_changed)
        row.addWidget(self._page_select)

        self._word_count_badge = QLabel("0 Words")
        self._word_count_badge.setStyleSheet(
            f"""
            QLabel {{
                background: {HomeColors.PRIMARY_LIGHT};
                color: white;
                border-radius: 10px;
                padding: 4px 10px;
                font-weight: 700;
            }}
            """
        )
        row.addWidget(self._word_count_badge)
        row.addStretch(1)

        for view_name, label in (("learn", "Learn"), ("games", "Games")):
            button = QPushButton(label)
            button.setCheckable(True)
            button.setCursor(Qt.PointingHandCursor)
            button.setFocusPolicy(Qt.NoFocus)
            button.setStyleSheet(
                f"""
                QPushButton {{
                    background: transparent;
                    color: {HomeColors.TEXT_SECONDARY};
                    border: none;
                    border-radius: 10px;
                    padding: 8px 16px;
                    font-weight: 700;
                }}
                QPushButton:checked {{ background: {HomeColors.PRIMARY}; color: white; }}
                """
            )
            button.clicked.connect(lambda _checked=False, name=view_name: self._switch_view(name))
            row.addWidget(button)
            self._nav_buttons[view_name] = button
        return header

    def _build_learn_screen(self) -> QWidget:
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setFrameShape(QFrame.Shape.NoFrame)
        scroll.setStyleSheet("QScrollArea { background: transparent; }")
        container = QWidget()
        container.setStyleSheet("background: transparent;")
        self._word_list_layout = QVBoxLayout(container)
        self._word_list_layout.setContentsMargins(4, 4, 4, 4)
        self._word_list_layout.setSpacing(10)
        scroll.setWidget(container)
        return scroll

    def _build_games_screen(self) -> QWidget:
        self._games_stack = QStackedWidget()

        self._games_grid = QWidget()
        grid = QGridLayout(self._games_grid)
        grid.setContentsMargins(4, 4, 4, 4)
        grid.setSpacing(16)
        for i, option in enumerate(GAME_OPTIONS):
            grid.addWidget(GameCard(option, self._on_game_selected), i // 2, i % 2)
        grid.setRowStretch(len(GAME_OPTIONS) // 2 + 1, 1)
        self._games_stack.addWidget(self._games_grid)

        self._game_container = GlassCard()
        container_layout = QVBoxLayout(self._game_container)
        container_layout.setContentsMargins(20, 16, 20, 20)
        container_layout.setSpacing(14)
        top_row = QHBoxLayout()
        back_btn = QPushButton("← Back to games")
        back_btn.setCursor(Qt.PointingHandCursor)
        back_btn.setFocusPolicy(Qt.NoFocus)
        back_btn.setStyleSheet(
            f"""
            QPushButton {{
                background: transparent;
                color: {HomeColors.PRIMARY};
                border: none;
                font-weight: 700;
                font-size: 14px;
            }}
            """
        )
        back_btn.clicked.connect(self._stop_game)
        top_row.addWidget(back_btn)
        top_row.addStretch(1)
        self._game_title_label = QLabel("")
        self._game_title_label.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 16px; font-weight: 800;")
        top_row.addWidget(self._game_title_label)
        container_layout.addLayout(top_row)

        viewport = QWidget()
        self._viewport_layout = QVBoxLayout(viewport)
        self._viewport_layout.setContentsMargins(0, 0, 0, 0)
        container_layout.addWidget(viewport, 1)
        self._games_stack.addWidget(self._game_container)
        return self._games_stack

    # ------------------------------------------------------------------
    # Lesson and page selection
    # ------------------------------------------------------------------

    def _populate_lesson_select(self) -> None:
        if self._lesson_select is None:
            return
        self._lesson_select.blockSignals(True)
        self._lesson_select.clear()
        self._lesson_select.addItem("Select Lesson...", None)
        if self._lessons is not None:
            for lesson in self._lessons.all():
                self._lesson_select.addItem(lesson.title, lesson.number)
        self._lesson_select.blockSignals(False)

    def _populate_page_select(self, lesson_number: Optional[int]) -> None:
        if self._page_select is None:
            return
        self._page_select.blockSignals(True)
        self._page_select.clear()
        self._page_select.addItem("All Pages", None)
        if lesson_number is not None and self._lessons is not None:
            for index, page in enumerate(self._lessons.get(lesson_number).pages):
                self._page_select.addItem(f"Page {page.number}", index)
        self._page_select.setEnabled(lesson_number is not None)
        self._page_select.blockSignals(False)

    def _on_lesson_changed(self, _index: int) -> None:
        self._current_lesson = self._lesson_select.currentData()
        self._populate_page_select(self._current_lesson)
        self._update_current_words()

    def _on_page_changed(self, _index: int) -> None:
        self._update_current_words()

    def _update_current_words(self) -> None:
        if self._lessons is None:
            self._current_words = ()
        else:
            page_index = self._page_select.currentData() if self._current_lesson is not None else None
            self._current_words = self._lessons.select(self._current_lesson, page_index)
        self._word_count_badge.setText(f"{len(self._current_words)} Words")
        self._render_words()
        self._host.set_words(self._current_words)

    def _render_words(self) -> None:
        layout = self._word_list_layout
        if layout is None:
            return
        while layout.count():
            item = layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()

        if self._load_error is not None:
            layout.addWidget(self._empty_state("Error Loading Data", f"Could not load database files.\n{self._load_error}", HomeColors.ERROR))
        elif not self._current_words:
            layout.addWidget(self._empty_state("Select a Lesson", "Choose a lesson and page to view vocabulary."))
        else:
            for entry in self._current_words:
                layout.addWidget(WordCard(entry))
        layout.addStretch(1)

    def _empty_state(self, title: str, message: str, color: str = HomeColors.PRIMARY) -> QWidget:
        card = GlassCard()
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        title_label = QLabel(title)
        title_label.setAlignment(Qt.AlignCenter)
        title_label.setStyleSheet(f"color: {color}; font-size: 20px; font-weight: 800;")
        card_layout.addWidget(title_label)
        message_label = QLabel(message)
        message_label.setAlignment(Qt.AlignCenter)
        message_label.setWordWrap(True)
        message_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px;")
        card_layout.addWidget(message_label)
        return card

    def _switch_view(self, view_name: str) -> None:
        for name, button in self._nav_buttons.items():
            button.setChecked(name == view_name)
        if view_name == "games":
            self._stack.setCurrentWidget(self._games_screen)
        else:
            self._stack.setCurrentWidget(self._learn_screen)

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def _on_game_selected(self, option: GameOption) -> None:
        try:
            session = self._host.start(option.game_type)
        except GameError as e:
            self._notice_overlay.show_notice("Not enough words", str(e), color=HomeColors.ERROR)
            return
        self._mount_view(session)
        self._game_title_label.setText(game_option(option.game_type).title)
        self._games_stack.setCurrentWidget(self._game_container)

    def _mount_view(self, session: GameSession) -> None:
        self._clear_viewport()
        if isinstance(session, FlashcardSession):
            view: GameView = FlashcardView(session)
        elif isinstance(session, QuizSession):
            view = QuizView(session)
        elif isinstance(session, MemorySession):
            view = MemoryView(session, on_victory=self._show_victory)
        elif isinstance(session, TypingSession):
            view = TypingView(session)
        else:
            raise TypeError(f"No view for {type(session).__name__}")
        self._game_view = view
        self._viewport_layout.addWidget(view)

    def _clear_viewport(self) -> None:
        if self._game_view is not None:
            self._viewport_layout.removeWidget(self._game_view)
            self._game_view.deleteLater()
            self._game_view = None

    def _stop_game(self) -> None:
        self._host.stop()
        self._clear_viewport()
        self._games_stack.setCurrentWidget(self._games_grid)

    def _show_victory(self) -> None:
        self._notice_overlay.show_notice("Victory!", "Well done!", icon="✓", color=HomeColors.SUCCESS)

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------

    def eventFilter(self, obj: QObject, event: QEvent) -> bool:
        if event.type() == QEvent.Type.KeyPress and self.isActiveWindow():
            if self._notice_overlay is not None and self._notice_overlay.isVisible():
                return super().eventFilter(obj, event)
            key_event: QKeyEvent = event
            name = _KEY_NAMES.get(key_event.key())
            if name is not None and self._host.keyboard.dispatch(name):
                return True
        return super().eventFilter(obj, event)

    def closeEvent(self, event) -> None:
        """Stop the running game and detach the key filter."""
        self._host.stop()
        app = QApplication.instance()
        if app is not None:
            app.removeEventFilter(self)
        super().closeEvent(event)
