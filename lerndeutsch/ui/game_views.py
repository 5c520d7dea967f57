"""Widgets that render a game session and forward input to it."""

from __future__ import annotations

from typing import Callable, List, Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QSizePolicy,
    QVBoxLayout,
    QWidget,
)

from lerndeutsch.core.flashcards import FlashcardSession
from lerndeutsch.core.memory import CardState, MemorySession
from lerndeutsch.core.quiz import OptionMark, QuizSession
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.typing_game import TypingSession
from lerndeutsch.ui.colors import HomeColors


def _button_style(primary: bool = True) -> str:
    if primary:
        return f"""
            QPushButton {{
                background: qlineargradient(x1:0, y1:0, x2:1, y2:1,
                    stop:0 {HomeColors.PRIMARY_LIGHT}, stop:1 {HomeColors.PRIMARY});
                color: white;
                padding: 10px 18px;
                border: none;
                border-radius: 12px;
                font-weight: 700;
                font-size: 14px;
            }}
            QPushButton:hover {{ background: {HomeColors.PRIMARY}; }}
        """
    return f"""
        QPushButton {{
            background: #fafafa;
            color: {HomeColors.TEXT_PRIMARY};
            padding: 10px 18px;
            border: 1px solid #e0e0e0;
            border-radius: 12px;
            font-weight: 600;
            font-size: 14px;
        }}
        QPushButton:hover {{ border-color: {HomeColors.PRIMARY}; color: {HomeColors.PRIMARY}; }}
    """


def _answer_style(background: str, border: str, color: str) -> str:
    return f"""
        QPushButton {{
            background: {background};
            color: {color};
            padding: 14px;
            border: 2px solid {border};
            border-radius: 14px;
            font-size: 16px;
            font-weight: 700;
        }}
    """


def _make_button(text: str, primary: bool = True) -> QPushButton:
    button = QPushButton(text)
    button.setStyleSheet(_button_style(primary))
    button.setCursor(Qt.PointingHandCursor)
    # keep Space/Enter for the window-wide key handler
    button.setFocusPolicy(Qt.NoFocus)
    return button


class GameView(QWidget):
    """Base view: re-renders whenever the session reports a change."""

    def __init__(self, session: GameSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._session = session
        session.add_listener(self.refresh)

    @property
    def session(self) -> GameSession:
        return self._session

    def refresh(self) -> None:
        pass


class FlashcardView(GameView):
    def __init__(self, session: FlashcardSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(session, parent)
        self._flashcards = session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(18)

        self._card = QFrame()
        self._card.setObjectName("flashcard")
        self._card.setMinimumHeight(260)
        self._card.setCursor(Qt.PointingHandCursor)
        self._card.mousePressEvent = lambda e: self._flashcards.flip()
        card_layout = QVBoxLayout(self._card)
        card_layout.setContentsMargins(24, 24, 24, 24)
        card_layout.setSpacing(10)
        card_layout.addStretch(1)
        self._main_text = QLabel("")
        self._main_text.setAlignment(Qt.AlignCenter)
        self._main_text.setWordWrap(True)
        card_layout.addWidget(self._main_text)
        self._example_text = QLabel("")
        self._example_text.setAlignment(Qt.AlignCenter)
        self._example_text.setWordWrap(True)
        card_layout.addWidget(self._example_text)
        card_layout.addStretch(1)
        layout.addWidget(self._card, 1)

        controls = QHBoxLayout()
        controls.addStretch(1)
        prev_btn = _make_button("← Previous", primary=False)
        prev_btn.clicked.connect(self._flashcards.prev)
        controls.addWidget(prev_btn)
        next_btn = _make_button("Next →")
        next_btn.clicked.connect(self._flashcards.next)
        controls.addWidget(next_btn)
        controls.addStretch(1)
        layout.addLayout(controls)

        self._counter = QLabel("")
        self._counter.setAlignment(Qt.AlignCenter)
        self._counter.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-size: 13px;")
        layout.addWidget(self._counter)

        self.refresh()

    def refresh(self) -> None:
        session = self._flashcards
        entry = session.shown
        flipped = session.flipped
        background = HomeColors.PRIMARY if flipped else "#ffffff"
        color = "white" if flipped else HomeColors.PRIMARY
        self._card.setStyleSheet(
            f"""
            QFrame#flashcard {{
                background: {background};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 24px;
            }}
            """
        )
        self._main_text.setStyleSheet(f"color: {color}; font-size: 34px; font-weight: 900;")
        self._example_text.setStyleSheet(f"color: {color}; font-size: 14px; font-style: italic;")
        if entry is None:
            self._main_text.setText("")
            self._example_text.setText("")
        elif flipped:
            self._main_text.setText(entry.czech)
            self._example_text.setText(entry.example)
        else:
            self._main_text.setText(entry.german)
            self._example_text.setText("")
        self._counter.setText(session.counter_text)


class QuizView(GameView):
    def __init__(self, session: QuizSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(session, parent)
        self._quiz = session

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(18)

        self._score_label = QLabel("")
        self._score_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px; font-weight: 700;")
        layout.addWidget(self._score_label)

        self._question_label = QLabel("")
        self._question_label.setAlignment(Qt.AlignCenter)
        self._question_label.setWordWrap(True)
        self._question_label.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 30px; font-weight: 900;")
        layout.addWidget(self._question_label)

        grid = QGridLayout()
        grid.setSpacing(12)
        self._option_buttons: List[QPushButton] = []
        for i in range(len(session.question.options)):
            button = QPushButton("")
            button.setCursor(Qt.PointingHandCursor)
            button.setFocusPolicy(Qt.NoFocus)
            button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            button.clicked.connect(lambda _checked=False, index=i: self._quiz.choose(index))
            grid.addWidget(button, i // 2, i % 2)
            self._option_buttons.append(button)
        layout.addLayout(grid)
        layout.addStretch(1)

        self.refresh()

    def refresh(self) -> None:
        session = self._quiz
        question = session.question
        self._score_label.setText(f"Score: {session.score}  ·  Question {session.question_count}")
        self._question_label.setText(question.prompt)
        for button, option, mark in zip(self._option_buttons, question.options, session.marks()):
            button.setText(option.german)
            button.setEnabled(not session.locked)
            if mark is OptionMark.CORRECT:
                button.setStyleSheet(_answer_style(HomeColors.SUCCESS_BG, HomeColors.SUCCESS, HomeColors.SUCCESS))
            elif mark is OptionMark.WRONG:
                button.setStyleSheet(_answer_style(HomeColors.ERROR_BG, HomeColors.ERROR, HomeColors.ERROR))
            else:
                button.setStyleSheet(_answer_style("#ffffff", "#e0e0e0", HomeColors.TEXT_PRIMARY))


class MemoryView(GameView):
    COLUMNS = 4

    def __init__(
        self,
        session: MemorySession,
        on_victory: Optional[Callable[[], None]] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(session, parent)
        self._memory = session
        if on_victory is not None:
            session.add_victory_listener(on_victory)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(14)

        self._status_label = QLabel("")
        self._status_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px; font-weight: 700;")
        layout.addWidget(self._status_label)

        grid = QGridLayout()
        grid.setSpacing(10)
        self._card_buttons: List[QPushButton] = []
        for i, _card in enumerate(session.cards):
            button = QPushButton("")
            button.setMinimumHeight(84)
            button.setFocusPolicy(Qt.NoFocus)
            button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            button.clicked.connect(lambda _checked=False, index=i: self._memory.reveal(index))
            grid.addWidget(button, i // self.COLUMNS, i % self.COLUMNS)
            self._card_buttons.append(button)
        layout.addLayout(grid, 1)

        self.refresh()

    def refresh(self) -> None:
        session = self._memory
        self._status_label.setText(
            f"Pairs: {session.pairs_found} / {session.pair_count}  ·  Moves: {session.moves}"
        )
        for button, card in zip(self._card_buttons, session.cards):
            button.setText(card.text if card.face_up else "?")
            button.setCursor(Qt.ArrowCursor if card.matched else Qt.PointingHandCursor)
            if card.state is CardState.MATCHED:
                button.setStyleSheet(_answer_style(HomeColors.SUCCESS_BG, HomeColors.SUCCESS, HomeColors.SUCCESS))
            elif card.state is CardState.WRONG:
                button.setStyleSheet(_answer_style(HomeColors.ERROR_BG, HomeColors.ERROR, HomeColors.ERROR))
            elif card.state is CardState.REVEALED:
                button.setStyleSheet(_answer_style("#ffffff", HomeColors.PRIMARY, HomeColors.PRIMARY))
            else:
                button.setStyleSheet(_answer_style(HomeColors.PRIMARY_LIGHT, HomeColors.PRIMARY_LIGHT, "white"))


class TypingView(GameView):
    def __init__(self, session: TypingSession, parent: Optional[QWidget] = None) -> None:
        super().__init__(session, parent)
        self._typing = session
        self._shown_round = 0

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(14)

        self._streak_label = QLabel("")
        self._streak_label.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY}; font-size: 14px; font-weight: 700;")
        layout.addWidget(self._streak_label)

        heading = QLabel("Translate to German:")
        heading.setStyleSheet(f"color: {HomeColors.TEXT_PRIMARY}; font-size: 18px; font-weight: 800;")
        layout.addWidget(heading)

        self._prompt_label = QLabel("")
        self._prompt_label.setAlignment(Qt.AlignCenter)
        self._prompt_label.setWordWrap(True)
        self._prompt_label.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 30px; font-weight: 900;")
        layout.addWidget(self._prompt_label)

        self._feedback_label = QLabel("")
        self._feedback_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self._feedback_label)

        self._input = QLineEdit()
        self._input.setPlaceholderText("Type German word...")
        self._input.setStyleSheet(
            f"""
            QLineEdit {{
                background: #ffffff;
                border: 2px solid {HomeColors.PRIMARY_LIGHT};
                border-radius: 12px;
                padding: 10px 14px;
                font-size: 18px;
                color: {HomeColors.TEXT_PRIMARY};
            }}
            """
        )
        self._input.returnPressed.connect(self._check)
        layout.addWidget(self._input)

        buttons = QHBoxLayout()
        check_btn = _make_button("Check")
        check_btn.clicked.connect(self._check)
        buttons.addWidget(check_btn)
        hint_btn = _make_button("Hint?", primary=False)
        hint_btn.clicked.connect(self._show_hint)
        buttons.addWidget(hint_btn)
        buttons.addStretch(1)
        layout.addLayout(buttons)
        layout.addStretch(1)

        self.refresh()

    def _check(self) -> None:
        self._typing.submit(self._input.text())

    def _show_hint(self) -> None:
        self._input.setText(self._typing.hint())
        self._input.setFocus()

    def refresh(self) -> None:
        session = self._typing
        self._streak_label.setText(f"Streak: {session.streak}  ·  Best: {session.best_streak}")
        self._prompt_label.setText(session.prompt)
        if session.round != self._shown_round:
            self._shown_round = session.round
            self._input.clear()
            self._input.setFocus()
        feedback = session.feedback
        if feedback is None:
            self._feedback_label.setText("")
            return
        color = HomeColors.SUCCESS if feedback.correct else HomeColors.ERROR
        self._feedback_label.setText(feedback.message)
        self._feedback_label.setStyleSheet(f"color: {color}; font-size: 16px; font-weight: 700;")
