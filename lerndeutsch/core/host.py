from __future__ import annotations

import logging
from enum import Enum
from typing import Dict, Optional, Sequence, Tuple, Type

from lerndeutsch.core.config import MIN_WORDS_FLASHCARDS, MIN_WORDS_GAMES
from lerndeutsch.core.flashcards import FlashcardSession
from lerndeutsch.core.keyboard import KeyboardDispatcher
from lerndeutsch.core.memory import MemorySession
from lerndeutsch.core.quiz import QuizSession
from lerndeutsch.core.sampling import RandomSource, SystemRandomSource
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.typing_game import TypingSession
from lerndeutsch.core.words import WordEntry

logger = logging.getLogger(__name__)


class GameType(str, Enum):
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"
    MEMORY = "memory"
    TYPING = "typing"


class GameError(Exception):
    """Base class for errors reported to the player."""


class NotEnoughWordsError(GameError):
    def __init__(self, game_type: GameType, required: int, available: int) -> None:
        self.game_type = game_type
        self.required = required
        self.available = available
        super().__init__(
            "Not enough words for this game! Please select a lesson with more words."
        )


_SESSION_TYPES: Dict[GameType, Type[GameSession]] = {
    GameType.FLASHCARDS: FlashcardSession,
    GameType.QUIZ: QuizSession,
    GameType.MEMORY: MemorySession,
    GameType.TYPING: TypingSession,
}


def minimum_words(game_type: GameType) -> int:
    """Smallest word list ``game_type`` can start with."""
    if game_type is GameType.FLASHCARDS:
        return MIN_WORDS_FLASHCARDS
    return MIN_WORDS_GAMES


class GameHost:
    """Owns the single active game session.

    The host keeps a snapshot of the currently selected words. ``set_words``
    only affects the next ``start``; a running session keeps the words it
    was started with. Only one session exists at a time.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        random_source: Optional[RandomSource] = None,
        keyboard: Optional[KeyboardDispatcher] = None,
    ) -> None:
        self._scheduler = scheduler
        self._random = random_source if random_source is not None else SystemRandomSource()
        self._keyboard = keyboard if keyboard is not None else KeyboardDispatcher()
        self._words: Tuple[WordEntry, ...] = ()
        self._session: Optional[GameSession] = None
        self._game_type: Optional[GameType] = None

    @property
    def words(self) -> Tuple[WordEntry, ...]:
        return self._words

    @property
    def keyboard(self) -> KeyboardDispatcher:
        return self._keyboard

    @property
    def session(self) -> Optional[GameSession]:
        return self._session

    @property
    def game_type(self) -> Optional[GameType]:
        return self._game_type

    def set_words(self, words: Sequence[WordEntry]) -> None:
        self._words = tuple(words)
        logger.info("GameHost received %d words", len(self._words))

    def start(self, game_type: GameType | str) -> GameSession:
        """Start a new session; raises NotEnoughWordsError without side effects."""
        game_type = GameType(game_type)
        required = minimum_words(game_type)
        available = len({entry.key for entry in self._words})
        if available < required:
            logger.warning(
                "Refusing to start %s with %d distinct words (need %d)",
                game_type.value, available, required,
            )
            raise NotEnoughWordsError(game_type, required, available)

        self.stop()
        session_type = _SESSION_TYPES[game_type]
        if game_type is GameType.FLASHCARDS:
            session = FlashcardSession(
                self._words, self._scheduler, self._random, keyboard=self._keyboard
            )
        else:
            session = session_type(self._words, self._scheduler, self._random)
        self._session = session
        self._game_type = game_type
        logger.info("Started %s with %d words", game_type.value, len(self._words))
        return session

    def stop(self) -> None:
        if self._session is None:
            return
        self._session.close()
        logger.info("Stopped %s", self._game_type.value if self._game_type else "game")
        self._session = None
        self._game_type = None
