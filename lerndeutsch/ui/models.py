"""Data models used by the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from lerndeutsch.core.host import GameType


@dataclass(frozen=True)
class GameOption:
    """One entry in the game selection grid."""

    game_type: GameType
    icon: str
    title: str
    description: str


GAME_OPTIONS: Tuple[GameOption, ...] = (
    GameOption(GameType.FLASHCARDS, "🃏", "Flashcards", "Flip through the words at your own pace."),
    GameOption(GameType.QUIZ, "❓", "Quiz", "Pick the right German word out of four."),
    GameOption(GameType.MEMORY, "🧠", "Memory", "Match each German word with its translation."),
    GameOption(GameType.TYPING, "⌨", "Typing", "Type the German word for the Czech prompt."),
)


def game_option(game_type: GameType) -> GameOption:
    for option in GAME_OPTIONS:
        if option.game_type is game_type:
            return option
    raise KeyError(game_type)
