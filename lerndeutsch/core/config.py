"""Configuration constants for the LernDeutsch vocabulary trainer."""

from __future__ import annotations

import logging
import os
from pathlib import Path

DATA_DIR_ENV = "LERNDEUTSCH_DATA_DIR"
LOG_LEVEL_ENV = "LERNDEUTSCH_LOG_LEVEL"

# Word count preconditions
MIN_WORDS_FLASHCARDS = 1
MIN_WORDS_GAMES = 4           # quiz needs 1 target + 3 distractors

QUIZ_OPTION_COUNT = 4
MEMORY_PAIR_COUNT = 8         # board shrinks when fewer words are selected
TYPING_HINT_LENGTH = 3

# Pacing delays (milliseconds)
FLASHCARD_CONTENT_DELAY_MS = 150
QUIZ_NEXT_QUESTION_DELAY_MS = 1500
MEMORY_MISMATCH_DELAY_MS = 1000
MEMORY_VICTORY_DELAY_MS = 500
TYPING_NEXT_ROUND_DELAY_MS = 1000

MISSING_TEXT = "???"


def lessons_dir() -> Path:
    """Directory holding the lesson database files."""
    override = os.environ.get(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path(__file__).resolve().parent.parent / "data" / "lessons"


def log_level() -> int:
    """Logging level from the environment, INFO when unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO
