from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from lerndeutsch.core.config import TYPING_HINT_LENGTH, TYPING_NEXT_ROUND_DELAY_MS
from lerndeutsch.core.sampling import RandomSource, sample_one
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry


@dataclass(frozen=True)
class TypingFeedback:
    correct: bool
    message: str
    answer: str


class TypingSession(GameSession):
    """Translate the czech prompt into german by typing it.

    A correct answer extends the streak and moves on after a short delay.
    A wrong answer resets the streak and keeps the same word on screen.
    """

    def __init__(
        self,
        words: Sequence[WordEntry],
        scheduler: Scheduler,
        random_source: RandomSource,
    ) -> None:
        super().__init__(words, scheduler, random_source)
        self._streak = 0
        self._best_streak = 0
        self._round = 0
        self._advancing = False
        self._feedback: Optional[TypingFeedback] = None
        self._target = self._pick_target()

    @property
    def target(self) -> WordEntry:
        return self._target

    @property
    def prompt(self) -> str:
        return self._target.czech

    @property
    def streak(self) -> int:
        return self._streak

    @property
    def best_streak(self) -> int:
        return self._best_streak

    @property
    def round(self) -> int:
        return self._round

    @property
    def feedback(self) -> Optional[TypingFeedback]:
        return self._feedback

    @property
    def advancing(self) -> bool:
        return self._advancing

    def submit(self, text: str) -> Optional[TypingFeedback]:
        if not self.is_active or self._advancing:
            return None
        answer = self._target.german
        if text.strip().lower() == answer.lower():
            self._streak += 1
            self._best_streak = max(self._best_streak, self._streak)
            self._feedback = TypingFeedback(correct=True, message="Correct!", answer=answer)
            self._advancing = True
            self._schedule(TYPING_NEXT_ROUND_DELAY_MS, self._next_round)
        else:
            self._streak = 0
            self._feedback = TypingFeedback(
                correct=False, message=f"Incorrect. Answer: {answer}", answer=answer
            )
        self._notify()
        return self._feedback

    def hint(self) -> str:
        return self._target.german[:TYPING_HINT_LENGTH] + "..."

    def _next_round(self) -> None:
        self._advancing = False
        self._feedback = None
        self._target = self._pick_target()
        self._notify()

    def _pick_target(self) -> WordEntry:
        self._round += 1
        return sample_one(self._words, self._random)
