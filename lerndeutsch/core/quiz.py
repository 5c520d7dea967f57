from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from lerndeutsch.core.config import QUIZ_NEXT_QUESTION_DELAY_MS, QUIZ_OPTION_COUNT
from lerndeutsch.core.sampling import (
    RandomSource,
    sample_distinct,
    sample_one,
    shuffled_copy,
)
from lerndeutsch.core.session import GameSession
from lerndeutsch.core.timers import Scheduler
from lerndeutsch.core.words import WordEntry


class OptionMark(Enum):
    NONE = "none"
    CORRECT = "correct"
    WRONG = "wrong"


@dataclass(frozen=True)
class QuizQuestion:
    number: int
    target: WordEntry
    options: Tuple[WordEntry, ...]

    @property
    def prompt(self) -> str:
        return self.target.czech

    @property
    def correct_index(self) -> int:
        for i, option in enumerate(self.options):
            if option.key == self.target.key:
                return i
        raise ValueError("target is not among the options")


@dataclass(frozen=True)
class QuizAnswer:
    chosen_index: int
    correct_index: int

    @property
    def is_correct(self) -> bool:
        return self.chosen_index == self.correct_index


class QuizSession(GameSession):
    """Endless multiple-choice quiz: one czech prompt, four german options."""

    def __init__(
        self,
        words: Sequence[WordEntry],
        scheduler: Scheduler,
        random_source: RandomSource,
    ) -> None:
        super().__init__(words, scheduler, random_source)
        self._score = 0
        self._question_count = 0
        self._answer: Optional[QuizAnswer] = None
        self._question: QuizQuestion = self._build_question()

    @property
    def score(self) -> int:
        return self._score

    @property
    def question_count(self) -> int:
        return self._question_count

    @property
    def question(self) -> QuizQuestion:
        return self._question

    @property
    def answer(self) -> Optional[QuizAnswer]:
        """Answer to the current question, None until one is given."""
        return self._answer

    @property
    def locked(self) -> bool:
        return self._answer is not None

    def marks(self) -> List[OptionMark]:
        marks = [OptionMark.NONE] * len(self.question.options)
        if self._answer is None:
            return marks
        marks[self._answer.correct_index] = OptionMark.CORRECT
        if not self._answer.is_correct:
            marks[self._answer.chosen_index] = OptionMark.WRONG
        return marks

    def choose(self, index: int) -> Optional[QuizAnswer]:
        """Answer the current question. Ignored while options are locked."""
        if not self.is_active or self.locked:
            return None
        question = self.question
        if not 0 <= index < len(question.options):
            raise IndexError(f"option index out of range: {index}")

        self._answer = QuizAnswer(chosen_index=index, correct_index=question.correct_index)
        if self._answer.is_correct:
            self._score += 1
        self._notify()
        self._schedule(QUIZ_NEXT_QUESTION_DELAY_MS, self._advance)
        return self._answer

    def _advance(self) -> None:
        self._question = self._build_question()
        self._answer = None
        self._notify()

    def _build_question(self) -> QuizQuestion:
        self._question_count += 1
        target = sample_one(self._words, self._random)
        distractors = sample_distinct(
            self._words, QUIZ_OPTION_COUNT - 1, self._random, excluding=[target]
        )
        options = shuffled_copy(distractors + [target], self._random)
        return QuizQuestion(
            number=self._question_count, target=target, options=tuple(options)
        )
