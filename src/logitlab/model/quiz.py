"""
Levels & Quiz Bank
==================
Static teaching content for the three levels and a small state machine that
walks the user through the questions of one level.

Classes:
    LevelInfo: Title and explanation shown above the controls.
    QuizQuestion: One multiple-choice question with a hint.
    QuizSession: Tracks the current question and whether it has been solved.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Mapping, Optional

from logitlab.exceptions import LevelError, QuizStateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelInfo:
    title: str
    description: str  # Qt rich text


@dataclass(frozen=True)
class QuizQuestion:
    prompt: str
    options: tuple[str, ...]
    correct: int
    hint: str

    def __post_init__(self) -> None:
        if not 0 <= self.correct < len(self.options):
            raise ValueError(f"Correct index {self.correct} out of range for {len(self.options)} options.")


@dataclass(frozen=True)
class AnswerResult:
    correct: bool
    message: str


LEVELS: dict[int, LevelInfo] = {
    1: LevelInfo(
        title="The Linear Core",
        description=(
            "Every model starts with math: <strong>z = w₁x₁ + w₂x₂ + b</strong>. "
            "This formula gives us a raw score. Higher <em>z</em> means we're leaning towards Success."
        ),
    ),
    2: LevelInfo(
        title="The S-Curve Squash",
        description=(
            "We take the raw score <em>z</em> and squash it through the <strong>Sigmoid function</strong>. "
            "This converts any number into a probability between 0 and 1!"
        ),
    ),
    3: LevelInfo(
        title="Why a Linear Boundary?",
        description=(
            "Even though the Sigmoid is curved, we draw the line exactly where the probability is "
            "<strong>0.5</strong>. Since this happens when <em>z = 0</em>, the resulting boundary is "
            "a perfectly straight line!"
        ),
    ),
}

QUIZ_BANK: dict[int, tuple[QuizQuestion, ...]] = {
    1: (
        QuizQuestion(
            prompt="What happens to the boundary if you increase the Bias (b)?",
            options=("It rotates", "It shifts its position", "It disappears", "It becomes curved"),
            correct=1,
            hint="Bias is like an offset; it moves the whole line without changing its tilt.",
        ),
        QuizQuestion(
            prompt="If z = w₁.x₁ + w₂.x₂ + b, what is z called?",
            options=("Probability", "The Linear Combo (Logit)", "The Error", "The Sigmoid"),
            correct=1,
            hint="z is the raw score before we apply any 'squashing' function.",
        ),
    ),
    2: (
        QuizQuestion(
            prompt="What is the range of the Sigmoid function σ(z)?",
            options=("-1 to 1", "0 to 100", "0 to 1", "Negative infinity to infinity"),
            correct=2,
            hint="Sigmoid squashes everything into a standard probability range.",
        ),
        QuizQuestion(
            prompt="If z is a very large positive number, what will σ(z) be closest to?",
            options=("0", "0.5", "1", "-1"),
            correct=2,
            hint="A high positive score means high confidence in 'Success' (1).",
        ),
    ),
    3: (
        QuizQuestion(
            prompt="Where exactly is the 'Decision Boundary' drawn?",
            options=("At P = 0", "At P = 0.5", "At P = 1", "Wherever you want"),
            correct=1,
            hint="The boundary is the tipping point where you switch from Class 0 to Class 1.",
        ),
        QuizQuestion(
            prompt="If the Sigmoid is curved, why is the boundary a straight line?",
            options=(
                "Because math is weird",
                "Because z = 0 is a linear equation",
                "The canvas is flat",
                "The weights are constant",
            ),
            correct=1,
            hint="The curve happens in 'probability space', but the split happens where the linear math hits 0.",
        ),
    ),
}

COMPLETION_MESSAGE = "Level complete! You've mastered these concepts."


def level_info(level: int) -> LevelInfo:
    try:
        return LEVELS[level]
    except KeyError:
        raise LevelError(f"Unknown level {level}; expected one of {sorted(LEVELS)}.") from None


class QuizSession:
    """
    Question-by-question walk through one level's quiz.

    A question must be answered correctly before advance() moves on. Wrong
    answers return a hint and leave the question open for another try.
    """

    def __init__(self, bank: Optional[Mapping[int, tuple[QuizQuestion, ...]]] = None) -> None:
        self.bank = bank if bank is not None else QUIZ_BANK
        self.level: Optional[int] = None
        self.questions: tuple[QuizQuestion, ...] = ()
        self.index: int = 0
        self.solved: bool = False
        self.is_complete: bool = False

    def start(self, level: int) -> QuizQuestion:
        if level not in self.bank:
            raise LevelError(f"No quiz for level {level}.")
        self.level = level
        self.questions = tuple(self.bank[level])
        self.index = 0
        self.solved = False
        self.is_complete = False
        logger.debug(f"Quiz started for level {level} ({len(self.questions)} questions).")
        return self.questions[0]

    @property
    def current(self) -> Optional[QuizQuestion]:
        if self.is_complete or not self.questions:
            return None
        return self.questions[self.index]

    @property
    def total(self) -> int:
        return len(self.questions)

    @property
    def progress_text(self) -> str:
        return f"{self.index + 1}/{self.total}"

    @property
    def is_last(self) -> bool:
        return self.index == self.total - 1

    @property
    def next_button_text(self) -> str:
        return "Finish Quiz" if self.is_last else "Next Question →"

    def answer(self, option: int) -> AnswerResult:
        question = self.current
        if question is None:
            raise QuizStateError("No open question to answer.")
        if not 0 <= option < len(question.options):
            raise IndexError(f"Option {option} out of range.")

        if option == question.correct:
            self.solved = True
            return AnswerResult(True, f"Correct! {question.hint}")
        return AnswerResult(False, f"Try again! Hint: {question.hint}")

    def advance(self) -> bool:
        """
        Move to the next question.

        Returns:
            True if another question is now current, False if the level is complete.

        Raises:
            QuizStateError: If the current question has not been answered correctly.
        """
        if self.current is None:
            raise QuizStateError("The quiz is not running.")
        if not self.solved:
            raise QuizStateError("Answer the current question before moving on.")

        self.solved = False
        if self.is_last:
            self.is_complete = True
            logger.info(f"Quiz for level {self.level} completed.")
            return False
        self.index += 1
        return True
