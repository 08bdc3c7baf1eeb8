from __future__ import annotations

import pytest

from logitlab.exceptions import LevelError, QuizStateError
from logitlab.model.quiz import LEVELS, QUIZ_BANK, QuizQuestion, QuizSession, level_info


@pytest.fixture
def session() -> QuizSession:
    s = QuizSession()
    s.start(1)
    return s


def test_three_levels_with_questions():
    assert sorted(LEVELS) == [1, 2, 3]
    assert all(len(QUIZ_BANK[level]) == 2 for level in LEVELS)


def test_level_info():
    assert level_info(2).title == "The S-Curve Squash"
    with pytest.raises(LevelError):
        level_info(4)


def test_question_validates_correct_index():
    with pytest.raises(ValueError):
        QuizQuestion(prompt="?", options=("a", "b"), correct=2, hint="")


def test_unknown_level():
    with pytest.raises(LevelError):
        QuizSession().start(9)


def test_wrong_answer_keeps_question_open(session):
    question = session.current
    wrong = (question.correct + 1) % len(question.options)
    result = session.answer(wrong)
    assert not result.correct
    assert result.message == f"Try again! Hint: {question.hint}"
    with pytest.raises(QuizStateError):
        session.advance()


def test_walk_through_level(session):
    assert session.progress_text == "1/2"
    assert session.next_button_text == "Next Question →"

    first = session.current
    result = session.answer(first.correct)
    assert result.correct
    assert result.message == f"Correct! {first.hint}"
    assert session.advance() is True

    assert session.progress_text == "2/2"
    assert session.is_last
    assert session.next_button_text == "Finish Quiz"

    session.answer(session.current.correct)
    assert session.advance() is False
    assert session.is_complete
    assert session.current is None


def test_answer_after_completion(session):
    for _ in range(session.total):
        session.answer(session.current.correct)
        session.advance()
    with pytest.raises(QuizStateError):
        session.answer(0)


def test_option_out_of_range(session):
    with pytest.raises(IndexError):
        session.answer(7)


def test_restart_resets_progress(session):
    session.answer(session.current.correct)
    session.advance()
    session.start(1)
    assert session.index == 0
    assert not session.solved
