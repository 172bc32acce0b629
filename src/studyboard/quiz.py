"""Quiz answer checking and scoring."""
import logging
import re
from collections.abc import Mapping
from typing import Optional

from studyboard.config import PASSING_SCORE
from studyboard.models import QuestionResult, QuizGrade, QuizQuestion

logger = logging.getLogger(__name__)

EXACT_MATCH_TYPES = ("multiple-choice", "true-false")
SHORT_ANSWER = "short-answer"

_PUNCTUATION = re.compile(r"[^\w\s]")


def normalize_answer(text: str) -> str:
    """Lowercase, trim and drop punctuation."""
    return _PUNCTUATION.sub("", text.lower().strip())


def check_answer(correct_answer: str, user_answer: Optional[str], question_type: str) -> bool:
    """Whether `user_answer` is accepted for a question of `question_type`.

    Short answers are matched by containment in either direction, which is
    lenient: "cat" is accepted for "category". Unknown question types are
    never graded correct.
    """
    if not user_answer:
        return False

    expected = normalize_answer(correct_answer)
    given = normalize_answer(user_answer)

    if question_type in EXACT_MATCH_TYPES:
        return expected == given
    if question_type == SHORT_ANSWER:
        return given in expected or expected in given
    return False


def grade_quiz(
    questions: list[QuizQuestion],
    answers: Mapping[str, Optional[str]],
    passing_score: float = PASSING_SCORE,
) -> QuizGrade:
    """Grade every question; unanswered ones count as skipped, not incorrect."""
    correct = incorrect = skipped = earned = 0
    results = []
    for q in questions:
        user_answer = answers.get(q.id)
        if not user_answer:
            skipped += 1
            is_correct = False
        else:
            is_correct = check_answer(q.correct_answer, user_answer, q.question_type)
            if is_correct:
                correct += 1
                earned += q.points
            else:
                incorrect += 1
        results.append(QuestionResult(
            question_id=q.id,
            user_answer=user_answer or "",
            correct_answer=q.correct_answer,
            is_correct=is_correct,
            explanation=q.explanation,
            points=q.points,
            points_earned=q.points if is_correct else 0,
        ))

    total_points = sum(q.points for q in questions)
    score = (earned / total_points) * 100 if total_points else 0.0
    logger.info(
        "Graded quiz: %d correct, %d incorrect, %d skipped, score %.2f%%",
        correct, incorrect, skipped, score,
    )
    return QuizGrade(
        correct_count=correct,
        incorrect_count=incorrect,
        skipped_count=skipped,
        total_points=total_points,
        earned_points=earned,
        score_percentage=score,
        passed=score >= passing_score,
        results=results,
    )
