"""Flashcard review workflow with SM-2 scheduling."""
import logging
from dataclasses import replace
from datetime import date, datetime
from typing import Optional

from studyboard.config import DUE_LIMIT
from studyboard.dashboard import get_difficulty_distribution
from studyboard.errors import InvalidCardStateError
from studyboard.models import CardReviewState, Flashcard, ReviewEvent, StudySessionStats
from studyboard.scheduling import (
    calculate_mastery_level, calculate_next_review_date, get_suggested_session_size, is_due,
)
from studyboard.sm2 import PASSING_QUALITY, calculate_next_review, validate_quality

logger = logging.getLogger(__name__)

MIN_TIME_TAKEN = 1
MAX_TIME_TAKEN = 600


def new_card(card_id: str, front: str, back: str, hint: Optional[str] = None) -> Flashcard:
    return Flashcard(id=card_id, front=front, back=back, hint=hint)


def review_card(
    card: Flashcard,
    quality: int,
    time_taken: Optional[int] = None,
    now: Optional[datetime] = None,
) -> tuple[Flashcard, ReviewEvent]:
    """Apply one review to a card.

    Returns the updated card and the event to append to the review log.
    The input card is left untouched.
    """
    try:
        validate_quality(quality)
    except ValueError:
        logger.warning("Rejected review of card %s: quality=%r", card.id, quality)
        raise
    if time_taken is not None and not MIN_TIME_TAKEN <= time_taken <= MAX_TIME_TAKEN:
        logger.warning("Rejected review of card %s: time_taken=%r", card.id, time_taken)
        raise InvalidCardStateError(
            f"time_taken must be between {MIN_TIME_TAKEN} and {MAX_TIME_TAKEN} seconds, got {time_taken}"
        )

    now = now or datetime.now()
    state = card.review
    updated = calculate_next_review(
        quality=quality,
        ease_factor=state.ease_factor,
        interval=state.interval,
        repetition_count=state.repetition_count,
    )
    next_review = calculate_next_review_date(updated["interval"], now=now)
    mastery = calculate_mastery_level(updated["ease_factor"], updated["repetition"])
    was_correct = quality >= PASSING_QUALITY

    new_state = replace(
        state,
        ease_factor=updated["ease_factor"],
        interval=updated["interval"],
        repetition_count=updated["repetition"],
        mastery_level=mastery,
        next_review_date=next_review,
        review_count=state.review_count + 1,
        correct_count=state.correct_count + (1 if was_correct else 0),
        incorrect_count=state.incorrect_count + (0 if was_correct else 1),
        last_reviewed_at=now,
    )
    event = ReviewEvent(
        card_id=card.id,
        quality=quality,
        previous_interval=state.interval,
        new_interval=new_state.interval,
        previous_ease_factor=state.ease_factor,
        new_ease_factor=new_state.ease_factor,
        previous_mastery_level=state.mastery_level,
        new_mastery_level=mastery,
        next_review_date=next_review,
        was_correct=was_correct,
        reviewed_at=now,
        time_taken=time_taken,
    )
    logger.info(
        "Reviewed card %s: quality=%d interval %d->%d mastery %d->%d",
        card.id, quality, state.interval, new_state.interval, state.mastery_level, mastery,
    )
    return replace(card, review=new_state), event


def reset_progress(card: Flashcard) -> Flashcard:
    logger.info("Reset progress for card %s", card.id)
    return replace(card, review=CardReviewState())


def get_due_cards(cards: list[Flashcard], limit: int = DUE_LIMIT, today: Optional[date] = None) -> list[Flashcard]:
    """Due cards, never-reviewed first, then oldest due date, then hardest."""
    due = [c for c in cards if is_due(c.review.next_review_date, today)]
    due.sort(key=lambda c: (
        c.review.next_review_date is not None,
        c.review.next_review_date or datetime.min,
        c.review.ease_factor,
    ))
    return due[:limit]


def get_flashcard_stats(cards: list[Flashcard], today: Optional[date] = None) -> dict:
    """Summary statistics for a deck."""
    states = [c.review for c in cards]
    total = len(states)
    due_count = sum(1 for s in states if is_due(s.next_review_date, today))
    correct = sum(s.correct_count for s in states)
    incorrect = sum(s.incorrect_count for s in states)
    answered = correct + incorrect
    distribution = get_difficulty_distribution(states)
    return {
        "total_cards": total,
        "due_cards": due_count,
        "new_cards": distribution["new"],
        "mastered_cards": distribution["mastered"],
        "total_reviews": sum(s.review_count for s in states),
        "accuracy": round(correct / answered * 100, 1) if answered else 0.0,
        "average_ease_factor": round(sum(s.ease_factor for s in states) / total, 2) if total else 0.0,
        "suggested_session_size": get_suggested_session_size(due_count),
        "distribution": distribution,
    }


def summarize_session(
    events: list[ReviewEvent],
    total_cards: int,
    session_start: datetime,
    now: Optional[datetime] = None,
) -> StudySessionStats:
    """Aggregate the review events recorded since `session_start`."""
    now = now or datetime.now()
    session = [e for e in events if e.reviewed_at >= session_start]
    correct = sum(1 for e in session if e.was_correct)
    timed = [e.time_taken for e in session if e.time_taken is not None]
    reviewed = len(session)
    return StudySessionStats(
        total_cards=total_cards,
        cards_reviewed=reviewed,
        correct_answers=correct,
        incorrect_answers=reviewed - correct,
        accuracy=round(correct / reviewed * 100, 1) if reviewed else 0.0,
        average_time=round(sum(timed) / len(timed), 1) if timed else 0.0,
        duration_minutes=round((now - session_start).total_seconds() / 60, 1),
    )
