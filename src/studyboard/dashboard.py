"""Deck analytics: mastery distribution, retention model and best study hour."""
import math
from collections.abc import Iterable, Mapping

from studyboard.config import DEFAULT_REVIEW_HOUR
from studyboard.models import MASTERY_LABELS, CardReviewState, Flashcard


def _mastery_of(card) -> int:
    if isinstance(card, Flashcard):
        return card.review.mastery_level
    if isinstance(card, CardReviewState):
        return card.mastery_level
    if isinstance(card, Mapping):
        return card["mastery_level"]
    return card.mastery_level


def get_difficulty_distribution(cards: Iterable) -> dict:
    """Count cards per mastery level. Levels outside 0-5 are not counted."""
    distribution = {label: 0 for label in MASTERY_LABELS.values()}
    for card in cards:
        label = MASTERY_LABELS.get(_mastery_of(card))
        if label is not None:
            distribution[label] += 1
    return distribution


def predict_retention(interval: int, ease_factor: float, days_since_review: float) -> float:
    """Probability of recall under R = e^(-t/s), with s = ease_factor * interval.

    A card with no memory strength yet (interval 0) has nothing to retain,
    so it predicts 0.0.
    """
    strength = ease_factor * interval
    if strength <= 0:
        return 0.0
    retention = math.exp(-days_since_review / strength)
    return max(0.0, min(1.0, retention))


def get_optimal_review_time(study_history: Iterable[Mapping]) -> int:
    """Hour of day (0-23) with the best average accuracy.

    Ties go to the earliest hour. Without history, or when no hour beats
    zero accuracy, the default review hour is returned.
    """
    totals: dict[int, list[float]] = {}
    for session in study_history:
        bucket = totals.setdefault(session["hour"], [0.0, 0])
        bucket[0] += session["accuracy"]
        bucket[1] += 1

    best_hour = DEFAULT_REVIEW_HOUR
    best_accuracy = 0.0
    for hour in sorted(totals):
        total, count = totals[hour]
        average = total / count
        if average > best_accuracy:
            best_accuracy = average
            best_hour = hour
    return best_hour


def get_retention_label(retention: float) -> str:
    if retention >= 0.9:
        return "STRONG"
    elif retention >= 0.7:
        return "SOLID"
    elif retention >= 0.5:
        return "FADING"
    return "AT RISK"


def get_retention_color(retention: float) -> str:
    if retention >= 0.9:
        return "green"
    elif retention >= 0.7:
        return "yellow"
    elif retention >= 0.5:
        return "dark_orange"
    return "red"
