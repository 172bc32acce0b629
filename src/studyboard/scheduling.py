"""Review dates, due checks, mastery levels and session sizing."""
from datetime import date, datetime, timedelta
from typing import Optional, Union

from studyboard.errors import InvalidCardStateError

DateLike = Union[date, datetime]

# (upper bound of due cards, session size); None means "all of them"
SESSION_SIZE_STEPS = [
    (20, None),
    (50, 20),
    (100, 30),
]
MAX_SESSION_SIZE = 50


def _as_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def calculate_next_review_date(interval: int, now: Optional[datetime] = None) -> datetime:
    """Return midnight of the day `interval` days after `now`."""
    now = now or datetime.now()
    next_date = now + timedelta(days=interval)
    return next_date.replace(hour=0, minute=0, second=0, microsecond=0)


def calculate_mastery_level(ease_factor: float, repetition_count: int) -> int:
    """Classify learning progress on a 0-5 scale.

    Rules are checked in order, so a card with three or more repetitions
    lands in the highest ease band it qualifies for.
    """
    if repetition_count == 0:
        return 0  # new
    if repetition_count == 1:
        return 1  # learning
    if repetition_count == 2:
        return 2  # reviewing
    if repetition_count >= 3 and ease_factor >= 2.5:
        return 5  # mastered
    if repetition_count >= 3 and ease_factor >= 2.2:
        return 4  # well known
    if repetition_count >= 3:
        return 3  # familiar
    return 2


def is_due(next_review_date: Optional[DateLike], today: Optional[DateLike] = None) -> bool:
    """Never-reviewed cards are always due; otherwise compare calendar days only."""
    if next_review_date is None:
        return True
    today = _as_date(today) if today is not None else date.today()
    return _as_date(next_review_date) <= today


def get_suggested_session_size(due_cards_count: int) -> int:
    if due_cards_count < 0:
        raise InvalidCardStateError(f"due_cards_count must be >= 0, got {due_cards_count}")
    for upper, size in SESSION_SIZE_STEPS:
        if due_cards_count <= upper:
            return due_cards_count if size is None else size
    return MAX_SESSION_SIZE


def calculate_streak(
    last_review_date: Optional[DateLike],
    current_date: Optional[DateLike] = None,
) -> bool:
    """True while the last review happened today or yesterday."""
    if last_review_date is None:
        return False
    today = _as_date(current_date) if current_date is not None else date.today()
    yesterday = today - timedelta(days=1)
    return _as_date(last_review_date) >= yesterday
