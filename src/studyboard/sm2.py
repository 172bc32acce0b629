"""SM-2 spaced repetition algorithm."""
from studyboard.errors import InvalidCardStateError, InvalidRatingError
from studyboard.models import MIN_EASE_FACTOR

PASSING_QUALITY = 3
FIRST_INTERVAL = 1
SECOND_INTERVAL = 6


def validate_quality(quality) -> None:
    if isinstance(quality, bool) or not isinstance(quality, int) or not 0 <= quality <= 5:
        raise InvalidRatingError(f"quality must be an integer between 0 and 5, got {quality!r}")


def calculate_next_review(
    quality: int,
    ease_factor: float,
    interval: int,
    repetition_count: int,
) -> dict:
    """Calculate next review parameters using SM-2.

    Args:
        quality: Rating 0-5 (0=complete blackout, 5=perfect)
        ease_factor: Current ease factor (minimum 1.3)
        interval: Current interval in days
        repetition_count: Number of consecutive correct reviews

    Returns:
        Dict with updated ease_factor, interval, repetition.

    Raises:
        InvalidRatingError: quality is outside 0-5.
        InvalidCardStateError: the prior state is out of range.
    """
    validate_quality(quality)
    if interval < 0 or repetition_count < 0:
        raise InvalidCardStateError(
            f"interval and repetition_count must be >= 0, got {interval}, {repetition_count}"
        )
    if ease_factor < MIN_EASE_FACTOR:
        raise InvalidCardStateError(f"ease_factor must be >= {MIN_EASE_FACTOR}, got {ease_factor}")

    # Ease is updated on every review, pass or fail
    new_ef = ease_factor + (0.1 - (5 - quality) * (0.08 + (5 - quality) * 0.02))
    new_ef = max(MIN_EASE_FACTOR, new_ef)

    if quality < PASSING_QUALITY:
        new_repetition = 0
        new_interval = FIRST_INTERVAL
    else:
        new_repetition = repetition_count + 1
        if new_repetition == 1:
            new_interval = FIRST_INTERVAL
        elif new_repetition == 2:
            new_interval = SECOND_INTERVAL
        else:
            # prior interval scaled by the updated ease, never below a day
            new_interval = max(FIRST_INTERVAL, round(interval * new_ef))

    return {
        "ease_factor": new_ef,
        "interval": new_interval,
        "repetition": new_repetition,
    }
