# tests/test_sm2.py
import pytest

from studyboard.errors import InvalidCardStateError, InvalidRatingError
from studyboard.sm2 import calculate_next_review


def test_sm2_first_review_correct():
    """First correct answer: interval=1, repetition=1."""
    result = calculate_next_review(quality=5, ease_factor=2.5, interval=0, repetition_count=0)
    assert result["interval"] == 1
    assert result["repetition"] == 1


def test_sm2_second_review_correct():
    """Second correct answer: interval=6."""
    result = calculate_next_review(quality=5, ease_factor=2.6, interval=1, repetition_count=1)
    assert result["interval"] == 6
    assert result["repetition"] == 2


def test_sm2_third_review_uses_prior_interval_and_new_ease():
    result = calculate_next_review(quality=5, ease_factor=2.5, interval=6, repetition_count=2)
    assert result["ease_factor"] == pytest.approx(2.6)
    assert result["interval"] == 16  # round(6 * 2.6), not 6 * 2.5
    assert result["repetition"] == 3


def test_sm2_three_good_reviews_progress_1_6_15():
    ease, interval, rep = 2.5, 0, 0
    intervals = []
    for _ in range(3):
        result = calculate_next_review(4, ease, interval, rep)
        ease, interval, rep = result["ease_factor"], result["interval"], result["repetition"]
        intervals.append(interval)
    assert intervals == [1, 6, 15]
    assert rep == 3
    assert ease == pytest.approx(2.5)


@pytest.mark.parametrize("quality", [0, 1, 2])
def test_sm2_failure_resets(quality):
    """Quality < 3 resets repetition and interval regardless of history."""
    result = calculate_next_review(quality, ease_factor=2.8, interval=45, repetition_count=7)
    assert result["repetition"] == 0
    assert result["interval"] == 1


@pytest.mark.parametrize("quality,expected", [
    (5, 2.6), (4, 2.5), (3, 2.36), (2, 2.18), (1, 1.96), (0, 1.7),
])
def test_sm2_ease_update_applies_to_every_quality(quality, expected):
    result = calculate_next_review(quality, ease_factor=2.5, interval=6, repetition_count=2)
    assert result["ease_factor"] == pytest.approx(expected)


@pytest.mark.parametrize("quality", range(6))
def test_sm2_ease_factor_minimum(quality):
    """Ease factor never drops below 1.3."""
    result = calculate_next_review(quality, ease_factor=1.3, interval=10, repetition_count=3)
    assert result["ease_factor"] >= 1.3


def test_sm2_ease_floor_is_exact():
    result = calculate_next_review(0, ease_factor=1.4, interval=3, repetition_count=2)
    assert result["ease_factor"] == 1.3


def test_sm2_no_upper_clamp():
    result = calculate_next_review(5, ease_factor=4.0, interval=30, repetition_count=5)
    assert result["ease_factor"] == pytest.approx(4.1)


def test_sm2_interval_never_zero_after_review():
    result = calculate_next_review(4, ease_factor=2.5, interval=0, repetition_count=4)
    assert result["interval"] >= 1


@pytest.mark.parametrize("quality", [-1, 6, 2.5, "4", None, True])
def test_sm2_rejects_invalid_quality(quality):
    with pytest.raises(InvalidRatingError):
        calculate_next_review(quality, ease_factor=2.5, interval=0, repetition_count=0)


def test_sm2_invalid_quality_is_value_error():
    with pytest.raises(ValueError):
        calculate_next_review(9, ease_factor=2.5, interval=0, repetition_count=0)


@pytest.mark.parametrize("ease,interval,rep", [(2.5, -1, 0), (2.5, 0, -1), (1.2, 1, 1)])
def test_sm2_rejects_invalid_state(ease, interval, rep):
    with pytest.raises(InvalidCardStateError):
        calculate_next_review(4, ease_factor=ease, interval=interval, repetition_count=rep)
