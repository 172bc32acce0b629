"""Exceptions raised for out-of-range review input."""


class StudyboardError(Exception):
    pass


class InvalidRatingError(StudyboardError, ValueError):
    """Quality rating is not an integer in 0-5."""


class InvalidCardStateError(StudyboardError, ValueError):
    """Card review state or session input violates its documented range."""
