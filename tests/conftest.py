from datetime import datetime

import pytest

from studyboard.flashcards import new_card


@pytest.fixture
def now():
    """Fixed clock for date-dependent tests."""
    return datetime(2026, 3, 14, 15, 30, 0)


@pytest.fixture
def fresh_card():
    return new_card("card-1", "Capital of France?", "Paris")
