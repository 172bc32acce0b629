"""End-to-end: study a deck over several days, then take a quiz."""
from datetime import datetime, timedelta

from studyboard.dashboard import get_difficulty_distribution, predict_retention
from studyboard.flashcards import get_due_cards, get_flashcard_stats, review_card
from studyboard.quiz import grade_quiz
from studyboard.scheduling import calculate_streak, is_due
from studyboard.seed import sample_deck, sample_quiz


def test_full_study_cycle():
    day0 = datetime(2026, 5, 4, 19, 0)
    deck = {card.id: card for card in sample_deck()}
    events = []

    # Day 0: everything is new and due
    due = get_due_cards(list(deck.values()), today=day0.date())
    assert len(due) == len(deck)
    for card in due:
        deck[card.id], event = review_card(card, 4, now=day0)
        events.append(event)

    # Day 1: every card comes back after one day
    day1 = day0 + timedelta(days=1)
    assert len(get_due_cards(list(deck.values()), today=day1.date())) == len(deck)
    for card in get_due_cards(list(deck.values()), today=day1.date()):
        deck[card.id], event = review_card(card, 4, now=day1)
        events.append(event)
    assert all(c.review.interval == 6 for c in deck.values())
    assert get_due_cards(list(deck.values()), today=day1.date() + timedelta(days=5)) == []

    # Day 7: third review lands on a 15-day interval, one card lapses
    day7 = day1 + timedelta(days=6)
    for i, card in enumerate(get_due_cards(list(deck.values()), today=day7.date())):
        deck[card.id], event = review_card(card, 1 if i == 0 else 4, now=day7)
        events.append(event)

    intervals = sorted(c.review.interval for c in deck.values())
    assert intervals[0] == 1
    assert intervals[1:] == [15] * (len(deck) - 1)
    dist = get_difficulty_distribution(list(deck.values()))
    assert dist["new"] == 1
    assert dist["mastered"] == len(deck) - 1

    stats = get_flashcard_stats(list(deck.values()), today=(day7 + timedelta(days=1)).date())
    assert stats["due_cards"] == 1
    assert stats["total_reviews"] == 3 * len(deck)

    lapsed = min(deck.values(), key=lambda c: c.review.interval)
    assert is_due(lapsed.review.next_review_date, today=day7.date() + timedelta(days=1))
    assert calculate_streak(events[-1].reviewed_at, day7 + timedelta(days=1))
    assert predict_retention(15, 2.5, 0) == 1.0

    grade = grade_quiz(sample_quiz(), {"q-1": "sm2", "q-2": "True", "q-3": "6", "q-4": "zero"})
    assert grade.passed is True
    assert grade.score_percentage == 100.0
