"""Tests for the built-in sample content."""
from studyboard.models import CardReviewState
from studyboard.seed import sample_deck, sample_quiz
from studyboard.quiz import EXACT_MATCH_TYPES, SHORT_ANSWER


def test_sample_deck_cards_start_fresh():
    deck = sample_deck()
    assert len(deck) == 8
    assert all(card.review == CardReviewState() for card in deck)


def test_sample_deck_ids_are_unique():
    ids = [card.id for card in sample_deck()]
    assert len(ids) == len(set(ids))


def test_sample_deck_returns_new_objects():
    first = sample_deck()
    second = sample_deck()
    assert first[0] is not second[0]


def test_sample_quiz_uses_known_question_types():
    questions = sample_quiz()
    assert len(questions) == 4
    known = set(EXACT_MATCH_TYPES) | {SHORT_ANSWER}
    assert all(q.question_type in known for q in questions)


def test_sample_quiz_multiple_choice_answers_are_options():
    for q in sample_quiz():
        if q.question_type == "multiple-choice":
            assert q.correct_answer in q.options
