"""Built-in sample deck and quiz for the interactive CLI."""
from studyboard.flashcards import new_card
from studyboard.models import Flashcard, QuizQuestion

SAMPLE_CARDS = [
    ("sr-1", "What does the SM-2 ease factor measure?", "How easy a card is to recall; higher is easier", "Starts at 2.5"),
    ("sr-2", "Minimum SM-2 ease factor?", "1.3", None),
    ("sr-3", "Interval after the first successful review?", "1 day", None),
    ("sr-4", "Interval after the second successful review?", "6 days", None),
    ("sr-5", "Which quality ratings count as a failed recall?", "0, 1 and 2", "Scale is 0-5"),
    ("sr-6", "What happens to the repetition count after a lapse?", "It resets to 0", None),
    ("sr-7", "Formula for predicted retention?", "e^(-t / (ease factor x interval))", "Exponential decay"),
    ("sr-8", "Largest suggested study session?", "50 cards", None),
]

SAMPLE_QUESTIONS = [
    QuizQuestion(
        id="q-1",
        question_type="multiple-choice",
        question="Which algorithm schedules flashcard reviews here?",
        correct_answer="SM-2",
        options=["Leitner", "SM-2", "FSRS", "Random"],
        explanation="An SM-2 variant with a 1.3 ease floor.",
    ),
    QuizQuestion(
        id="q-2",
        question_type="true-false",
        question="A card that was never reviewed is always due.",
        correct_answer="true",
        options=["true", "false"],
    ),
    QuizQuestion(
        id="q-3",
        question_type="short-answer",
        question="What is the interval, in days, after the second successful review?",
        correct_answer="6",
        points=2,
    ),
    QuizQuestion(
        id="q-4",
        question_type="short-answer",
        question="What does a repetition count reset to after a failed review?",
        correct_answer="zero",
        explanation="Any quality below 3 restarts the card.",
    ),
]


def sample_deck() -> list[Flashcard]:
    """Fresh copy of the sample deck, every card at initial review state."""
    return [new_card(card_id, front, back, hint) for card_id, front, back, hint in SAMPLE_CARDS]


def sample_quiz() -> list[QuizQuestion]:
    return list(SAMPLE_QUESTIONS)
