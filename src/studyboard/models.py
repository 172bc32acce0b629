"""Data classes for cards, reviews and quizzes."""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

INITIAL_EASE_FACTOR = 2.5
MIN_EASE_FACTOR = 1.3

MASTERY_LABELS = {
    0: "new",
    1: "learning",
    2: "reviewing",
    3: "familiar",
    4: "well_known",
    5: "mastered",
}


@dataclass
class CardReviewState:
    ease_factor: float = INITIAL_EASE_FACTOR
    interval: int = 0
    repetition_count: int = 0
    mastery_level: int = 0
    next_review_date: Optional[datetime] = None
    review_count: int = 0
    correct_count: int = 0
    incorrect_count: int = 0
    last_reviewed_at: Optional[datetime] = None


@dataclass
class Flashcard:
    id: str
    front: str
    back: str
    hint: Optional[str] = None
    review: CardReviewState = field(default_factory=CardReviewState)


@dataclass(frozen=True)
class ReviewEvent:
    card_id: str
    quality: int
    previous_interval: int
    new_interval: int
    previous_ease_factor: float
    new_ease_factor: float
    previous_mastery_level: int
    new_mastery_level: int
    next_review_date: datetime
    was_correct: bool
    reviewed_at: datetime
    time_taken: Optional[int] = None  # seconds


@dataclass
class QuizQuestion:
    id: str
    question_type: str  # multiple-choice, true-false, short-answer
    question: str
    correct_answer: str
    points: int = 1
    explanation: str = ""
    options: list[str] = field(default_factory=list)


@dataclass
class QuestionResult:
    question_id: str
    user_answer: str
    correct_answer: str
    is_correct: bool
    explanation: str
    points: int
    points_earned: int


@dataclass
class QuizGrade:
    correct_count: int
    incorrect_count: int
    skipped_count: int
    total_points: int
    earned_points: int
    score_percentage: float
    passed: bool
    results: list[QuestionResult] = field(default_factory=list)


@dataclass
class StudySessionStats:
    total_cards: int
    cards_reviewed: int
    correct_answers: int
    incorrect_answers: int
    accuracy: float = 0.0
    average_time: float = 0.0
    duration_minutes: float = 0.0
