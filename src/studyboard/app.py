"""Interactive CLI application."""
import logging
import time
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from studyboard.config import LOG_LEVEL
from studyboard.dashboard import (
    get_optimal_review_time, get_retention_color, get_retention_label, predict_retention,
)
from studyboard.errors import StudyboardError
from studyboard.flashcards import (
    MAX_TIME_TAKEN, MIN_TIME_TAKEN, get_due_cards, get_flashcard_stats, reset_progress,
    review_card, summarize_session,
)
from studyboard.models import CardReviewState, Flashcard, ReviewEvent
from studyboard.quiz import grade_quiz
from studyboard.scheduling import calculate_mastery_level, calculate_streak
from studyboard.seed import sample_deck, sample_quiz
from studyboard.sm2 import calculate_next_review

console = Console()
logger = logging.getLogger(__name__)

EXIT_WORDS = ("q", "menu")
RATING_CHOICES = ["0", "1", "2", "3", "4", "5"]


class SessionExitRequested(Exception):
    """User asked to leave a drill and go back to the menu."""


def setup_logging(level: str = LOG_LEVEL) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def session_prompt(prompt: str, **kwargs) -> str:
    value = Prompt.ask(prompt, **kwargs)
    if value.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return value


def session_int_prompt(prompt: str, choices: list[str]) -> int:
    value = session_prompt(
        f"{prompt} [{'/'.join(choices)}]", choices=[*choices, *EXIT_WORDS], show_choices=False,
    )
    return int(value)


def show_welcome():
    console.print(Panel(
        "[bold]Study Board[/bold]\n[dim]Spaced repetition drill + quiz grader[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("review", "Drill due flashcards"),
        ("quiz", "Take the sample quiz"),
        ("stats", "Deck mastery + retention"),
        ("simulate", "Show SM-2 progression for ratings"),
        ("reset", "Reset a card's progress"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def run_flashcard_session(deck: dict[str, Flashcard], cards: list[Flashcard], events: list[ReviewEvent]) -> None:
    """Drill `cards`, writing each reviewed card back into `deck` as it is rated."""
    if not cards:
        console.print("[yellow]No flashcards due right now![/yellow]")
        return
    console.print(f"\n[bold]Flashcard Session[/bold] ({len(cards)} cards)\n")
    for i, card in enumerate(cards, 1):
        started = time.monotonic()
        console.print(Panel(card.front, title=f"Card {i}/{len(cards)}", border_style="cyan"))
        if card.hint:
            console.print(f"[dim]Hint: {card.hint}[/dim]")
        session_prompt("[dim]Press Enter to reveal answer (q to stop)[/dim]", default="")
        console.print(Panel(card.back, border_style="green"))
        rating = session_int_prompt("Rate yourself (0=forgot, 3=hard, 4=good, 5=easy)", RATING_CHOICES)
        elapsed = int(time.monotonic() - started)
        time_taken = max(MIN_TIME_TAKEN, min(MAX_TIME_TAKEN, elapsed))
        updated, event = review_card(deck[card.id], rating, time_taken=time_taken)
        deck[card.id] = updated
        events.append(event)
        console.print(
            f"[dim]Next review {event.next_review_date:%Y-%m-%d} "
            f"(interval {event.new_interval}d, mastery {event.new_mastery_level}/5)[/dim]\n"
        )


def run_quiz_session(questions: list) -> tuple[int, int]:
    if not questions:
        console.print("[yellow]No questions available![/yellow]")
        return 0, 0
    console.print(f"\n[bold]Quiz[/bold] ({len(questions)} questions)\n")
    answers = {}
    for i, q in enumerate(questions, 1):
        console.print(f"[bold]Q{i}.[/bold] {q.question} [dim]({q.question_type})[/dim]")
        for option in q.options:
            console.print(f"  [cyan]-[/cyan] {option}")
        answers[q.id] = session_prompt("\nYour answer (blank to skip)", default="")
        console.print()

    grade = grade_quiz(questions, answers)
    for i, result in enumerate(grade.results, 1):
        if result.is_correct:
            console.print(f"Q{i}: [green]Correct![/green] (+{result.points_earned})")
        elif not result.user_answer:
            console.print(f"Q{i}: [yellow]Skipped.[/yellow] Answer: [green]{result.correct_answer}[/green]")
        else:
            console.print(f"Q{i}: [red]Incorrect.[/red] Answer: [green]{result.correct_answer}[/green]")
        if result.explanation:
            console.print(f"[dim]{result.explanation}[/dim]")
    verdict = "[green]PASSED[/green]" if grade.passed else "[red]NOT PASSED[/red]"
    console.print(
        f"\n[bold]Score: {grade.earned_points}/{grade.total_points} "
        f"({grade.score_percentage:.0f}%)[/bold] {verdict}\n"
    )
    return grade.correct_count, len(questions)


def cmd_review(deck: dict[str, Flashcard], events: list[ReviewEvent]):
    console.print("\n[bold]Flashcard Drill[/bold]")
    session_start = datetime.now()
    due = get_due_cards(list(deck.values()))
    try:
        run_flashcard_session(deck, due, events)
    finally:
        if due:
            summary = summarize_session(events, len(due), session_start)
            console.print(
                f"Reviewed [bold]{summary.cards_reviewed}[/bold]/{summary.total_cards}  |  "
                f"Accuracy: [bold]{summary.accuracy}%[/bold]  |  "
                f"Avg time: [bold]{summary.average_time}s[/bold]"
            )


def cmd_quiz():
    console.print("\n[bold]Sample Quiz[/bold]")
    run_quiz_session(sample_quiz())


def cmd_stats(deck: dict[str, Flashcard], events: list[ReviewEvent]):
    now = datetime.now()
    cards = list(deck.values())
    stats = get_flashcard_stats(cards, today=now.date())

    console.print(Panel(
        f"[bold]{stats['total_cards']}[/bold] cards, [bold]{stats['due_cards']}[/bold] due, "
        f"suggested session: [bold]{stats['suggested_session_size']}[/bold]",
        title="Deck Overview", border_style="blue",
    ))

    table = Table(title="Mastery Distribution")
    table.add_column("Level", style="cyan")
    table.add_column("Cards", justify="right")
    for label, count in stats["distribution"].items():
        table.add_row(label.replace("_", " ").title(), str(count))
    console.print(table)

    reviewed = [c for c in cards if c.review.last_reviewed_at is not None]
    if reviewed:
        retention = Table(title="Predicted Retention")
        retention.add_column("Card")
        retention.add_column("Retention", justify="right")
        retention.add_column("Status")
        for card in reviewed:
            days = (now - card.review.last_reviewed_at).total_seconds() / 86400
            value = predict_retention(card.review.interval, card.review.ease_factor, days)
            color = get_retention_color(value)
            retention.add_row(card.front, f"{value:.0%}", f"[{color}]{get_retention_label(value)}[/{color}]")
        console.print(retention)

    history = [
        {"hour": e.reviewed_at.hour, "accuracy": 1.0 if e.was_correct else 0.0}
        for e in events
    ]
    last = events[-1].reviewed_at if events else None
    streak = "alive" if calculate_streak(last, now) else "not started"
    console.print(
        f"\n  Reviews: [bold]{stats['total_reviews']}[/bold]  |  "
        f"Accuracy: [bold]{stats['accuracy']}%[/bold]  |  "
        f"Best hour: [bold]{get_optimal_review_time(history):02d}:00[/bold]  |  "
        f"Streak: [bold]{streak}[/bold]"
    )


def cmd_simulate():
    raw = Prompt.ask("Ratings (0-5, space separated)", default="4 4 4")
    ratings = [int(r) for r in raw.replace(",", " ").split()]
    state = CardReviewState()
    table = Table(title="SM-2 Progression")
    table.add_column("#", justify="right")
    table.add_column("Quality", justify="right")
    table.add_column("Ease", justify="right")
    table.add_column("Interval", justify="right")
    table.add_column("Repetition", justify="right")
    table.add_column("Mastery", justify="right")
    for i, quality in enumerate(ratings, 1):
        result = calculate_next_review(quality, state.ease_factor, state.interval, state.repetition_count)
        state = CardReviewState(
            ease_factor=result["ease_factor"],
            interval=result["interval"],
            repetition_count=result["repetition"],
            mastery_level=calculate_mastery_level(result["ease_factor"], result["repetition"]),
        )
        table.add_row(
            str(i), str(quality), f"{state.ease_factor:.2f}", f"{state.interval}d",
            str(state.repetition_count), str(state.mastery_level),
        )
    console.print(table)


def cmd_reset(deck: dict[str, Flashcard]):
    for card in deck.values():
        console.print(f"  [cyan]{card.id}[/cyan]) {card.front}")
    card_id = Prompt.ask("Card to reset", choices=list(deck))
    deck[card_id] = reset_progress(deck[card_id])
    console.print(f"[green]Progress reset for {card_id}.[/green]")


def main():
    setup_logging()
    deck = {card.id: card for card in sample_deck()}
    events: list[ReviewEvent] = []

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="review").strip().lower()
        try:
            if choice == "review":
                cmd_review(deck, events)
            elif choice == "quiz":
                cmd_quiz()
            elif choice == "stats":
                cmd_stats(deck, events)
            elif choice == "simulate":
                cmd_simulate()
            elif choice == "reset":
                cmd_reset(deck)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]See you at your next review![/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except (StudyboardError, ValueError) as e:
            logger.debug("Command %s failed", choice, exc_info=True)
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
