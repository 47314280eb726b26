"""Rich rendering helpers for quiz snapshots."""

from string import ascii_uppercase

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from quizzical.models.quiz import Answer, Question, QuizSnapshot

CHECK_ANSWERS = "Check answers"
PLAY_AGAIN = "Play again"


def answer_letter(index: int) -> str:
    """Letter shown next to the answer at ``index``."""
    return ascii_uppercase[index]


def answer_label(answer: Answer, show_results: bool) -> str:
    """Plain text for an answer, marked once results are revealed."""
    if show_results:
        if answer.is_correct:
            return f"{answer.text} (Correct answer)"
        if answer.is_selected:
            return f"{answer.text} (Incorrect answer)"
    return answer.text


def answer_style(answer: Answer, show_results: bool) -> str:
    """Rich style for an answer in its current state."""
    if not show_results:
        return "bold cyan" if answer.is_selected else "white"
    if answer.is_correct:
        return "bold green"
    if answer.is_selected:
        return "red strike"
    return "dim"


def question_table(number: int, question: Question, show_results: bool) -> Table:
    """Build the table for one numbered question and its lettered answers."""
    table = Table(
        title=f"{number}. {question.text}",
        title_justify="left",
        show_header=False,
        border_style="cyan",
        min_width=60,
    )
    table.add_column("Key", style="cyan", width=3)
    table.add_column("Answer")

    for index, answer in enumerate(question.answers):
        marker = "●" if answer.is_selected else "○"
        table.add_row(
            f"{marker} {answer_letter(index)}",
            Text(answer_label(answer, show_results), style=answer_style(answer, show_results)),
        )

    if show_results:
        selected = question.selected_answer
        table.caption = f"Your answer: {selected.text}" if selected else "Not answered"
        table.caption_justify = "left"

    return table


def results_line(snapshot: QuizSnapshot) -> str:
    """Score summary shown with the results."""
    return f"You scored {snapshot.score}/{snapshot.total_questions} correct answers"


def primary_action_label(snapshot: QuizSnapshot) -> str:
    """Label for the unified finish/restart action."""
    return PLAY_AGAIN if snapshot.has_finished else CHECK_ANSWERS


def intro_panel() -> Panel:
    """Landing panel shown before a quiz is loaded."""
    return Panel(
        "[bold]Quizzical[/bold]\nTake a general knowledge quiz\n\n"
        "[dim]Five easy multiple choice questions[/dim]",
        border_style="cyan",
    )


def error_panel(message: str) -> Panel:
    """Panel for a failed quiz load."""
    return Panel(f"[red]Error:[/red] {message}", border_style="red")


def celebration_panel(snapshot: QuizSnapshot) -> Panel:
    """Panel shown when the player passes."""
    return Panel(
        f"[bold green]🎉 Well done! {results_line(snapshot)}.[/bold green]",
        border_style="green",
    )
