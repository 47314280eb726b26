"""Typer CLI application for playing the quiz."""

import asyncio
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.prompt import Confirm, Prompt

from quizzical import __version__
from quizzical.api.trivia_client import TriviaClient
from quizzical.cli.render import (
    answer_letter,
    celebration_panel,
    error_panel,
    intro_panel,
    primary_action_label,
    question_table,
    results_line,
)
from quizzical.config.settings import LogLevel, get_settings
from quizzical.models.quiz import QuizPhase, QuizSnapshot
from quizzical.quiz.controller import QuizController
from quizzical.utils.logging_config import configure_logging

app = typer.Typer(
    name="quizzical",
    help="Five-question general knowledge quiz in the terminal",
    add_completion=False,
)

console = Console()

CHECK_COMMANDS = {"check", "c"}
QUIT_COMMANDS = {"quit", "q"}


@app.command()
def play(
    log_level: Optional[LogLevel] = typer.Option(
        None,
        "--log-level",
        help="Override the LOG_LEVEL setting",
        case_sensitive=False,
    ),
) -> None:
    """
    Play a quiz of five easy general knowledge questions.

    Answer with the question number and answer letter, e.g. "2b".
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print("[red]Error:[/red] invalid configuration.", style="bold")
        console.print(str(e))
        raise typer.Exit(code=1)

    configure_logging((log_level or settings.log_level).value)

    controller = QuizController(TriviaClient())
    console.print(intro_panel())

    try:
        if not Confirm.ask("Start quiz?", default=True, console=console):
            return

        while True:
            load_quiz(controller)
            snapshot = controller.snapshot()

            if snapshot.phase is QuizPhase.EMPTY:
                console.print(error_panel(snapshot.error or "Failed to fetch quiz"))
                if Confirm.ask("Try again?", default=True, console=console):
                    continue
                return

            if not answer_questions(controller):
                return

            show_results(controller.snapshot())
            if not Confirm.ask(
                primary_action_label(controller.snapshot()), default=True, console=console
            ):
                return
            controller.primary_action()

    except (KeyboardInterrupt, EOFError):
        console.print("\n[yellow]Quiz abandoned.[/yellow]")
    except Exception as e:
        console.print(f"\n[red]Error during quiz:[/red] {e}", style="bold")
        raise typer.Exit(code=1)
    finally:
        controller.close()


@app.command()
def info() -> None:
    """Display information about the quiz."""
    info_text = f"""
[bold cyan]Quizzical[/bold cyan]
Version: {__version__}

[bold]How it works:[/bold]
  • Five easy general knowledge questions from the Open Trivia Database
  • One correct answer per question, shuffled among the others
  • Answer every question, then check your answers
  • Score 3 or more to pass
    """
    console.print(Panel(info_text, title="Quizzical Info", border_style="cyan"))


def load_quiz(controller: QuizController) -> None:
    """Fetch a quiz with a spinner while the request is in flight."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task("[cyan]Loading quiz...", total=None)
        asyncio.run(controller.start())


def answer_questions(controller: QuizController) -> bool:
    """
    Prompt for answers until the player checks them.

    Returns:
        False if the player quit
    """
    while True:
        snapshot = controller.snapshot()
        display_questions(snapshot)

        reply = Prompt.ask(
            'Answer (e.g. "1a"), "check" to check answers, "quit" to leave',
            console=console,
        )
        command = reply.strip().lower()

        if command in QUIT_COMMANDS:
            return False

        if command in CHECK_COMMANDS:
            if controller.primary_action():
                return True
            console.print("[yellow]Answer every question before checking.[/yellow]")
            continue

        choice = parse_choice(command, snapshot)
        if choice is None:
            console.print(f"[red]Not a valid answer:[/red] {reply}")
            continue

        controller.select_answer(*choice)


def parse_choice(reply: str, snapshot: QuizSnapshot) -> tuple[str, str] | None:
    """
    Map a reply such as "2b" to question and answer ids.

    Args:
        reply: Player input
        snapshot: Current quiz snapshot

    Returns:
        (question_id, answer_id), or None if the reply names nothing
    """
    reply = reply.strip().replace(" ", "").upper()
    if len(reply) < 2 or not reply[:-1].isdecimal():
        return None

    number, letter = int(reply[:-1]), reply[-1]
    if not 1 <= number <= snapshot.total_questions:
        return None

    question = snapshot.questions[number - 1]
    for index, answer in enumerate(question.answers):
        if answer_letter(index) == letter:
            return question.id, answer.id
    return None


def display_questions(snapshot: QuizSnapshot) -> None:
    """Display every question in the snapshot."""
    console.print()
    for number, question in enumerate(snapshot.questions, start=1):
        console.print(question_table(number, question, snapshot.show_results))

    answered = sum(1 for q in snapshot.questions if q.is_answered)
    console.print(f"[dim]{answered}/{snapshot.total_questions} answered[/dim]")


def show_results(snapshot: QuizSnapshot) -> None:
    """Display revealed answers and the score."""
    display_questions(snapshot)
    console.print()
    if snapshot.passed:
        console.print(celebration_panel(snapshot))
    else:
        console.print(f"[bold]{results_line(snapshot)}[/bold]")


@app.callback()
def callback() -> None:
    """
    Quizzical - Take a general knowledge quiz.
    """
    pass


if __name__ == "__main__":
    app()
