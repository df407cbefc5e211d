"""
display/console.py

Rich-based display layer. All visual output is routed through ConsoleDisplay.

Color conventions:
  cyan    = Input text
  green   = Palindrome / success
  red     = Not a palindrome / errors
  magenta = Pair chunks
  yellow  = Headers
"""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.registry import ExerciseResult

_console = Console()

_EXERCISE_LABELS = {
    "palindrome": "Palindrome Checker",
    "pairs": "Pair Splitter",
}


def format_value(result: ExerciseResult) -> Text:
    """Render an exercise result value as styled text."""
    if isinstance(result.value, bool):
        if result.value:
            return Text("palindrome", style="bold green")
        return Text("not a palindrome", style="bold red")
    if not result.value:
        return Text("(no pairs)", style="dim")
    text = Text()
    for i, chunk in enumerate(result.value):
        if i:
            text.append(" | ", style="dim")
        text.append(chunk, style="magenta")
    return text


class ConsoleDisplay:
    """Centralised display for all console output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or _console

    # ------------------------------------------------------------------ #
    # Structural elements
    # ------------------------------------------------------------------ #

    def header(self, exercise: str, count: int) -> None:
        label = _EXERCISE_LABELS.get(exercise, exercise)
        self.console.print()
        self.console.print(
            Panel(
                f"[bold white]{label}[/bold white]\n"
                f"[dim]Inputs:[/dim] [yellow]{count}[/yellow]",
                border_style="bold blue",
                padding=(1, 2),
            )
        )
        self.console.print()

    # ------------------------------------------------------------------ #
    # Results
    # ------------------------------------------------------------------ #

    def result(self, result: ExerciseResult) -> None:
        body = Text()
        body.append("Input:  ", style="dim")
        body.append(repr(result.text), style="cyan")
        body.append("\nResult: ", style="dim")
        body.append_text(format_value(result))

        border = "magenta"
        if isinstance(result.value, bool):
            border = "green" if result.value else "red"

        self.console.print(
            Panel(
                body,
                title=f" {_EXERCISE_LABELS.get(result.exercise, result.exercise)} ",
                title_align="left",
                border_style=border,
                padding=(0, 2),
            )
        )

    def summary(self, results: list) -> None:
        """Print a table with one row per result."""
        table = Table(title="Summary", title_style="bold yellow", show_lines=False)
        table.add_column("#", justify="right", style="dim")
        table.add_column("Input", style="cyan", overflow="fold")
        table.add_column("Result", overflow="fold")
        for i, result in enumerate(results, start=1):
            table.add_row(str(i), Text(repr(result.text)), format_value(result))
        self.console.print()
        self.console.print(table)
        self.console.print()

    # ------------------------------------------------------------------ #
    # Terminal messages
    # ------------------------------------------------------------------ #

    def error(self, message: str) -> None:
        self.console.print(f"\n[bold red]Error:[/bold red] {escape(message)}\n")

    def success(self, message: str) -> None:
        self.console.print(f"[bold green]✓[/bold green] {escape(message)}")
