"""Shared CLI app objects and rendering helpers."""

import typer
from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from pwfeedback.modules.feedback import Feedback

app = typer.Typer(
    name="pwfeedback",
    help="Explain password-strength results as warnings and suggestions",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)


def render_feedback(feedback: Feedback, score: int) -> Panel:
    """Build a rich panel for a feedback result."""
    body = Text()
    if feedback.warning:
        body.append("Warning: ", style="bold yellow")
        body.append(feedback.warning)
    else:
        body.append("No warning.", style="dim")
    body.append("\n\n")

    if feedback.suggestions:
        body.append("Suggestions:\n", style="bold")
        for index, suggestion in enumerate(feedback.suggestions, start=1):
            body.append(f"  {index}. {suggestion}\n")
    else:
        body.append("No suggestions.", style="dim")

    body.rstrip()
    border = "green" if not feedback else "yellow"
    return Panel(body, title=f"Score {score}/4", border_style=border)
