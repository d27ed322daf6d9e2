"""Explain command: turn a zxcvbn result into warning and suggestions."""

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from pwfeedback.modules.feedback import AnalysisFormatError
from pwfeedback.utils.debug import debug_print, debug_selection, set_debug_enabled

from .deps import cli_module
from .shared import app, console, err_console, render_feedback


@app.command()
def explain(
    source: str = typer.Argument(
        "-", help="zxcvbn result as JSON or YAML; '-' reads from stdin"
    ),
    score: Optional[int] = typer.Option(
        None, "--score", "-s", help="Override the score stored in the document (0-4)"
    ),
    output: Optional[str] = typer.Option(
        None, "--format", "-f", help="Output format: text, json"
    ),
    debug: bool = typer.Option(False, "--debug", help="Show which match drives the feedback"),
) -> None:
    """Print the warning and suggestions for a password-strength result."""
    cli = cli_module()
    set_debug_enabled(debug or cli.get_debug_enabled())

    output_format = (output or cli.get_output_format()).strip().lower()
    if output_format not in cli.OUTPUT_FORMATS:
        err_console.print(
            f"[red]Unknown format: {output_format}. Use 'text' or 'json'.[/red]"
        )
        raise typer.Exit(1)

    try:
        if source == "-":
            doc_score, matches = cli.load_analysis(sys.stdin.read(), score=score)
        else:
            doc_score, matches = cli.load_analysis_file(Path(source), score=score)
    except AnalysisFormatError as e:
        err_console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    debug_print("input", f"score={doc_score}", console=err_console, Matches=len(matches))
    selected = None
    if matches and doc_score <= 2:
        selected = cli.select_longest_match(matches)
    debug_selection(matches, selected, console=err_console)

    feedback = cli.get_feedback(doc_score, matches)

    if output_format == "json":
        typer.echo(json.dumps(feedback.to_dict(), indent=2))
        return

    console.print(render_feedback(feedback, doc_score))
