"""Debug utilities for feedback derivation visibility.

Thread-safe debug output with rich formatting for CLI sessions.
"""

import json
import threading
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.syntax import Syntax

from pwfeedback.modules.feedback.models import Match

# Thread-local storage for debug state
_debug_state = threading.local()


def set_debug_enabled(enabled: bool) -> None:
    """Set debug mode for the current thread/session."""
    _debug_state.enabled = enabled


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled for the current thread/session."""
    return getattr(_debug_state, "enabled", False)


def debug_print(category: str, message: str, console: Console | None = None, **data: Any) -> None:
    """Print debug information if debug mode is enabled.

    Args:
        category: Debug category (input, select, config)
        message: Main message to display
        console: Console to print to (stderr by default)
        **data: Additional key-value pairs to display
    """
    if not is_debug_enabled():
        return
    console = console or Console(stderr=True)
    console.print(f"[DEBUG:{category}] {message}", style="bold cyan")
    for key, value in data.items():
        if value is None:
            continue
        # Special formatting for different types
        if isinstance(value, dict):
            try:
                json_str = json.dumps(value, indent=2)
                syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)
                console.print(f"  {key}:", style="dim")
                console.print(syntax)
            except (TypeError, ValueError):
                console.print(f"  {key}: {value}", style="dim")
        elif isinstance(value, list):
            console.print(f"  {key}: {', '.join(str(v) for v in value)}", style="dim")
        elif isinstance(value, str) and len(value) > 100:
            # Truncate long strings
            console.print(f"  {key}: {value[:100]}... ({len(value)} chars)", style="dim")
        else:
            console.print(f"  {key}: {value}", style="dim")


def debug_selection(
    sequence: Sequence[Match],
    selected: Match | None,
    console: Console | None = None,
) -> None:
    """Log which match drives the feedback, without revealing token text.

    Args:
        sequence: Candidate matches in upstream order
        selected: The match chosen by the selector, or None when no match applies
        console: Console to print to (stderr by default)
    """
    if not is_debug_enabled():
        return
    kinds = [f"{m.raw_pattern or m.pattern.value}({len(m.token)})" for m in sequence]
    if selected is None:
        debug_print("select", "no match selected", console=console, Candidates=kinds or None)
        return
    details = {
        "pattern": selected.pattern.value,
        "length": len(selected.token),
        "sole_match": len(sequence) == 1,
    }
    if selected.dictionary_name:
        details["dictionary"] = selected.dictionary_name
        details["rank"] = selected.rank
    if selected.regex_name:
        details["regex"] = selected.regex_name
    debug_print(
        "select",
        f"{selected.pattern.value} match of {len(sequence)}",
        console=console,
        Candidates=kinds,
        Selected=details,
    )
