"""Tests for debug output helpers."""

import threading
from io import StringIO

from rich.console import Console

from pwfeedback.modules.feedback import Match, Pattern
from pwfeedback.utils.debug import (
    debug_print,
    debug_selection,
    is_debug_enabled,
    set_debug_enabled,
)


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, width=200, color_system=None), buffer


class TestDebugState:
    def test_disabled_by_default(self) -> None:
        assert is_debug_enabled() is False

    def test_state_is_thread_local(self) -> None:
        set_debug_enabled(True)
        seen: list[bool] = []
        worker = threading.Thread(target=lambda: seen.append(is_debug_enabled()))
        worker.start()
        worker.join()
        assert is_debug_enabled() is True
        assert seen == [False]


class TestDebugPrint:
    def test_silent_when_disabled(self) -> None:
        console, buffer = _console()
        debug_print("input", "hello", console=console, Extra="x")
        assert buffer.getvalue() == ""

    def test_formats_values(self) -> None:
        set_debug_enabled(True)
        console, buffer = _console()
        debug_print(
            "input",
            "hello",
            console=console,
            Items=["a", "b"],
            Long="x" * 150,
            Skipped=None,
        )
        output = buffer.getvalue()
        assert "[DEBUG:input] hello" in output
        assert "Items: a, b" in output
        assert "(150 chars)" in output
        assert "Skipped" not in output


class TestDebugSelection:
    def test_reports_selected_match_without_token(self) -> None:
        set_debug_enabled(True)
        console, buffer = _console()
        sequence = [
            Match(Pattern.DICTIONARY, "Hunter", dictionary_name="male_names", rank=40),
            Match(Pattern.DATE, "2001"),
        ]
        debug_selection(sequence, sequence[0], console=console)
        output = buffer.getvalue()
        assert "dictionary match of 2" in output
        assert "male_names" in output
        assert "Hunter" not in output

    def test_reports_no_selection(self) -> None:
        set_debug_enabled(True)
        console, buffer = _console()
        debug_selection([], None, console=console)
        assert "no match selected" in buffer.getvalue()
