"""Test configuration and fixtures for pwfeedback."""

import tempfile
from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest

from pwfeedback.modules.feedback import Match, Pattern
from pwfeedback.utils.debug import set_debug_enabled


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> Path:
    """Point home and cwd at an empty directory and clear PWFEEDBACK_* env vars."""
    monkeypatch.setattr(Path, "home", lambda: temp_dir)
    monkeypatch.chdir(temp_dir)
    for key in ("PWFEEDBACK_OUTPUT", "PWFEEDBACK_DEBUG", "PWFEEDBACK_LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    return temp_dir


@pytest.fixture(autouse=True)
def reset_debug() -> Generator[None, None, None]:
    """Keep thread-local debug state from leaking between tests."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def make_match() -> Callable[..., Match]:
    """Return a factory for matches with sensible defaults."""

    def _make(pattern: Pattern = Pattern.DICTIONARY, token: str = "password", **kwargs: Any) -> Match:
        return Match(pattern=pattern, token=token, **kwargs)

    return _make


@pytest.fixture
def zxcvbn_result() -> dict[str, Any]:
    """Return a zxcvbn-python result for the password 'Password1990'."""
    return {
        "password": "Password1990",
        "guesses": 1_234_567,
        "guesses_log10": 6.09,
        "score": 1,
        "feedback": {"warning": "", "suggestions": []},
        "sequence": [
            {
                "pattern": "dictionary",
                "i": 0,
                "j": 7,
                "token": "Password",
                "matched_word": "password",
                "rank": 2,
                "dictionary_name": "passwords",
                "reversed": False,
                "l33t": False,
                "guesses": 4,
            },
            {
                "pattern": "regex",
                "i": 8,
                "j": 11,
                "token": "1990",
                "regex_name": "recent_year",
                "guesses": 36,
            },
        ],
    }
