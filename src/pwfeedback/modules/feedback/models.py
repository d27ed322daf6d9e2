"""Models for password-strength feedback derivation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class AnalysisFormatError(ValueError):
    """Raised when an upstream analysis document cannot be interpreted."""


class Pattern(Enum):
    """Match kinds emitted by the upstream matcher."""

    DICTIONARY = "dictionary"
    SPATIAL = "spatial"
    REPEAT = "repeat"
    SEQUENCE = "sequence"
    REGEX = "regex"
    DATE = "date"
    OTHER = "other"

    @classmethod
    def parse(cls, value: str) -> Pattern:
        """Map an upstream identifier to a member, OTHER when unknown."""
        try:
            member = cls(value)
        except ValueError:
            return cls.OTHER
        return member


# Upstream ports disagree on key names; first key present wins.
_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "dictionary_name": ("dictionary_name", "dictionaryName"),
    "rank": ("rank",),
    "guesses": ("guesses",),
    "reversed": ("reversed", "isReversed"),
    "l33t": ("l33t", "isLeetSpeak", "leet"),
    "turns": ("turns",),
    "repeat_count": ("repeat_count", "repeatCount"),
    "regex_name": ("regex_name", "regexName"),
}


@dataclass(frozen=True, slots=True)
class Match:
    """One labeled substring of a password, as reported by the matcher."""

    pattern: Pattern
    token: str
    dictionary_name: str = ""
    rank: int = 0
    guesses: float = 0
    reversed: bool = False
    l33t: bool = False
    turns: int = 0
    repeat_count: int = 0
    regex_name: str = ""
    raw_pattern: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Match:
        """Build a match from a zxcvbn-style sequence entry."""
        if not isinstance(data, Mapping):
            raise AnalysisFormatError(f"match entry must be a mapping, got {type(data).__name__}")
        for required in ("pattern", "token"):
            if data.get(required) is None:
                raise AnalysisFormatError(f"match entry is missing '{required}'")

        raw_pattern = str(data["pattern"])
        values: dict[str, Any] = {}
        for name, aliases in _FIELD_ALIASES.items():
            for alias in aliases:
                if alias in data and data[alias] is not None:
                    values[name] = _coerce(name, data[alias])
                    break

        return cls(
            pattern=Pattern.parse(raw_pattern),
            token=str(data["token"]),
            raw_pattern=raw_pattern,
            **values,
        )


def _coerce(name: str, value: Any) -> Any:
    try:
        if name in {"reversed", "l33t"}:
            if isinstance(value, str):
                return value.strip().lower() in {"1", "true", "yes", "on"}
            return bool(value)
        if name in {"rank", "turns", "repeat_count"}:
            if isinstance(value, bool):
                raise TypeError("boolean is not a count")
            return int(value)
        if name == "guesses":
            return float(value)
    except (TypeError, ValueError, OverflowError) as e:
        raise AnalysisFormatError(f"invalid value for '{name}': {value!r}") from e
    return str(value)


@dataclass(slots=True)
class Feedback:
    """User-facing guidance: one warning (possibly empty) plus suggestions."""

    warning: str = ""
    suggestions: list[str] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.warning or self.suggestions)

    def to_dict(self) -> dict[str, Any]:
        """Return the ``{"warning", "suggestions"}`` document zxcvbn callers expect."""
        return {"warning": self.warning, "suggestions": list(self.suggestions)}
