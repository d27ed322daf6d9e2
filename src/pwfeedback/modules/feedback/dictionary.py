"""Feedback for dictionary matches: common passwords, words and names."""

from __future__ import annotations

from .models import Feedback, Match

_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_LOWER_OR_DIGIT = frozenset("abcdefghijklmnopqrstuvwxyz0123456789")

_NAME_DICTIONARIES = frozenset({"surnames", "male_names", "female_names"})

# Guess budget under which a non-sole password hit still earns a warning.
_SIMILAR_PASSWORD_GUESSES = 10_000

START_UPPER_SUGGESTION = "Capitalization doesn't help very much."
ALL_UPPER_SUGGESTION = "All-uppercase is almost as easy to guess as all-lowercase."
REVERSED_SUGGESTION = "Reversed words aren't much harder to guess."
L33T_SUGGESTION = "Predictable substitutions like '@' instead of 'a' don't help very much."


def is_start_upper(word: str) -> bool:
    """Return True for one leading capital followed by no further capitals."""
    if len(word) < 2 or word[0] not in _UPPER:
        return False
    return not any(ch in _UPPER for ch in word[1:])


def is_all_upper(word: str) -> bool:
    """Return True when the word has no lowercase letters and no digits.

    Tokens made only of symbols also qualify.
    """
    if not word:
        return False
    return not any(ch in _LOWER_OR_DIGIT for ch in word)


def _dictionary_warning(match: Match, is_sole_match: bool) -> str:
    name = match.dictionary_name

    if name == "passwords":
        if is_sole_match and not match.l33t and not match.reversed:
            if match.rank <= 10:
                return "This is a top-10 common password."
            if match.rank <= 100:
                return "This is a top-100 common password."
            return "This is a very common password."
        if match.guesses <= _SIMILAR_PASSWORD_GUESSES:
            return "This is similar to a commonly used password."
        return ""

    if name == "english_wikipedia":
        return "A word by itself is easy to guess." if is_sole_match else ""

    if name in _NAME_DICTIONARIES:
        if is_sole_match:
            return "Names and surnames by themselves are easy to guess."
        return "Common names and surnames are easy to guess."

    return ""


def get_dictionary_match_feedback(match: Match, is_sole_match: bool) -> Feedback:
    """Derive warning and style suggestions for a dictionary match."""
    word = match.token
    suggestions: list[str] = []

    if is_start_upper(word):
        suggestions.append(START_UPPER_SUGGESTION)
    elif is_all_upper(word):
        suggestions.append(ALL_UPPER_SUGGESTION)

    if match.reversed and len(word) >= 4:
        suggestions.append(REVERSED_SUGGESTION)
    if match.l33t:
        suggestions.append(L33T_SUGGESTION)

    return Feedback(warning=_dictionary_warning(match, is_sole_match), suggestions=suggestions)
