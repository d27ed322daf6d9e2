"""Selection of the representative match and per-pattern feedback."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .dictionary import get_dictionary_match_feedback
from .models import Feedback, Match, Pattern

logger = logging.getLogger(__name__)

DEFAULT_SUGGESTIONS: tuple[str, ...] = (
    "Use a few words, avoid common phrases.",
    "No need for symbols, digits, or uppercase letters.",
)
EXTRA_SUGGESTION = "Add another word or two. Uncommon words are better."

# Scores above this are strong enough to need no guidance.
MAX_SCORE_WITH_FEEDBACK = 2

_SPATIAL_SUGGESTION = "Use a longer keyboard pattern with more turns."
_REPEAT_SUGGESTION = "Avoid repeated words and characters."


def select_longest_match(sequence: Sequence[Match]) -> Match:
    """Return the match with the longest token; the earliest wins ties."""
    longest = sequence[0]
    for match in sequence[1:]:
        if len(match.token) > len(longest.token):
            longest = match
    return longest


def get_feedback(score: int, sequence: Sequence[Match]) -> Feedback:
    """Derive the warning and suggestions for a scored match sequence."""
    if not sequence:
        return Feedback(warning="", suggestions=list(DEFAULT_SUGGESTIONS))

    if score > MAX_SCORE_WITH_FEEDBACK:
        return Feedback()

    longest = select_longest_match(sequence)
    is_sole_match = len(sequence) == 1
    logger.debug(
        "Selected %s match (%d chars) out of %d",
        longest.pattern.value,
        len(longest.token),
        len(sequence),
    )

    feedback = get_match_feedback(longest, is_sole_match)
    feedback.suggestions.append(EXTRA_SUGGESTION)
    return feedback


def get_match_feedback(match: Match, is_sole_match: bool) -> Feedback:
    """Map a single match to its pattern-specific feedback.

    Kinds without guidance (including regex matches other than recent
    years) return an empty ``Feedback``.
    """
    pattern = match.pattern

    if pattern is Pattern.DICTIONARY:
        return get_dictionary_match_feedback(match, is_sole_match)

    if pattern is Pattern.SPATIAL:
        if match.turns == 1:
            warning = "Straight rows of keys are easy to guess."
        else:
            warning = "Short keyboard patterns are easy to guess."
        return Feedback(warning=warning, suggestions=[_SPATIAL_SUGGESTION])

    if pattern is Pattern.REPEAT:
        if match.repeat_count == 1:
            warning = 'Repeats like "aaa" are easy to guess.'
        else:
            warning = 'Repeats like "abcabcabc" are only slightly harder to guess than "abc".'
        return Feedback(warning=warning, suggestions=[_REPEAT_SUGGESTION])

    if pattern is Pattern.SEQUENCE:
        return Feedback(
            warning='Sequences like "abc" or "6543" are easy to guess.',
            suggestions=["Avoid sequences."],
        )

    if pattern is Pattern.REGEX and match.regex_name == "recent_year":
        return Feedback(
            warning="Recent years are easy to guess.",
            suggestions=[
                "Avoid recent years.",
                "Avoid years that are associated with you.",
            ],
        )

    if pattern is Pattern.DATE:
        return Feedback(
            warning="Dates are often easy to guess.",
            suggestions=["Avoid dates and years that are associated with you."],
        )

    return Feedback()
