"""Reading zxcvbn-style analysis documents into engine inputs."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .models import AnalysisFormatError, Match


def _parse_score(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise AnalysisFormatError(f"'score' must be an integer, got {value!r}")
    return value


def _parse_sequence(raw_sequence: Any) -> list[Match]:
    if not isinstance(raw_sequence, list):
        raise AnalysisFormatError("'sequence' must be a list of matches")

    matches: list[Match] = []
    for index, entry in enumerate(raw_sequence):
        try:
            matches.append(Match.from_dict(entry))
        except AnalysisFormatError as e:
            raise AnalysisFormatError(f"sequence[{index}]: {e}") from e
    return matches


def parse_analysis(data: Any, score: int | None = None) -> tuple[int, list[Match]]:
    """Extract ``(score, matches)`` from a decoded analysis document.

    ``data`` is normally a zxcvbn result mapping; keys other than ``score``
    and ``sequence`` are ignored so a full result can be passed as-is.
    When ``score`` is given it overrides the document, and ``data`` may
    also be a bare list of matches.
    """
    if isinstance(data, list):
        if score is None:
            raise AnalysisFormatError("a bare match list needs an explicit score")
        return _parse_score(score), _parse_sequence(data)

    if not isinstance(data, Mapping):
        raise AnalysisFormatError("analysis document must be a mapping")

    if score is None:
        if "score" not in data:
            raise AnalysisFormatError("analysis document is missing 'score'")
        score = data["score"]

    if "sequence" not in data:
        raise AnalysisFormatError("analysis document is missing 'sequence'")
    return _parse_score(score), _parse_sequence(data["sequence"])


def load_analysis(text: str, score: int | None = None) -> tuple[int, list[Match]]:
    """Parse JSON or YAML text holding an analysis document."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise AnalysisFormatError(f"could not parse analysis document: {e}") from e
    if data is None:
        raise AnalysisFormatError("analysis document is empty")
    return parse_analysis(data, score=score)


def load_analysis_file(path: Path, score: int | None = None) -> tuple[int, list[Match]]:
    """Read and parse an analysis document from disk."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise AnalysisFormatError(f"could not read {path}: {e}") from e
    return load_analysis(text, score=score)
