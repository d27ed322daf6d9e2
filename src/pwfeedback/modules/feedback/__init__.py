"""Derive warnings and suggestions from password-strength matches."""

from .analyzer import get_feedback, get_match_feedback, select_longest_match
from .dictionary import get_dictionary_match_feedback, is_all_upper, is_start_upper
from .loader import load_analysis, load_analysis_file, parse_analysis
from .models import AnalysisFormatError, Feedback, Match, Pattern

__all__ = [
    "AnalysisFormatError",
    "Feedback",
    "Match",
    "Pattern",
    "get_dictionary_match_feedback",
    "get_feedback",
    "get_match_feedback",
    "is_all_upper",
    "is_start_upper",
    "load_analysis",
    "load_analysis_file",
    "parse_analysis",
    "select_longest_match",
]
