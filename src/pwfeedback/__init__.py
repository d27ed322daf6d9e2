"""pwfeedback package."""

from pwfeedback.modules.feedback import Feedback, Match, Pattern, get_feedback

__all__ = ["Feedback", "Match", "Pattern", "app", "get_feedback", "main"]


def __getattr__(name: str):
    if name in {"app", "main"}:
        from pwfeedback.cli import app, main

        return {"app": app, "main": main}[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def __dir__() -> list[str]:
    return sorted(__all__)
