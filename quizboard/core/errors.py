"""Domain errors raised by the quiz services.

Each error carries the HTTP status it maps to and a message that is safe to
show to the caller. The API layer renders them as ``{"message": ...}``.
"""

from __future__ import annotations


class QuizError(Exception):
    """Base class for expected, user-facing failures."""

    status_code = 500
    message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(QuizError):
    """A required submission field is missing or malformed."""

    status_code = 400
    message = "Missing required fields"


class AttemptLimitExceeded(QuizError):
    """The user already used every attempt for the requested week."""

    status_code = 400
    message = "Maximum attempts reached for this week"


class ProblemNotFound(QuizError):
    """No problem has been published for the requested week."""

    status_code = 500
    message = "Problem not found for this week"


class SnapshotNotFound(QuizError):
    status_code = 404
    message = "Leaderboard not found for this week"


class RotationInProgress(QuizError):
    status_code = 409
    message = "A weekly rotation is already running"


__all__ = [
    "AttemptLimitExceeded",
    "ProblemNotFound",
    "QuizError",
    "RotationInProgress",
    "SnapshotNotFound",
    "ValidationError",
]
