"""Weekly quiz submissions, leaderboard and rotation service."""

__version__ = "0.1.0"
