"""Database model exports."""

from .leaderboard import Leaderboard
from .problem import Problem
from .user import User, UserResponse

__all__ = [
    "Leaderboard",
    "Problem",
    "User",
    "UserResponse",
]
