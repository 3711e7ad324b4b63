"""Service layer helpers."""

from .leaderboard import get_snapshot, latest_leaderboard_week, list_snapshots, top_players
from .problems import active_week, find_problem, publish_problem
from .rotation import rotate_week
from .submissions import attempts_this_week, submit_answer

__all__ = [
    "active_week",
    "attempts_this_week",
    "find_problem",
    "get_snapshot",
    "latest_leaderboard_week",
    "list_snapshots",
    "publish_problem",
    "rotate_week",
    "submit_answer",
    "top_players",
]
