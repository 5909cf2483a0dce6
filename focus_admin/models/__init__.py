"""Database model exports."""

from .activity import FocusSession, SessionMode, Streak, Task, TaskStatus
from .feedback import Feedback, FeedbackType
from .leaderboard import LeaderboardEntry, LeaderboardPage, Metric, Period
from .user import AuthUser, Profile

__all__ = [
    "AuthUser",
    "Feedback",
    "FeedbackType",
    "FocusSession",
    "LeaderboardEntry",
    "LeaderboardPage",
    "Metric",
    "Period",
    "Profile",
    "SessionMode",
    "Streak",
    "Task",
    "TaskStatus",
]
