"""Admin backend for the focus timer app: users, leaderboard, feedback."""

__version__ = "0.1.0"
