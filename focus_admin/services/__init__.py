"""Service layer helpers."""

from .dashboard import activity_series, compute_dashboard
from .export import entries_to_csv, export_filename
from .leaderboard import canonical_user_id, compute_leaderboard, rank_entries, resolve_window
from .store import ActivityStore, get_activity_store
from .users import UserAction, apply_user_action, is_banned, user_activity, user_to_dict

__all__ = [
    "ActivityStore",
    "UserAction",
    "activity_series",
    "apply_user_action",
    "canonical_user_id",
    "compute_dashboard",
    "compute_leaderboard",
    "entries_to_csv",
    "export_filename",
    "get_activity_store",
    "is_banned",
    "rank_entries",
    "resolve_window",
    "user_activity",
    "user_to_dict",
]
