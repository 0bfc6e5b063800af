# services/__init__.py

"""
DailyCheck Habits services

Habit operations for a user session and access to the session records
that share the same store.
"""

from .habit_service import HabitTracker, create_app_store, create_habit_tracker
from .session import load_current_user, save_session, clear_session

__all__ = [
    'HabitTracker',
    'create_app_store',
    'create_habit_tracker',
    'load_current_user',
    'save_session',
    'clear_session'
]
