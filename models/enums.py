# models/enums.py

from enum import Enum

class TimePreference(Enum):
    MORNING = "morning"
    EVENING = "evening"
    ANYTIME = "anytime"

class StorageKeys(Enum):
    HABITS = "habit_tracker_habits"
    COMPLETIONS = "habit_tracker_completions"
    USER = "habit_tracker_user"
    AUTH_TOKEN = "habit_tracker_auth_token"
