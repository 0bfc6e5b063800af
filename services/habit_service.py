# services/habit_service.py

import logging
from pathlib import Path
from typing import Callable, List, Optional

from core.completions import CompletionLedger
from core.habits import HabitRepository
from core.stats import day_stats, week_stats
from core.streaks import calculate_streak, longest_streak
from database.manager import BaseStore, create_store
from models.enums import StorageKeys, TimePreference
from models.habit import DayStats, Habit, HabitCompletion, HabitStatus, WeekData
from models.user import User
from models.validation import validate_date, validate_enum_value, validate_text
from utils.datetime_utils import today_str, week_dates

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100

class HabitTracker:
    """
    Habit operations for one user session

    Habits and completions are read from the store once, at construction.
    After that the in-memory repository and ledger are the source of truth
    and every mutation writes the affected set back. A failed write is
    logged by the store and does not undo the in-memory change; those
    changes are lost on the next load.

    Without a user nothing is loaded or written.
    """

    def __init__(self, store: BaseStore, user: Optional[User] = None,
                 today_provider: Optional[Callable[[], str]] = None,
                 max_name_length: int = MAX_NAME_LENGTH):
        self.store = store
        self.user = user
        self.today_provider = today_provider or today_str
        self.max_name_length = max_name_length

        if user is not None:
            self.habits = HabitRepository.from_records(store.get(StorageKeys.HABITS, []))
            self.completions = CompletionLedger.from_records(store.get(StorageKeys.COMPLETIONS, []))
            orphans = self.completions.retain(h.id for h in self.habits.list())
            if orphans:
                logger.warning(f"Dropped {orphans} completion records of deleted habits")
            logger.info(
                f"Loaded {self.habits.count()} habits and {self.completions.count()} "
                f"completions for user {user.id}"
            )
        else:
            self.habits = HabitRepository()
            self.completions = CompletionLedger()

    # ===== PERSISTENCE =====

    @property
    def user_id(self) -> Optional[str]:
        return self.user.id if self.user else None

    def _persist_habits(self) -> bool:
        if self.user is None:
            return False
        saved = self.store.set(StorageKeys.HABITS, self.habits.to_records())
        if not saved:
            logger.warning("Habits were not saved; changes are kept in memory until reload")
        return saved

    def _persist_completions(self) -> bool:
        if self.user is None:
            return False
        saved = self.store.set(StorageKeys.COMPLETIONS, self.completions.to_records())
        if not saved:
            logger.warning("Completions were not saved; changes are kept in memory until reload")
        return saved

    def today(self) -> str:
        return self.today_provider()

    # ===== QUERIES =====

    def get_completion(self, habit_id: str, date: str) -> Optional[HabitCompletion]:
        return self.completions.get_completion(habit_id, date)

    def is_completed_today(self, habit_id: str) -> bool:
        completion = self.completions.get_completion(habit_id, self.today())
        return bool(completion and completion.completed)

    def habit_streak(self, habit_id: str) -> int:
        return calculate_streak(self.completions.completed_dates(habit_id), self.today())

    def longest_streak(self, habit_id: str) -> int:
        return longest_streak(self.completions.completed_dates(habit_id))

    def list_habits(self) -> List[Habit]:
        return list(self.habits.list())

    def list_habits_with_status(self) -> List[HabitStatus]:
        """Habits in insertion order with today's status and current streak"""
        return [
            HabitStatus(
                habit=habit,
                is_completed=self.is_completed_today(habit.id),
                streak=self.habit_streak(habit.id),
            )
            for habit in self.habits.list()
        ]

    def day_stats(self, date: str) -> DayStats:
        validate_date(date)
        return day_stats(date, self.completions.completed_count_on(date), self.habits.count())

    def week_stats(self) -> WeekData:
        """Day stats for the seven days ending today"""
        return week_stats(week_dates(self.today()), self.completions.completed_count_on, self.habits.count())

    # ===== MUTATIONS =====

    def add_habit(self, name: str, time_preference=TimePreference.ANYTIME) -> Habit:
        name = validate_text(name, min_length=1, max_length=self.max_name_length, field_name="name")
        time_preference = validate_enum_value(time_preference, TimePreference, "time_preference")

        habit = self.habits.add(name, time_preference, user_id=self.user_id)
        self._persist_habits()
        logger.info(f"Habit added: {habit.name} ({habit.time_preference.value})")
        return habit

    def update_habit(self, habit_id: str, name: Optional[str] = None,
                     time_preference=None) -> Optional[Habit]:
        if name is not None:
            name = validate_text(name, min_length=1, max_length=self.max_name_length, field_name="name")
        if time_preference is not None:
            time_preference = validate_enum_value(time_preference, TimePreference, "time_preference")

        habit = self.habits.update(habit_id, name=name, time_preference=time_preference)
        if habit is not None:
            self._persist_habits()
        return habit

    def delete_habit(self, habit_id: str) -> bool:
        """Delete a habit together with all of its completion records"""
        if not self.habits.remove(habit_id):
            return False

        purged = self.completions.purge(habit_id)
        # Completions first; if that write fails the habit stays on disk with its records
        if self._persist_completions():
            self._persist_habits()
        logger.info(f"Habit deleted: {habit_id} ({purged} completion records removed)")
        return True

    def toggle_completion(self, habit_id: str) -> Optional[HabitCompletion]:
        """Flip today's completion of a habit; None for an unknown habit"""
        if self.habits.get(habit_id) is None:
            logger.debug(f"Toggle ignored for unknown habit {habit_id}")
            return None

        completion = self.completions.toggle(habit_id, self.today(), user_id=self.user_id)
        self._persist_completions()
        return completion

def create_app_store(app_config, data_file: Optional[Path] = None) -> BaseStore:
    """Configured store; data_file overrides the configured path"""
    return create_store(data_file or app_config.storage.path, persist=app_config.storage.persist_enabled)

def create_habit_tracker(app_config, user: Optional[User] = None,
                         store: Optional[BaseStore] = None) -> HabitTracker:
    """Tracker wired to the configured store and timezone"""
    if store is None:
        store = create_app_store(app_config)
    timezone = app_config.tracker.timezone
    return HabitTracker(
        store,
        user=user,
        today_provider=lambda: today_str(timezone),
        max_name_length=app_config.tracker.max_name_length,
    )
