# core/habits.py

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.enums import TimePreference
from models.habit import Habit
from models.validation import ValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("name", "time_preference")

class HabitRepository:
    """
    Ordered set of habit definitions

    Mutations return immutable Habit snapshots; persisting the updated set
    is up to the caller (see to_records()).
    """

    def __init__(self, habits: Iterable[Habit] = ()):
        self._habits: List[Habit] = []
        seen = set()
        for habit in habits:
            if habit.id in seen:
                logger.warning(f"Skipping duplicate habit id {habit.id}")
                continue
            seen.add(habit.id)
            self._habits.append(habit)

    @classmethod
    def from_records(cls, records: Any) -> "HabitRepository":
        """Build from stored dicts, skipping records that do not parse"""
        habits = []
        if not isinstance(records, list):
            if records is not None:
                logger.warning(f"Stored habits must be a list, got {type(records).__name__}")
            records = []
        for index, record in enumerate(records):
            try:
                habits.append(Habit.from_dict(record))
            except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as e:
                logger.warning(f"Skipping invalid habit record {index}: {e}")
        return cls(habits)

    def add(self, name: str, time_preference=TimePreference.ANYTIME,
            user_id: Optional[str] = None) -> Habit:
        habit = Habit.create(name, time_preference, user_id=user_id)
        self._habits.append(habit)
        logger.debug(f"Added habit {habit.id} ({habit.name})")
        return habit

    def update(self, habit_id: str, **fields) -> Optional[Habit]:
        """Merge the provided fields into a habit; None when the id is unknown"""
        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise ValidationError(f"Cannot update habit fields: {sorted(unknown)}")
        changes = {key: value for key, value in fields.items() if value is not None}

        for index, habit in enumerate(self._habits):
            if habit.id == habit_id:
                updated = habit.with_changes(**changes) if changes else habit
                self._habits[index] = updated
                logger.debug(f"Updated habit {habit_id}: {sorted(changes)}")
                return updated
        return None

    def remove(self, habit_id: str) -> bool:
        before = len(self._habits)
        self._habits = [h for h in self._habits if h.id != habit_id]
        removed = len(self._habits) != before
        if removed:
            logger.debug(f"Removed habit {habit_id}")
        return removed

    def get(self, habit_id: str) -> Optional[Habit]:
        return next((h for h in self._habits if h.id == habit_id), None)

    def list(self) -> Tuple[Habit, ...]:
        return tuple(self._habits)

    def count(self) -> int:
        return len(self._habits)

    def to_records(self) -> List[Dict[str, Any]]:
        return [habit.to_dict() for habit in self._habits]
