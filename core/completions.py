# core/completions.py

import logging
from typing import Any, Dict, Iterable, List, Optional, Tuple

from models.habit import HabitCompletion
from models.validation import ValidationError, validate_date

logger = logging.getLogger(__name__)

class CompletionLedger:
    """
    Per-day completion records keyed by (habit_id, date)

    State machine of one key: absent -> completed -> uncompleted -> completed ...
    A record is never deleted by toggling; un-completion is stored as
    completed=False. Records disappear only through purge().
    """

    def __init__(self, completions: Iterable[HabitCompletion] = ()):
        by_key: Dict[Tuple[str, str], HabitCompletion] = {}
        for completion in completions:
            key = (completion.habit_id, completion.date)
            if key in by_key:
                logger.warning(f"Duplicate completion for habit {key[0]} on {key[1]}, keeping the latest")
            by_key[key] = completion
        self._records: List[HabitCompletion] = list(by_key.values())

    @classmethod
    def from_records(cls, records: Any) -> "CompletionLedger":
        completions = []
        if not isinstance(records, list):
            if records is not None:
                logger.warning(f"Stored completions must be a list, got {type(records).__name__}")
            records = []
        for index, record in enumerate(records):
            try:
                completions.append(HabitCompletion.from_dict(record))
            except (KeyError, TypeError, ValueError, AttributeError, ValidationError) as e:
                logger.warning(f"Skipping invalid completion record {index}: {e}")
        return cls(completions)

    def _index_of(self, habit_id: str, date: str) -> Optional[int]:
        for index, completion in enumerate(self._records):
            if completion.habit_id == habit_id and completion.date == date:
                return index
        return None

    def get_completion(self, habit_id: str, date: str) -> Optional[HabitCompletion]:
        index = self._index_of(habit_id, date)
        return self._records[index] if index is not None else None

    def toggle(self, habit_id: str, today: str, user_id: Optional[str] = None) -> HabitCompletion:
        """Flip the record of habit_id for today, creating it on first use"""
        validate_date(today, "today")
        index = self._index_of(habit_id, today)
        if index is None:
            completion = HabitCompletion.create(habit_id, today, user_id=user_id)
            self._records.append(completion)
        else:
            completion = self._records[index].toggled()
            self._records[index] = completion
        logger.debug(f"Habit {habit_id} on {today}: completed={completion.completed}")
        return completion

    def purge(self, habit_id: str) -> int:
        """Remove every record of a habit, returning how many were dropped"""
        before = len(self._records)
        self._records = [c for c in self._records if c.habit_id != habit_id]
        return before - len(self._records)

    def retain(self, habit_ids: Iterable[str]) -> int:
        """Drop records whose habit is not in habit_ids, returning how many were dropped"""
        keep = set(habit_ids)
        before = len(self._records)
        self._records = [c for c in self._records if c.habit_id in keep]
        return before - len(self._records)

    def for_habit(self, habit_id: str) -> Tuple[HabitCompletion, ...]:
        return tuple(c for c in self._records if c.habit_id == habit_id)

    def completed_dates(self, habit_id: str) -> List[str]:
        return [c.date for c in self._records if c.habit_id == habit_id and c.completed]

    def completed_count_on(self, date: str) -> int:
        return sum(1 for c in self._records if c.date == date and c.completed)

    def list(self) -> Tuple[HabitCompletion, ...]:
        return tuple(self._records)

    def count(self) -> int:
        return len(self._records)

    def to_records(self) -> List[Dict[str, Any]]:
        return [completion.to_dict() for completion in self._records]
