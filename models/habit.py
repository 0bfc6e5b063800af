# models/habit.py

import time
import uuid
from dataclasses import dataclass, field, replace
from typing import Optional, List, Dict, Any

from models.enums import TimePreference
from models.validation import ValidationError, validate_text, validate_enum_value, validate_date
from utils.datetime_utils import now_iso

def generate_id(prefix: str) -> str:
    """Opaque id in the form <prefix>_<epoch ms>_<9 random chars>"""
    return f"{prefix}_{int(time.time() * 1000)}_{uuid.uuid4().hex[:9]}"

@dataclass(frozen=True)
class Habit:
    id: str
    name: str
    time_preference: TimePreference = TimePreference.ANYTIME
    created_at: str = field(default_factory=now_iso)
    user_id: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise ValidationError("habit id must not be empty")
        object.__setattr__(self, "name", validate_text(self.name, field_name="name"))
        object.__setattr__(
            self, "time_preference",
            validate_enum_value(self.time_preference, TimePreference, "time_preference")
        )

    @classmethod
    def create(cls, name: str, time_preference=TimePreference.ANYTIME,
               user_id: Optional[str] = None) -> "Habit":
        return cls(id=generate_id("habit"), name=name, time_preference=time_preference, user_id=user_id)

    def with_changes(self, **changes) -> "Habit":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "timePreference": self.time_preference.value,
            "createdAt": self.created_at,
            "userId": self.user_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Habit":
        return cls(
            id=data["id"],
            name=data["name"],
            time_preference=data.get("timePreference", TimePreference.ANYTIME.value),
            created_at=data.get("createdAt") or now_iso(),
            user_id=data.get("userId"),
        )

@dataclass(frozen=True)
class HabitCompletion:
    id: str
    habit_id: str
    date: str  # YYYY-MM-DD
    completed: bool
    completed_at: Optional[str] = None
    user_id: Optional[str] = None

    def __post_init__(self):
        if not self.habit_id:
            raise ValidationError("habit_id must not be empty")
        validate_date(self.date)
        if not isinstance(self.completed, bool):
            raise ValidationError(f"completed must be a boolean, got {self.completed!r}")

    @classmethod
    def create(cls, habit_id: str, date: str, user_id: Optional[str] = None) -> "HabitCompletion":
        """First completion of a habit on a day"""
        return cls(
            id=generate_id("completion"),
            habit_id=habit_id,
            date=date,
            completed=True,
            completed_at=now_iso(),
            user_id=user_id,
        )

    def toggled(self) -> "HabitCompletion":
        """Flipped copy; completing re-stamps completed_at, un-completing clears it"""
        completed = not self.completed
        return replace(self, completed=completed, completed_at=now_iso() if completed else None)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "habitId": self.habit_id,
            "date": self.date,
            "completed": self.completed,
            "completedAt": self.completed_at,
            "userId": self.user_id,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "HabitCompletion":
        return cls(
            id=data["id"],
            habit_id=data["habitId"],
            date=data["date"],
            completed=data.get("completed", False),
            completed_at=data.get("completedAt"),
            user_id=data.get("userId"),
        )

@dataclass(frozen=True)
class HabitStatus:
    """Habit with its derived fields for display"""
    habit: Habit
    is_completed: bool = False
    streak: int = 0

    @property
    def id(self) -> str:
        return self.habit.id

    @property
    def name(self) -> str:
        return self.habit.name

    @property
    def time_preference(self) -> TimePreference:
        return self.habit.time_preference

    def to_dict(self) -> Dict[str, Any]:
        data = self.habit.to_dict()
        data["isCompleted"] = self.is_completed
        data["streak"] = self.streak
        return data

@dataclass(frozen=True)
class DayStats:
    date: str
    completed: int
    total: int
    completion_rate: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "completed": self.completed,
            "total": self.total,
            "completionRate": self.completion_rate,
        }

@dataclass(frozen=True)
class WeekData:
    start_date: str
    end_date: str
    days: List[DayStats] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "startDate": self.start_date,
            "endDate": self.end_date,
            "days": [day.to_dict() for day in self.days],
        }
