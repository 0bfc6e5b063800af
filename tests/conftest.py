import pytest

from database.manager import JsonStore, MemoryStore
from models.user import User
from services.habit_service import HabitTracker

TODAY = "2025-06-20"


class Clock:
    """Settable "today" for trackers under test"""

    def __init__(self, today: str = TODAY):
        self.today = today

    def __call__(self) -> str:
        return self.today


@pytest.fixture
def clock():
    return Clock()


@pytest.fixture
def user():
    return User(id="user_1", email="demo@example.com", name="Demo")


@pytest.fixture
def memory_store():
    return MemoryStore()


@pytest.fixture
def json_store(tmp_path):
    return JsonStore(tmp_path / "habits.json")


@pytest.fixture
def tracker(memory_store, user, clock):
    return HabitTracker(memory_store, user=user, today_provider=clock)
