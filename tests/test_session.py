from models.enums import StorageKeys
from services.session import clear_session, load_current_user, save_session


def test_no_session_means_no_user(memory_store):
    assert load_current_user(memory_store) is None


def test_save_and_load_session(memory_store, user):
    assert save_session(memory_store, user, "token-123") is True

    loaded = load_current_user(memory_store)
    assert loaded == user
    assert memory_store.get(StorageKeys.AUTH_TOKEN) == "token-123"


def test_user_without_token_is_signed_out(memory_store, user):
    memory_store.set(StorageKeys.USER, user.to_dict())
    assert load_current_user(memory_store) is None


def test_invalid_user_record_is_ignored(memory_store):
    memory_store.set(StorageKeys.USER, {"email": "nobody@example.com"})
    memory_store.set(StorageKeys.AUTH_TOKEN, "token")
    assert load_current_user(memory_store) is None


def test_clear_session_removes_all_app_data(memory_store, user):
    save_session(memory_store, user, "token")
    memory_store.set(StorageKeys.HABITS, [{"id": "habit_1"}])
    memory_store.set(StorageKeys.COMPLETIONS, [])
    memory_store.set("other_app", 1)

    assert clear_session(memory_store) is True
    assert load_current_user(memory_store) is None
    assert memory_store.get(StorageKeys.HABITS) is None
    assert memory_store.get(StorageKeys.COMPLETIONS) is None
    assert memory_store.get("other_app") == 1
