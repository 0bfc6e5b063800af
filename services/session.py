# services/session.py

import logging
from typing import Optional

from database.manager import BaseStore
from models.enums import StorageKeys
from models.user import User

logger = logging.getLogger(__name__)

def load_current_user(store: BaseStore) -> Optional[User]:
    """Session user, or None when nobody is signed in or the record is unusable"""
    data = store.get(StorageKeys.USER)
    if not data or not store.get(StorageKeys.AUTH_TOKEN):
        return None
    try:
        return User.from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        logger.warning(f"Ignoring invalid user record: {e}")
        return None

def save_session(store: BaseStore, user: User, token: str) -> bool:
    saved_user = store.set(StorageKeys.USER, user.to_dict())
    saved_token = store.set(StorageKeys.AUTH_TOKEN, token)
    return saved_user and saved_token

def clear_session(store: BaseStore) -> bool:
    """Sign out, removing every application key including habit data"""
    return store.clear_all()
