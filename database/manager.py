#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
DailyCheck Habits v1.0 - Persistent Store
Key/value storage of JSON documents with graceful degradation

Every public method of a store swallows its own I/O and serialization
failures: they are logged and reported as an absent value or a False
result. In-memory state held by callers stays authoritative.

Author: AI Assistant
Version: 1.0.0
Date: 2025-06-20
"""

import json
import shutil
import threading
import copy
from pathlib import Path
from typing import Dict, Optional, Any, Iterable
import logging

from models.enums import StorageKeys

logger = logging.getLogger(__name__)

# ===== EXCEPTIONS =====

class StorageError(Exception):
    """Base error of the persistent store"""
    pass

class StorageReadError(StorageError):
    """Stored data could not be read or parsed"""
    pass

class StorageWriteError(StorageError):
    """Data could not be serialized or written"""
    pass

def _key_name(key) -> str:
    return key.value if isinstance(key, StorageKeys) else str(key)

# ===== STORES =====

class BaseStore:
    """get/set/remove/clear_all contract keyed by string names"""

    app_keys: Iterable[str] = tuple(k.value for k in StorageKeys)

    def get(self, key, default: Any = None) -> Any:
        try:
            return self._read(_key_name(key), default)
        except StorageError as e:
            logger.error(f"Error reading key \"{_key_name(key)}\": {e}")
            return default

    def set(self, key, value: Any) -> bool:
        try:
            self._write(_key_name(key), value)
            return True
        except StorageError as e:
            logger.error(f"Error writing key \"{_key_name(key)}\": {e}")
            return False

    def remove(self, key) -> bool:
        try:
            self._delete([_key_name(key)])
            return True
        except StorageError as e:
            logger.error(f"Error removing key \"{_key_name(key)}\": {e}")
            return False

    def clear_all(self) -> bool:
        """Remove every application key"""
        try:
            self._delete(list(self.app_keys))
            return True
        except StorageError as e:
            logger.error(f"Error clearing store: {e}")
            return False

    def _read(self, key: str, default: Any) -> Any:
        raise NotImplementedError

    def _write(self, key: str, value: Any) -> None:
        raise NotImplementedError

    def _delete(self, keys) -> None:
        raise NotImplementedError

class MemoryStore(BaseStore):
    """In-process store; values are kept in serialized form"""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self._write(_key_name(key), value)

    def _read(self, key: str, default: Any) -> Any:
        if key not in self._data:
            return default
        try:
            return json.loads(self._data[key])
        except ValueError as e:
            raise StorageReadError(e) from e

    def _write(self, key: str, value: Any) -> None:
        try:
            self._data[key] = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(e) from e

    def _delete(self, keys) -> None:
        for key in keys:
            self._data.pop(key, None)

    def raw(self) -> Dict[str, str]:
        return dict(self._data)

class JsonStore(BaseStore):
    """All keys live in one JSON document on disk"""

    VERSION_KEY = "__store_version__"
    CURRENT_VERSION = "1.0.0"

    def __init__(self, path: Path):
        self.path = Path(path)
        self.file_lock = threading.RLock()

    def _load_document(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageReadError(f"{self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageReadError(f"{self.path}: expected a JSON object, got {type(data).__name__}")
        return data

    def _read(self, key: str, default: Any) -> Any:
        with self.file_lock:
            document = self._load_document()
        if key not in document:
            return default
        return copy.deepcopy(document[key])

    def _load_for_update(self) -> Dict[str, Any]:
        try:
            return self._load_document()
        except StorageReadError as e:
            # Keep the damaged file aside instead of silently overwriting it
            corrupt_copy = self.path.with_suffix(self.path.suffix + '.corrupt')
            logger.warning(f"Store file is corrupted ({e}), saving a copy to {corrupt_copy}")
            try:
                shutil.copy2(self.path, corrupt_copy)
            except OSError as copy_error:
                raise StorageWriteError(f"cannot preserve corrupted store: {copy_error}") from copy_error
            return {}

    def _save_document(self, document: Dict[str, Any]) -> None:
        document[self.VERSION_KEY] = self.CURRENT_VERSION
        temp_file = self.path.with_suffix(self.path.suffix + '.tmp')
        try:
            payload = json.dumps(document, ensure_ascii=False, indent=2)
        except (TypeError, ValueError) as e:
            raise StorageWriteError(e) from e

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_file, 'w', encoding='utf-8') as f:
                f.write(payload)
            temp_file.replace(self.path)
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise StorageWriteError(f"{self.path}: {e}") from e

    def _write(self, key: str, value: Any) -> None:
        with self.file_lock:
            document = self._load_for_update()
            document[key] = value
            self._save_document(document)
            logger.debug(f"Stored key \"{key}\" in {self.path}")

    def _delete(self, keys) -> None:
        with self.file_lock:
            if not self.path.exists():
                return
            document = self._load_for_update()
            for key in keys:
                document.pop(key, None)
            self._save_document(document)

def create_store(path: Optional[Path] = None, persist: bool = True) -> BaseStore:
    """JsonStore at path, or a MemoryStore when persistence is disabled"""
    if not persist or path is None:
        logger.info("Persistence disabled, using in-memory store")
        return MemoryStore()
    return JsonStore(path)
