# database/__init__.py

from .manager import (
    StorageError,
    StorageReadError,
    StorageWriteError,
    BaseStore,
    MemoryStore,
    JsonStore,
    create_store
)

__all__ = [
    'StorageError',
    'StorageReadError',
    'StorageWriteError',
    'BaseStore',
    'MemoryStore',
    'JsonStore',
    'create_store'
]
