"""
Extensions Module - Per-app initialization of the storage engine
Each app gets its own storage instance so tests never share state.
"""

from flask import current_app
from utils.storage import MemStorage


def init_storage(app, storage=None):
    """Bind a storage engine to the app, creating a fresh one when none is given"""
    storage = storage if storage is not None else MemStorage()
    storage.init_app(app)
    return storage


def get_storage():
    """Storage engine bound to the current app"""
    return current_app.extensions['storage']


__all__ = ['init_storage', 'get_storage']
