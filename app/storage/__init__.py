"""
Record store selection.

STORAGE_BACKEND=memory  -> MemoryRecordStore (default, in-process)
STORAGE_BACKEND=firestore -> FirestoreRecordStore
"""

import logging
from typing import Optional

from app.core.settings import settings
from app.storage.base import RecordStore
from app.storage.memory import MemoryRecordStore

logger = logging.getLogger(__name__)

_store: Optional[RecordStore] = None


def create_record_store(backend: str) -> RecordStore:
    backend = (backend or "memory").strip().lower()
    if backend == "memory":
        return MemoryRecordStore()
    if backend == "firestore":
        # Imported lazily so firebase_admin is only initialized when selected
        from app.storage.firestore import FirestoreRecordStore
        return FirestoreRecordStore()
    raise ValueError(f"Unknown STORAGE_BACKEND '{backend}'. Use 'memory' or 'firestore'.")


def get_record_store() -> RecordStore:
    """Get or create the process-wide record store."""
    global _store
    if _store is None:
        _store = create_record_store(settings.STORAGE_BACKEND)
        logger.info(f"[STORAGE] Using {_store.backend_name} record store")
    return _store


def set_record_store(store: Optional[RecordStore]) -> None:
    """Replace the process-wide record store (None resets to lazy creation)."""
    global _store
    _store = store


__all__ = [
    "RecordStore",
    "MemoryRecordStore",
    "create_record_store",
    "get_record_store",
    "set_record_store",
]
