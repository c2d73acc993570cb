"""
In-process record store.

Single process, no locking: concurrent writers are last-write-wins.
"""

from copy import deepcopy
from typing import Any, Dict, List, Optional

from app.storage.base import Predicate, Record, RecordStore, matches


class MemoryRecordStore(RecordStore):
    """Dict-of-dicts store used for local development and tests."""

    backend_name = "memory"

    def __init__(self):
        self._collections: Dict[str, Dict[str, Record]] = {}

    def get(self, collection: str, key: str) -> Optional[Record]:
        record = self._collections.get(collection, {}).get(key)
        return deepcopy(record) if record is not None else None

    def put(self, collection: str, key: str, record: Record) -> None:
        self._collections.setdefault(collection, {})[key] = deepcopy(record)

    def delete(self, collection: str, key: str) -> bool:
        return self._collections.get(collection, {}).pop(key, None) is not None

    def list(
        self,
        collection: str,
        where: Optional[Dict[str, Any]] = None,
        predicate: Optional[Predicate] = None,
    ) -> List[Record]:
        results = []
        for record in self._collections.get(collection, {}).values():
            if not matches(record, where):
                continue
            if predicate is not None and not predicate(record):
                continue
            results.append(deepcopy(record))
        return results

    def ping(self) -> Dict[str, Any]:
        return {
            "connected": True,
            "collections_count": len(self._collections),
        }

    def clear(self) -> None:
        """Drop every collection."""
        self._collections.clear()
