"""
Firestore-backed record store.

Equality filters are pushed down to Firestore; the optional predicate is
evaluated in Python on the streamed documents.
"""

import logging
from typing import Any, Dict, List, Optional

from app.config.firebase import get_db
from app.core.exceptions import StorageFailure
from app.storage.base import Predicate, Record, RecordStore
from app.utils.firestore_helpers import apply_equality_filters

logger = logging.getLogger(__name__)


class FirestoreRecordStore(RecordStore):
    """Durable record store on top of a Firestore client."""

    backend_name = "firestore"

    def __init__(self, client=None):
        self.db = client if client is not None else get_db()

    def get(self, collection: str, key: str) -> Optional[Record]:
        try:
            doc = self.db.collection(collection).document(key).get()
        except Exception as e:
            logger.error(f"Failed to read {collection}/{key}: {e}", exc_info=True)
            raise StorageFailure(f"Failed to read {collection}/{key}: {e}")

        if not doc.exists:
            return None
        return doc.to_dict()

    def put(self, collection: str, key: str, record: Record) -> None:
        try:
            self.db.collection(collection).document(key).set(record)
        except Exception as e:
            logger.error(f"Failed to write {collection}/{key}: {e}", exc_info=True)
            raise StorageFailure(f"Failed to write {collection}/{key}: {e}")

    def delete(self, collection: str, key: str) -> bool:
        try:
            doc_ref = self.db.collection(collection).document(key)
            if not doc_ref.get().exists:
                return False
            doc_ref.delete()
            return True
        except Exception as e:
            logger.error(f"Failed to delete {collection}/{key}: {e}", exc_info=True)
            raise StorageFailure(f"Failed to delete {collection}/{key}: {e}")

    def list(
        self,
        collection: str,
        where: Optional[Dict[str, Any]] = None,
        predicate: Optional[Predicate] = None,
    ) -> List[Record]:
        try:
            query = apply_equality_filters(self.db.collection(collection), where)
            docs = list(query.stream())
        except Exception as e:
            logger.error(f"Failed to query {collection}: {e}", exc_info=True)
            raise StorageFailure(f"Failed to query {collection}: {e}")

        results = []
        for doc in docs:
            data = doc.to_dict()
            if predicate is not None and not predicate(data):
                continue
            results.append(data)
        return results

    def ping(self) -> Dict[str, Any]:
        collections = list(self.db.collections())
        return {
            "connected": True,
            "collections_count": len(collections),
        }
