"""
Record store interface.

The lifecycle services only talk to this interface, so they can run against
the in-process store in tests and against Firestore in production.
Records are plain dicts keyed by (collection, key).
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, List, Optional

Record = Dict[str, Any]
Predicate = Callable[[Record], bool]


class RecordStore(ABC):
    """
    Abstract keyed storage with simple predicate filtering.

    Implementations must return copies: mutating a returned record never
    changes stored state until it is written back with put().
    """

    backend_name: str = "abstract"

    @abstractmethod
    def get(self, collection: str, key: str) -> Optional[Record]:
        """Return the record stored under key, or None."""
        pass

    @abstractmethod
    def put(self, collection: str, key: str, record: Record) -> None:
        """Create or fully replace the record stored under key."""
        pass

    @abstractmethod
    def delete(self, collection: str, key: str) -> bool:
        """
        Remove the record stored under key.

        Returns:
            True if a record existed, False otherwise
        """
        pass

    @abstractmethod
    def list(
        self,
        collection: str,
        where: Optional[Dict[str, Any]] = None,
        predicate: Optional[Predicate] = None,
    ) -> List[Record]:
        """
        List records in a collection.

        Args:
            collection: Collection name
            where: Exact-match filters {field: value}; None values are ignored
            predicate: Optional extra filter evaluated per record

        Returns:
            Matching records in no particular order
        """
        pass

    @abstractmethod
    def ping(self) -> Dict[str, Any]:
        """Lightweight connectivity check used by /health/db."""
        pass


def matches(record: Record, where: Optional[Dict[str, Any]]) -> bool:
    """Check a record against exact-match filters, skipping None and empty filter values."""
    if not where:
        return True
    for field, value in where.items():
        if value is None or value == "":
            continue
        if record.get(field) != value:
            return False
    return True


# Collection names shared by the services
ISSUES_COLLECTION = "issues"
COMMENTS_COLLECTION = "comments"
