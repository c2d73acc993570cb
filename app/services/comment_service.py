"""
Comment Service - Handle comments on issues.
"""

from app.core.exceptions import NotFoundError, ValidationError
from app.models.comment import Comment
from app.storage import RecordStore, get_record_store
from app.storage.base import COMMENTS_COLLECTION, ISSUES_COLLECTION
from datetime import datetime, timezone
from typing import Callable, List, Optional
import logging
import uuid

logger = logging.getLogger(__name__)


class CommentService:
    """Service for managing comments on issues."""

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.store = store if store is not None else get_record_store()
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def add_comment(
        self,
        issue_id: str,
        content: str,
        is_internal: bool = False,
        user_id: Optional[str] = None
    ) -> Comment:
        """
        Add a comment to an issue.

        Args:
            issue_id: Issue to comment on
            content: Comment text
            is_internal: Staff-only note when True
            user_id: Optional author id

        Raises:
            ValidationError: Blank content
            NotFoundError: Unknown issue
        """
        content = (content or "").strip()
        if not content:
            raise ValidationError("Comment content cannot be empty")

        if self.store.get(ISSUES_COLLECTION, issue_id) is None:
            raise NotFoundError("issue", issue_id)

        comment_id = uuid.uuid4().hex
        record = {
            "id": comment_id,
            "issue_id": issue_id,
            "user_id": user_id,
            "content": content,
            "is_internal": bool(is_internal),
            "created_at": self.clock(),
        }
        self.store.put(COMMENTS_COLLECTION, comment_id, record)

        logger.info(f"Comment {comment_id} added to issue {issue_id} (internal={record['is_internal']})")
        return Comment.model_validate(record)

    def list_comments(self, issue_id: str, include_internal: bool = True) -> List[Comment]:
        """
        Get comments for an issue, oldest first.

        Args:
            include_internal: When False, staff-only notes are left out
        """
        where = {"issue_id": issue_id}
        if not include_internal:
            where["is_internal"] = False

        records = self.store.list(COMMENTS_COLLECTION, where=where)
        records.sort(key=lambda r: (r["created_at"], r["id"]))
        return [Comment.model_validate(r) for r in records]


# Global service instance
_comment_service = None


def get_comment_service() -> CommentService:
    """Get or create CommentService singleton."""
    global _comment_service
    if _comment_service is None:
        _comment_service = CommentService()
    return _comment_service
