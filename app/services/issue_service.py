"""
Issue service - lifecycle rules for citizen-reported issues.

DESIGN NOTE:
- Creation validates citizen input, forces status "new" and never runs AI inline
- AI classification is a separate background step (classify_issue) that only
  fills AI fields while they are still empty
- Updates are explicit partial merges validated against the same vocabularies
- Listing filters by exact match, sorts newest first, then paginates
"""

from pydantic import ValidationError as PydanticValidationError
from app.core.exceptions import NotFoundError, ValidationError
from app.models.issue import Issue, IssueCreate, IssueFilters, IssueStatus, IssueUpdate
from app.services.classification import ClassificationRegistry, get_classification_registry
from app.storage import RecordStore, get_record_store
from app.storage.base import COMMENTS_COLLECTION, ISSUES_COLLECTION
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Union
import logging
import uuid

logger = logging.getLogger(__name__)

# Fields that always hold a value once an issue exists
NON_NULLABLE_FIELDS = {
    "title", "description", "category", "priority",
    "status", "state", "district", "location",
}


# Sort position for records that carry no created_at
EPOCH = datetime.min.replace(tzinfo=timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def newest_first_key(record: Dict[str, Any]):
    return (record.get("created_at") or EPOCH, record.get("id") or "")


def refreshed_updated_at(now: datetime, record: Dict[str, Any]) -> datetime:
    """updated_at never precedes created_at."""
    created_at = record.get("created_at")
    return max(now, created_at) if created_at else now


def format_validation_error(error: PydanticValidationError) -> str:
    """Flatten pydantic errors into one readable line."""
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err.get("loc", ())) or "body"
        parts.append(f"{field}: {err.get('msg', 'invalid value')}")
    return "; ".join(parts)


def parse_issue_create(data: Union[IssueCreate, Dict[str, Any]]) -> IssueCreate:
    """
    Validate citizen input for a new issue.

    Raises:
        ValidationError: Missing text fields or values outside the vocabularies
    """
    if isinstance(data, IssueCreate):
        return data
    try:
        return IssueCreate.model_validate(data or {})
    except PydanticValidationError as e:
        raise ValidationError(f"Invalid issue: {format_validation_error(e)}")


class IssueService:
    """
    Service for issue creation, triage and querying.
    """

    def __init__(
        self,
        store: Optional[RecordStore] = None,
        classifier: Optional[ClassificationRegistry] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        self.store = store if store is not None else get_record_store()
        self._classifier = classifier
        self.clock = clock

    @property
    def classifier(self) -> ClassificationRegistry:
        if self._classifier is None:
            self._classifier = get_classification_registry()
        return self._classifier

    def create_issue(
        self,
        data: Union[IssueCreate, Dict[str, Any]],
        image_url: Optional[str] = None
    ) -> Issue:
        """
        Create a new issue from citizen input.

        Flow:
        1. Validate input (nothing is written if this fails)
        2. Assign id, force status "new", stamp both timestamps
        3. Persist and return the record

        Classification is NOT done here; callers schedule classify_issue()
        so a slow or failing classifier can never block submission.

        Raises:
            ValidationError: Missing text fields or values outside the vocabularies
        """
        payload = parse_issue_create(data)

        now = self.clock()
        issue_id = uuid.uuid4().hex
        record = {
            "id": issue_id,
            "title": payload.title,
            "description": payload.description,
            "category": payload.category,
            "priority": payload.priority,
            "status": IssueStatus.NEW.value,
            "state": payload.state,
            "district": payload.district,
            "location": payload.location,
            "coordinates": payload.coordinates.model_dump() if payload.coordinates else None,
            "image_url": image_url or payload.image_url,
            "reported_by": payload.reported_by,
            "assigned_to": None,
            "ai_category": None,
            "ai_confidence": None,
            "created_at": now,
            "updated_at": now,
        }

        self.store.put(ISSUES_COLLECTION, issue_id, record)
        logger.info(f"Issue created: {issue_id} (category={record['category']}, priority={record['priority']})")
        return Issue.model_validate(record)

    def get_issue(self, issue_id: str) -> Issue:
        """
        Raises:
            NotFoundError: If the issue does not exist
        """
        record = self.store.get(ISSUES_COLLECTION, issue_id)
        if record is None:
            raise NotFoundError("issue", issue_id)
        return Issue.model_validate(record)

    def issue_exists(self, issue_id: str) -> bool:
        return self.store.get(ISSUES_COLLECTION, issue_id) is not None

    def update_issue(self, issue_id: str, updates: Union[IssueUpdate, Dict[str, Any]]) -> Issue:
        """
        Apply a partial update (admin workflow action).

        Only fields present in the update are merged; updated_at is always
        refreshed. Status, category and priority must come from their
        vocabularies, and required fields cannot be cleared.

        Raises:
            NotFoundError: Unknown issue id (nothing is written)
            ValidationError: Invalid field values (nothing is written)
        """
        record = self.store.get(ISSUES_COLLECTION, issue_id)
        if record is None:
            raise NotFoundError("issue", issue_id)

        if isinstance(updates, IssueUpdate):
            update = updates
        else:
            try:
                update = IssueUpdate.model_validate(updates or {})
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid update: {format_validation_error(e)}")

        changes = update.model_dump(exclude_unset=True)
        cleared = sorted(field for field, value in changes.items() if value is None and field in NON_NULLABLE_FIELDS)
        if cleared:
            raise ValidationError(f"Fields cannot be cleared: {', '.join(cleared)}")

        record.update(changes)
        record["updated_at"] = refreshed_updated_at(self.clock(), record)

        self.store.put(ISSUES_COLLECTION, issue_id, record)
        logger.info(f"Issue {issue_id} updated: {sorted(changes)}")
        return Issue.model_validate(record)

    def delete_issue(self, issue_id: str) -> bool:
        """
        Delete an issue and its comments.

        Returns:
            True if the issue existed
        """
        existed = self.store.delete(ISSUES_COLLECTION, issue_id)
        if not existed:
            return False

        comments = self.store.list(COMMENTS_COLLECTION, where={"issue_id": issue_id})
        for comment in comments:
            self.store.delete(COMMENTS_COLLECTION, comment["id"])

        logger.info(f"Issue {issue_id} deleted with {len(comments)} comment(s)")
        return True

    def list_issues(self, filters: Union[IssueFilters, Dict[str, Any], None] = None) -> List[Issue]:
        """
        List issues matching exact-match filters.

        Sorted by created_at descending (ties broken by id), then
        offset/limit are applied. No limit returns every match.
        """
        if filters is None:
            filters = IssueFilters()
        elif not isinstance(filters, IssueFilters):
            try:
                filters = IssueFilters.model_validate(filters)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid filters: {format_validation_error(e)}")

        where = {
            "state": filters.state,
            "district": filters.district,
            "category": filters.category,
            "status": filters.status,
        }
        records = self.store.list(ISSUES_COLLECTION, where=where)
        records.sort(key=newest_first_key, reverse=True)

        start = filters.offset
        end = start + filters.limit if filters.limit is not None else None
        return self._to_issues(records[start:end])

    def list_issues_by_reporter(self, user_id: str) -> List[Issue]:
        """Issues submitted by one user, newest first."""
        records = self.store.list(ISSUES_COLLECTION, where={"reported_by": user_id})
        records.sort(key=newest_first_key, reverse=True)
        return self._to_issues(records)

    def _to_issues(self, records: List[Dict[str, Any]]) -> List[Issue]:
        """Shape stored records, skipping documents that are missing required fields."""
        issues = []
        for record in records:
            try:
                issues.append(Issue.model_validate(record))
            except PydanticValidationError as e:
                logger.warning(f"Skipping unreadable issue record {record.get('id')}: {format_validation_error(e)}")
        return issues

    def classify_issue(self, issue_id: str) -> Optional[Issue]:
        """
        Background step: attach an AI category suggestion to an issue.

        Idempotent. AI fields are written only if the classifier succeeded
        and the issue still has no AI fields, so retries or late results
        never overwrite an earlier value. Never raises.

        Returns:
            The stored issue after the attempt, or None if it no longer exists
        """
        try:
            record = self.store.get(ISSUES_COLLECTION, issue_id)
            if record is None:
                logger.info(f"Skipping classification: issue {issue_id} no longer exists")
                return None

            if record.get("ai_category") is not None or record.get("ai_confidence") is not None:
                logger.info(f"Skipping classification: issue {issue_id} already classified")
                return Issue.model_validate(record)

            result = self.classifier.categorize(record["title"], record["description"])
            if result.fallback:
                logger.warning(f"⚠️ Issue {issue_id} stored without AI classification: {result.error}")
                return Issue.model_validate(record)

            # Re-read: the issue may have changed while the classifier was running
            latest = self.store.get(ISSUES_COLLECTION, issue_id)
            if latest is None:
                return None
            if latest.get("ai_category") is not None or latest.get("ai_confidence") is not None:
                return Issue.model_validate(latest)

            latest["ai_category"] = result.category
            latest["ai_confidence"] = result.confidence
            latest["updated_at"] = refreshed_updated_at(self.clock(), latest)
            self.store.put(ISSUES_COLLECTION, issue_id, latest)

            logger.info(f"✅ AI classification added to issue {issue_id}: {result.category} ({result.confidence}%)")
            return Issue.model_validate(latest)

        except Exception as e:
            logger.error(f"⚠️ AI classification failed for issue {issue_id}: {e}", exc_info=True)
            return None


# Global service instance
_issue_service = None


def get_issue_service() -> IssueService:
    """Get or create IssueService singleton."""
    global _issue_service
    if _issue_service is None:
        _issue_service = IssueService()
    return _issue_service
