"""
Analytics Service - aggregate statistics over all issues.

Stats are recomputed from the current store snapshot on every call.
"""

from app.models.issue import IssueCategory, IssuePriority, IssueStats, IssueStatus
from app.storage import RecordStore, get_record_store
from app.storage.base import ISSUES_COLLECTION
from typing import Dict, List, Optional
from collections import defaultdict
import logging

logger = logging.getLogger(__name__)

DEFAULT_STATUS = IssueStatus.NEW.value
DEFAULT_CATEGORY = IssueCategory.OTHER.value
DEFAULT_PRIORITY = IssuePriority.LOW.value


class AnalyticsService:
    """Service for issue statistics."""

    def __init__(self, store: Optional[RecordStore] = None):
        self.store = store if store is not None else get_record_store()

    def get_issue_stats(self) -> IssueStats:
        """
        Count issues by status, category and priority.

        Missing values are counted under the defaults
        (status=new, category=other, priority=low).
        """
        issues = self.store.list(ISSUES_COLLECTION)

        stats = IssueStats(
            total=len(issues),
            by_status=self._get_distribution(issues, "status", DEFAULT_STATUS),
            by_category=self._get_distribution(issues, "category", DEFAULT_CATEGORY),
            by_priority=self._get_distribution(issues, "priority", DEFAULT_PRIORITY),
        )
        logger.debug(f"Computed stats over {stats.total} issues")
        return stats

    def _get_distribution(self, issues: List[Dict], field: str, default: str) -> Dict[str, int]:
        distribution = defaultdict(int)
        for issue in issues:
            distribution[issue.get(field) or default] += 1
        return dict(distribution)


# Global service instance
_analytics_service = None


def get_analytics_service() -> AnalyticsService:
    """Get or create AnalyticsService singleton."""
    global _analytics_service
    if _analytics_service is None:
        _analytics_service = AnalyticsService()
    return _analytics_service
