"""
Analytics endpoints - aggregate issue statistics for the admin dashboard.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import StorageFailure
from app.models.issue import IssueStats
from app.services.analytics_service import AnalyticsService, get_analytics_service

router = APIRouter(prefix="/api/analytics", tags=["Analytics"])


@router.get("/stats", response_model=IssueStats)
async def get_stats(service: AnalyticsService = Depends(get_analytics_service)):
    """
    Issue counts: total, byStatus, byCategory, byPriority.
    Recomputed on every call.
    """
    try:
        return service.get_issue_stats()
    except StorageFailure as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch stats: {str(e)}"
        )
