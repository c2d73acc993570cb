"""
Issue endpoints - submission, triage and comments.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from fastapi import (
    APIRouter,
    BackgroundTasks,
    Body,
    Depends,
    File,
    Form,
    HTTPException,
    Query,
    UploadFile,
    status,
)

from app.core.exceptions import NotFoundError, StorageFailure, ValidationError
from app.models.comment import Comment, CommentCreate
from app.models.issue import Issue, IssueFilters
from app.services.comment_service import CommentService, get_comment_service
from app.services.issue_service import IssueService, get_issue_service, parse_issue_create
from app.services.media_service import MediaService, get_media_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Issues"])


def _parse_coordinates(raw: Optional[str]) -> Optional[Dict[str, Any]]:
    """Multipart forms carry coordinates as a JSON string: {"lat": .., "lng": ..}"""
    if raw is None or not raw.strip():
        return None
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        raise ValidationError("coordinates must be a JSON object like {\"lat\": 0, \"lng\": 0}")
    if not isinstance(value, dict):
        raise ValidationError("coordinates must be a JSON object like {\"lat\": 0, \"lng\": 0}")
    return value


@router.get("/issues", response_model=List[Issue])
async def list_issues(
    state: Optional[str] = Query(None, description="Filter by state"),
    district: Optional[str] = Query(None, description="Filter by district"),
    category: Optional[str] = Query(None, description="Filter by category"),
    status_filter: Optional[str] = Query(None, alias="status", description="Filter by status"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of issues"),
    offset: int = Query(0, ge=0, description="Number of issues to skip"),
    service: IssueService = Depends(get_issue_service),
):
    """
    List issues, newest first.
    Filters are exact matches; pagination applies after filtering and sorting.
    """
    try:
        filters = IssueFilters(
            state=state,
            district=district,
            category=category,
            status=status_filter,
            limit=limit,
            offset=offset,
        )
        return service.list_issues(filters)
    except StorageFailure as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to fetch issues: {str(e)}"
        )


@router.get("/issues/{issue_id}", response_model=Issue)
async def get_issue(issue_id: str, service: IssueService = Depends(get_issue_service)):
    try:
        return service.get_issue(issue_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/issues", response_model=Issue, status_code=status.HTTP_201_CREATED)
async def submit_issue(
    background_tasks: BackgroundTasks,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    priority: Optional[str] = Form(None),
    state: Optional[str] = Form(None),
    district: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    coordinates: Optional[str] = Form(None),
    reported_by: Optional[str] = Form(None, alias="reportedBy"),
    image: Optional[UploadFile] = File(None),
    service: IssueService = Depends(get_issue_service),
    media: MediaService = Depends(get_media_service),
):
    """
    Submit a new civic issue (multipart/form-data, optional "image" part).

    This endpoint:
    1. Validates the form fields
    2. Stores the image, if one was attached
    3. Creates the issue with status "new"
    4. Schedules AI classification after the response is sent

    Classification problems never affect the response.
    """
    logger.info(f"📝 POST /api/issues - Creating issue: category={category}, state={state}, district={district}")

    try:
        payload = parse_issue_create({
            "title": title,
            "description": description,
            "category": category,
            "priority": priority,
            "state": state,
            "district": district,
            "location": location,
            "coordinates": _parse_coordinates(coordinates),
            "reported_by": reported_by,
        })

        image_url = None
        if image is not None and image.filename:
            try:
                data = await image.read()
            finally:
                await image.close()
            image_url = media.save_image(data, image.filename, image.content_type)

        issue = service.create_issue(payload, image_url=image_url)

    except ValidationError as e:
        logger.warning(f"POST /api/issues rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (StorageFailure, OSError) as e:
        logger.error(f"❌ POST /api/issues - Issue creation failed: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Issue creation failed: {str(e)}"
        )

    background_tasks.add_task(service.classify_issue, issue.id)
    logger.info(f"✅ Issue created successfully: {issue.id}")
    return issue


@router.patch("/issues/{issue_id}", response_model=Issue)
async def update_issue(
    issue_id: str,
    updates: Dict[str, Any] = Body(..., description="Partial issue fields (status, assignedTo, ...)"),
    service: IssueService = Depends(get_issue_service),
):
    """
    Apply a partial administrative update.
    Status, category and priority must use their fixed vocabularies.
    """
    try:
        return service.update_issue(issue_id, updates)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except StorageFailure as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to update issue: {str(e)}"
        )


@router.delete("/issues/{issue_id}")
async def delete_issue(issue_id: str, service: IssueService = Depends(get_issue_service)):
    """Delete an issue together with its comments."""
    try:
        deleted = service.delete_issue(issue_id)
    except StorageFailure as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to delete issue: {str(e)}"
        )

    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Issue {issue_id} not found")
    return {"success": True}


@router.get("/issues/{issue_id}/comments", response_model=List[Comment])
async def list_comments(
    issue_id: str,
    include_internal: bool = Query(True, alias="includeInternal", description="Include staff-only notes"),
    comments: CommentService = Depends(get_comment_service),
):
    """Comments on an issue, oldest first."""
    return comments.list_comments(issue_id, include_internal=include_internal)


@router.post("/issues/{issue_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def add_comment(
    issue_id: str,
    request: CommentCreate,
    comments: CommentService = Depends(get_comment_service),
):
    try:
        return comments.add_comment(
            issue_id=issue_id,
            content=request.content,
            is_internal=request.is_internal,
            user_id=request.user_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/users/{user_id}/issues", response_model=List[Issue])
async def list_user_issues(user_id: str, service: IssueService = Depends(get_issue_service)):
    """Issues submitted by one user, newest first."""
    return service.list_issues_by_reporter(user_id)
