"""
Pydantic models for civic issues.
These models hold the fixed vocabularies and validate issue input.
"""

from pydantic import Field
from datetime import datetime
from typing import Dict, Optional
from enum import Enum

from app.models.base import CamelModel


class IssueCategory(str, Enum):
    """Categories a citizen (or the classifier) can file an issue under."""
    ROADS = "roads"
    SANITATION = "sanitation"
    ELECTRICITY = "electricity"
    WATER = "water"
    TRAFFIC = "traffic"
    ENVIRONMENT = "environment"
    OTHER = "other"


class IssuePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class IssueStatus(str, Enum):
    """
    Administrative status of an issue.
    Every issue starts as NEW; staff move it through the rest.
    """
    NEW = "new"
    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


CATEGORY_VALUES = [category.value for category in IssueCategory]
PRIORITY_VALUES = [priority.value for priority in IssuePriority]
STATUS_VALUES = [status.value for status in IssueStatus]


class Coordinates(CamelModel):
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")


class IssueCreate(CamelModel):
    """
    Fields a citizen provides when submitting an issue.
    Status and AI fields are deliberately absent: they are system-managed.
    """
    title: str = Field(..., min_length=1, description="Short summary of the problem")
    description: str = Field(..., min_length=1, description="What the citizen observed")
    category: IssueCategory = Field(..., description="Citizen-selected category")
    priority: IssuePriority = Field(..., description="Citizen-selected priority")
    state: str = Field(..., min_length=1, description="State / administrative region")
    district: str = Field(..., min_length=1, description="District within the state")
    location: str = Field(..., min_length=1, description="Free-text location description")
    coordinates: Optional[Coordinates] = Field(None, description="Optional GPS position")
    image_url: Optional[str] = Field(None, description="Locator returned by the media processor")
    reported_by: Optional[str] = Field(None, description="Reporting user id, if known")

    class Config:
        use_enum_values = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "title": "Large pothole near bus stand",
                "description": "Deep pothole in the left lane, two-wheelers are swerving into traffic.",
                "category": "roads",
                "priority": "high",
                "state": "kerala",
                "district": "ernakulam",
                "location": "MG Road, opposite KSRTC bus stand",
                "coordinates": {"lat": 9.9816, "lng": 76.2999},
            }
        }


class IssueUpdate(CamelModel):
    """
    Partial update applied by administrative callers.
    Every field is optional; only the fields actually sent are merged.
    """
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    category: Optional[IssueCategory] = None
    priority: Optional[IssuePriority] = None
    status: Optional[IssueStatus] = None
    state: Optional[str] = Field(None, min_length=1)
    district: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    coordinates: Optional[Coordinates] = None
    image_url: Optional[str] = None
    assigned_to: Optional[str] = Field(None, description="Department handling the issue")

    class Config:
        use_enum_values = True
        extra = "ignore"
        json_schema_extra = {
            "example": {
                "status": "in_progress",
                "assignedTo": "Public Works Department",
            }
        }


class Issue(CamelModel):
    """
    Stored issue as returned by the API.
    """
    id: str = Field(..., description="Opaque identifier")
    title: str
    description: str
    category: str
    priority: str
    status: str = Field(default=IssueStatus.NEW.value)
    state: str
    district: str
    location: str
    coordinates: Optional[Coordinates] = None
    image_url: Optional[str] = None
    reported_by: Optional[str] = None
    assigned_to: Optional[str] = None
    ai_category: Optional[str] = Field(None, description="Classifier suggestion (advisory only)")
    ai_confidence: Optional[int] = Field(None, ge=0, le=100, description="Classifier confidence 0-100")
    # Documents written outside the service may lack timestamps
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class IssueFilters(CamelModel):
    """Exact-match filters and pagination for listing issues."""
    state: Optional[str] = None
    district: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    limit: Optional[int] = Field(None, ge=1)
    offset: int = Field(0, ge=0)


class IssueStats(CamelModel):
    total: int = 0
    by_status: Dict[str, int] = Field(default_factory=dict)
    by_category: Dict[str, int] = Field(default_factory=dict)
    by_priority: Dict[str, int] = Field(default_factory=dict)
