"""
Pydantic models for comments on issues.
"""

from pydantic import Field
from datetime import datetime
from typing import Optional

from app.models.base import CamelModel


class CommentCreate(CamelModel):
    """Body of POST /api/issues/{id}/comments."""
    content: str = Field(..., description="Comment text")
    is_internal: bool = Field(default=False, description="Staff-only note when true")
    user_id: Optional[str] = Field(None, description="Author id, if known")


class Comment(CamelModel):
    id: str
    issue_id: str
    user_id: Optional[str] = None
    content: str
    is_internal: bool = False
    created_at: datetime
