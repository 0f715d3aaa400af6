"""
Pydantic models for review projects.
"""

from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel, Field

from .annotation import Annotation


class ProjectCreate(BaseModel):
    """Request model for creating a project from a YouTube link."""
    youtube_url: str = Field(..., min_length=1)


class ProjectCreated(BaseModel):
    """Response returned by the API after creating a project."""
    project_id: str
    share_url: str


class Project(BaseModel):
    """Project metadata."""
    id: str
    youtube_url: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ProjectDetail(BaseModel):
    """A project together with its annotations, sorted by timecode."""
    project: Project
    annotations: List[Annotation] = []
