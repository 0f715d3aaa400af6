"""
Pydantic models for the timeline render and expansion endpoints.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .annotation import Annotation, AnnotationStatus


class TimelineRequest(BaseModel):
    """Annotations to lay out plus the video duration, if the player knows it."""
    annotations: List[Annotation] = []
    duration: Optional[float] = Field(None, description="Video duration in seconds")


class ExpandRequest(TimelineRequest):
    """Timeline input plus the cluster to expand."""
    cluster_index: int = Field(..., ge=0)


class MemberData(BaseModel):
    """Per-annotation data stored with a rendered cluster."""
    id: str
    timecode: float
    status: AnnotationStatus
    author: str
    text: str


class ClusterData(BaseModel):
    position: float
    annotations: List[MemberData]


class MarkerResponse(BaseModel):
    """A plain marker or a cluster badge on the timeline."""
    kind: str = Field(..., description="'marker' or 'cluster'")
    cluster_index: int
    position: float
    color: str
    title: str
    count: int = 1
    annotation_id: Optional[str] = None
    timecode: Optional[float] = None


class TimelineResponse(BaseModel):
    max_time: float
    markers: List[MarkerResponse]
    clusters: List[ClusterData]


class DotResponse(BaseModel):
    annotation_id: str
    timecode: float
    color: str
    tooltip: str
    offset_x: float
    offset_y: float


class OverlayResponse(BaseModel):
    cluster_index: int
    center_position: float
    radius: float
    width: float
    height: float
    dots: List[DotResponse]
