"""
Pydantic models for request/response validation.
"""

from .annotation import (
    AnnotationStatus,
    Annotation,
    AnnotationCreate,
    StatusUpdate
)

from .project import (
    ProjectCreate,
    ProjectCreated,
    Project,
    ProjectDetail
)

from .timeline import (
    TimelineRequest,
    ExpandRequest,
    MemberData,
    ClusterData,
    MarkerResponse,
    TimelineResponse,
    DotResponse,
    OverlayResponse
)

__all__ = [
    # Annotation models
    "AnnotationStatus",
    "Annotation",
    "AnnotationCreate",
    "StatusUpdate",

    # Project models
    "ProjectCreate",
    "ProjectCreated",
    "Project",
    "ProjectDetail",

    # Timeline models
    "TimelineRequest",
    "ExpandRequest",
    "MemberData",
    "ClusterData",
    "MarkerResponse",
    "TimelineResponse",
    "DotResponse",
    "OverlayResponse"
]
