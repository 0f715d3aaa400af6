"""
Utility modules for the review application.
"""

from .activity_log import (
    ActivityLogger,
    log_annotation_event,
    log_status_change,
    log_timeline_event
)
from .youtube import is_valid_youtube_url, extract_video_id, format_time

__all__ = [
    "ActivityLogger",
    "log_annotation_event",
    "log_status_change",
    "log_timeline_event",
    "is_valid_youtube_url",
    "extract_video_id",
    "format_time"
]
