"""
Activity logging for review operations.

Records annotation changes and timeline events so a project's review
history can be reconstructed from the logs.
"""

import logging
from typing import Optional

# Configure activity logger
activity_logger = logging.getLogger("activity")
activity_logger.setLevel(logging.INFO)

# Create handler if not already configured
if not activity_logger.handlers:
    handler = logging.StreamHandler()
    formatter = logging.Formatter(
        '%(asctime)s - ACTIVITY - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    activity_logger.addHandler(handler)


class ActivityLogger:
    """
    Centralized activity logging for review events.

    Every confirmed or failed annotation change should be logged here.
    """

    @staticmethod
    def log_annotation_event(
        event_type: str,
        project_id: Optional[str],
        annotation_id: Optional[str],
        success: bool,
        details: Optional[str] = None
    ):
        """
        Log annotation events.

        Args:
            event_type: Type of event (create, delete, status)
            project_id: Project the annotation belongs to
            annotation_id: Annotation ID if known
            success: Whether the API confirmed the change
            details: Additional details about the event
        """
        status = "SUCCESS" if success else "FAILURE"

        message = (
            f"ANNOTATION_EVENT | {event_type.upper()} | {status} | "
            f"project_id={project_id or 'N/A'} | annotation_id={annotation_id or 'N/A'}"
        )

        if details:
            message += f" | details={details}"

        if success:
            activity_logger.info(message)
        else:
            activity_logger.warning(message)

    @staticmethod
    def log_status_change(
        project_id: Optional[str],
        annotation_id: str,
        old_status: str,
        new_status: str
    ):
        """Log a status transition that has been applied locally."""
        message = (
            f"STATUS_CHANGE | project_id={project_id or 'N/A'} | "
            f"annotation_id={annotation_id} | {old_status} -> {new_status}"
        )
        activity_logger.info(message)

    @staticmethod
    def log_timeline_event(
        event_type: str,
        project_id: Optional[str],
        details: Optional[str] = None
    ):
        """
        Log timeline events.

        Args:
            event_type: Type of event (load, duration)
            project_id: Project being reviewed
            details: Additional details
        """
        message = f"TIMELINE_EVENT | {event_type.upper()} | project_id={project_id or 'N/A'}"

        if details:
            message += f" | details={details}"

        activity_logger.info(message)


# Convenience functions
def log_annotation_event(
    event_type: str,
    project_id: Optional[str],
    annotation_id: Optional[str],
    success: bool,
    details: Optional[str] = None
):
    """Convenience wrapper for ActivityLogger.log_annotation_event."""
    ActivityLogger.log_annotation_event(event_type, project_id, annotation_id, success, details)


def log_status_change(
    project_id: Optional[str],
    annotation_id: str,
    old_status: str,
    new_status: str
):
    """Convenience wrapper for ActivityLogger.log_status_change."""
    ActivityLogger.log_status_change(project_id, annotation_id, old_status, new_status)


def log_timeline_event(
    event_type: str,
    project_id: Optional[str],
    details: Optional[str] = None
):
    """Convenience wrapper for ActivityLogger.log_timeline_event."""
    ActivityLogger.log_timeline_event(event_type, project_id, details)
