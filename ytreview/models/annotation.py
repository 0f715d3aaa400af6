"""
Pydantic models for annotation records, requests and responses.

Records coming from the annotation API may still carry the legacy boolean
``resolved`` flag instead of ``status``. The flag is folded into ``status``
during validation so nothing downstream ever looks at ``resolved``.
"""

from enum import IntEnum
from typing import Any, Optional
from datetime import datetime
from pydantic import BaseModel, Field, model_validator


class AnnotationStatus(IntEnum):
    """Review status, using the integer codes of the annotation API."""
    PENDING = 0
    ACCEPTED = 1
    REJECTED = 2

    @classmethod
    def from_resolved(cls, resolved: Any) -> "AnnotationStatus":
        """Map the legacy ``resolved`` flag: truthy is Accepted, anything else Pending."""
        return cls.ACCEPTED if resolved else cls.PENDING

    @classmethod
    def parse(cls, value: Any) -> "AnnotationStatus":
        """
        Accept an enum member, its integer code or its name.

        Raises:
            ValueError: if the value names no status
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().upper()
            if key in cls.__members__:
                return cls[key]
            if key.isdigit():
                return cls(int(key))
            raise ValueError(f"Unknown status: {value!r}")
        if isinstance(value, bool):
            raise ValueError(f"Unknown status: {value!r}")
        return cls(value)


class Annotation(BaseModel):
    """A timestamped comment on the project video."""
    id: str
    author: str
    text: str
    timecode: float = Field(..., ge=0, description="Playback position in seconds")
    status: AnnotationStatus = AnnotationStatus.PENDING
    project_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_status(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        data = dict(data)
        resolved = data.pop("resolved", None)
        if data.get("status") is None:
            data["status"] = AnnotationStatus.from_resolved(resolved)
        else:
            data["status"] = AnnotationStatus.parse(data["status"])
        return data

    @property
    def label(self) -> str:
        """Tooltip text shared by markers and expansion dots."""
        return f"{self.author}: {self.text}"

    class Config:
        from_attributes = True


class AnnotationCreate(BaseModel):
    """Request model for adding an annotation to a project."""
    author: str = Field(..., min_length=1, max_length=100)
    text: str = Field(..., min_length=1, max_length=5000)
    timecode: float = Field(..., ge=0)


class StatusUpdate(BaseModel):
    """Request model for changing an annotation's review status."""
    status: AnnotationStatus
