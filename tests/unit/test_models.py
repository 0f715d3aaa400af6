"""
Unit tests for Pydantic model validation.
"""

import pytest
from pydantic import ValidationError

from ytreview.models.annotation import Annotation, AnnotationCreate, AnnotationStatus, StatusUpdate
from ytreview.models.project import ProjectDetail


@pytest.mark.unit
class TestAnnotationValidation:
    """Test annotation records and legacy status handling."""

    def test_default_status_is_pending(self):
        """Test default status is pending."""
        annotation = Annotation(id="1", author="A", text="t", timecode=0)
        assert annotation.status == AnnotationStatus.PENDING

    @pytest.mark.parametrize("resolved,expected", [
        (1, AnnotationStatus.ACCEPTED),
        (True, AnnotationStatus.ACCEPTED),
        (0, AnnotationStatus.PENDING),
        (False, AnnotationStatus.PENDING),
    ])
    def test_legacy_resolved_flag(self, resolved, expected):
        """Test legacy resolved flag."""
        annotation = Annotation.model_validate(
            {"id": "1", "author": "A", "text": "t", "timecode": 5, "resolved": resolved}
        )
        assert annotation.status == expected

    def test_status_wins_over_resolved(self):
        """Test status wins over resolved."""
        annotation = Annotation.model_validate(
            {"id": "1", "author": "A", "text": "t", "timecode": 5, "resolved": 1, "status": 2}
        )
        assert annotation.status == AnnotationStatus.REJECTED

    def test_null_status_falls_back_to_resolved(self):
        """Test null status falls back to resolved."""
        annotation = Annotation.model_validate(
            {"id": "1", "author": "A", "text": "t", "timecode": 5, "resolved": 1, "status": None}
        )
        assert annotation.status == AnnotationStatus.ACCEPTED

    def test_status_by_name(self):
        """Test status by name."""
        annotation = Annotation.model_validate(
            {"id": "1", "author": "A", "text": "t", "timecode": 5, "status": "accepted"}
        )
        assert annotation.status == AnnotationStatus.ACCEPTED

    def test_unknown_status(self):
        """Test unknown status."""
        with pytest.raises(ValidationError):
            Annotation.model_validate({"id": "1", "author": "A", "text": "t", "timecode": 5, "status": 7})

    def test_negative_timecode(self):
        """Test negative timecode."""
        with pytest.raises(ValidationError) as exc_info:
            Annotation(id="1", author="A", text="t", timecode=-1)

        assert "timecode" in str(exc_info.value)

    def test_label(self):
        """Test the tooltip label."""
        assert Annotation(id="1", author="Ann", text="Hi", timecode=0).label == "Ann: Hi"


@pytest.mark.unit
class TestRequestValidation:
    """Test request models."""

    def test_annotation_create_requires_author(self):
        """Test annotation create requires author."""
        with pytest.raises(ValidationError) as exc_info:
            AnnotationCreate(author="", text="hello", timecode=1)

        assert "author" in str(exc_info.value)

    def test_status_update(self):
        """Test the status update body."""
        assert StatusUpdate(status=2).status == AnnotationStatus.REJECTED

    def test_project_detail_parses_server_payload(self):
        """Test project detail parses server payload."""
        detail = ProjectDetail.model_validate({
            "project": {"id": "p1", "youtube_url": "https://youtu.be/abc", "created_at": "2024-05-01T10:00:00"},
            "annotations": [{"id": "a", "project_id": "p1", "author": "A", "text": "t", "timecode": 3, "resolved": 0}],
        })
        assert detail.project.id == "p1"
        assert detail.annotations[0].status == AnnotationStatus.PENDING
