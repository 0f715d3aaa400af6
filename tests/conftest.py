"""
Pytest configuration and fixtures for testing.

Provides fixtures for:
- Annotation factories
- A FastAPI test client for the timeline endpoints
- Fake player and annotation API doubles for session tests
"""

import os
import uuid
from typing import Callable, Dict, List, Optional
import pytest
from fastapi.testclient import TestClient

# Set test environment variables before importing app
os.environ["ANNOTATION_API_URL"] = "http://annotations.test"
os.environ["DURATION_POLL_INTERVAL"] = "0.01"

from ytreview.app import app
from ytreview.errors import NotFound, NetworkFailure
from ytreview.models.annotation import Annotation, AnnotationStatus
from ytreview.models.project import Project, ProjectDetail


def make_annotation(
    timecode: float,
    status: AnnotationStatus = AnnotationStatus.PENDING,
    author: str = "Alice",
    text: Optional[str] = None,
    annotation_id: Optional[str] = None
) -> Annotation:
    return Annotation(
        id=annotation_id or str(uuid.uuid4()),
        author=author,
        text=text or f"note at {timecode}",
        timecode=timecode,
        status=status
    )


@pytest.fixture
def annotation_factory() -> Callable[..., Annotation]:
    return make_annotation


@pytest.fixture
def client():
    """Create a test client for the FastAPI app."""
    with TestClient(app) as test_client:
        yield test_client


class FakePlayer:
    """Stands in for the embedded YouTube player."""

    def __init__(self, current_time: Optional[float] = 0.0, duration: Optional[float] = 0.0):
        self.current_time = current_time
        self.duration = duration
        self.seeks: List[float] = []
        self.play_calls = 0

    def get_current_time(self) -> Optional[float]:
        return self.current_time

    def get_duration(self) -> Optional[float]:
        return self.duration

    def seek_to(self, seconds: float) -> None:
        self.seeks.append(seconds)

    def play(self) -> None:
        self.play_calls += 1


class FakeAnnotationAPI:
    """
    In-memory stand-in for the annotation API client.

    Set ``fail_with`` to make the next call raise.
    """

    def __init__(self, project_id: str, annotations: Optional[List[Dict]] = None):
        self.project = Project(id=project_id, youtube_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ")
        self.records: Dict[str, Annotation] = {}
        for record in annotations or []:
            annotation = Annotation.model_validate(record)
            self.records[annotation.id] = annotation
        self.fail_with: Optional[Exception] = None
        self.calls: List[str] = []

    def _maybe_fail(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            error, self.fail_with = self.fail_with, None
            raise error

    async def get_project(self, project_id: str) -> ProjectDetail:
        self._maybe_fail("get_project")
        if project_id != self.project.id:
            raise NotFound("Project not found")
        annotations = sorted(self.records.values(), key=lambda a: a.timecode)
        return ProjectDetail(project=self.project, annotations=[a.model_copy() for a in annotations])

    async def create_annotation(self, project_id: str, author: str, text: str, timecode: float) -> Annotation:
        self._maybe_fail("create_annotation")
        annotation = Annotation(id=str(uuid.uuid4()), author=author, text=text, timecode=timecode, project_id=project_id)
        self.records[annotation.id] = annotation
        return annotation.model_copy()

    async def delete_annotation(self, annotation_id: str) -> None:
        self._maybe_fail("delete_annotation")
        if self.records.pop(annotation_id, None) is None:
            raise NotFound("Annotation not found")

    async def set_status(self, annotation_id: str, status: AnnotationStatus) -> AnnotationStatus:
        self._maybe_fail("set_status")
        if annotation_id not in self.records:
            raise NotFound("Annotation not found")
        self.records[annotation_id].status = status
        return status


@pytest.fixture
def fake_player() -> FakePlayer:
    return FakePlayer(current_time=42.0, duration=0.0)


@pytest.fixture
def project_id() -> str:
    return str(uuid.uuid4())


@pytest.fixture
def fake_api(project_id) -> FakeAnnotationAPI:
    return FakeAnnotationAPI(project_id, [
        {"id": "a1", "author": "Alice", "text": "Intro too long", "timecode": 10.0, "status": 0},
        {"id": "a2", "author": "Bob", "text": "Agree", "timecode": 11.0, "resolved": 1},
        {"id": "a3", "author": "Carol", "text": "Cut here", "timecode": 50.0, "resolved": 0},
    ])


@pytest.fixture
def network_failure() -> NetworkFailure:
    return NetworkFailure("Could not reach the annotation service")
