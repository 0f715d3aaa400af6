"""
Async client for the annotation API.

Wraps the project and annotation endpoints and translates transport
errors and HTTP statuses into the review error taxonomy.
"""

import os
import logging
from typing import Any, List, Optional, Type
import httpx
from pydantic import ValidationError

from ytreview.errors import InvalidInput, InvalidStatus, NetworkFailure, NotFound, ReviewError
from ytreview.models.annotation import Annotation, AnnotationStatus
from ytreview.models.project import ProjectCreated, ProjectDetail
from ytreview.utils.youtube import is_valid_youtube_url

logger = logging.getLogger(__name__)

# Annotation API configuration
ANNOTATION_API_URL = os.getenv("ANNOTATION_API_URL", "http://localhost:3000")


def _error_detail(response: httpx.Response) -> Optional[str]:
    """Pull the error text out of ``{"error": ...}`` or ``{"detail": ...}`` bodies."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        detail = body.get("error") or body.get("detail")
        if isinstance(detail, str):
            return detail
    return None


def _parse(model, data):
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise NetworkFailure(f"Malformed response from the annotation service ({e.error_count()} errors)")


class AnnotationAPIClient:
    """
    Client for one annotation API deployment.

    Args:
        base_url: API root, defaults to ``ANNOTATION_API_URL``
        transport: Optional httpx transport (used by tests)
    """

    def __init__(self, base_url: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = (base_url or ANNOTATION_API_URL).rstrip("/")
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        bad_request: Type[ReviewError] = InvalidInput,
        **kwargs: Any
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            NotFound: on 404
            InvalidInput: (or ``bad_request``) on 400
            NetworkFailure: on any other failure
        """
        try:
            async with httpx.AsyncClient(base_url=self.base_url, transport=self._transport) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise NetworkFailure(f"Could not reach the annotation service: {e}")

        if response.status_code == 404:
            raise NotFound(_error_detail(response) or "Not found")
        if response.status_code == 400:
            raise bad_request(_error_detail(response))
        if response.is_error:
            logger.error(f"{method} {path} returned {response.status_code}")
            raise NetworkFailure(_error_detail(response) or f"Request failed with status {response.status_code}")

        try:
            return response.json()
        except ValueError:
            raise NetworkFailure("Malformed response from the annotation service")

    async def create_project(self, youtube_url: str) -> ProjectCreated:
        """
        Create a project for a YouTube video.

        Raises:
            InvalidInput: if the link is empty or not a YouTube link
        """
        youtube_url = (youtube_url or "").strip()
        if not youtube_url:
            raise InvalidInput("Please enter a YouTube link")
        if not is_valid_youtube_url(youtube_url):
            raise InvalidInput("Please enter a valid YouTube link")

        data = await self._request("POST", "/api/projects", json={"youtube_url": youtube_url})
        created = _parse(ProjectCreated, data)
        logger.info(f"Created project {created.project_id}")
        return created

    async def get_project(self, project_id: str) -> ProjectDetail:
        data = await self._request("GET", f"/api/projects/{project_id}")
        return _parse(ProjectDetail, data)

    async def list_annotations(self, project_id: str) -> List[Annotation]:
        detail = await self.get_project(project_id)
        return sorted(detail.annotations, key=lambda a: a.timecode)

    async def create_annotation(self, project_id: str, author: str, text: str, timecode: float) -> Annotation:
        data = await self._request(
            "POST",
            f"/api/projects/{project_id}/annotations",
            json={"author": author, "text": text, "timecode": timecode}
        )
        return _parse(Annotation, data)

    async def delete_annotation(self, annotation_id: str) -> None:
        await self._request("DELETE", f"/api/annotations/{annotation_id}")

    async def set_status(self, annotation_id: str, status: AnnotationStatus) -> AnnotationStatus:
        """Returns the status the server stored."""
        data = await self._request(
            "PATCH",
            f"/api/annotations/{annotation_id}/status",
            bad_request=InvalidStatus,
            json={"status": int(status)}
        )
        stored = data.get("status") if isinstance(data, dict) else None
        if stored is None:
            return AnnotationStatus(status)
        try:
            return AnnotationStatus.parse(stored)
        except ValueError:
            raise NetworkFailure(f"Server returned an unknown status: {stored!r}")
