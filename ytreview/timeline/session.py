"""
Review session controller.

Owns everything one open project needs: the annotation store, the player
handle, the last known video duration, the last rendered timeline and the
expansion overlay. All changes go through the annotation API first; the
store is touched only after the API confirms, and every confirmed change
re-renders the whole timeline.
"""

import os
import asyncio
import logging
from typing import Any, Callable, Optional, Protocol

from ytreview.client import AnnotationAPIClient
from ytreview.errors import InvalidInput, NetworkFailure, PlayerNotReady, ReviewError
from ytreview.models.annotation import Annotation, AnnotationStatus
from ytreview.models.project import Project
from ytreview.utils.activity_log import log_annotation_event, log_status_change, log_timeline_event
from ytreview.utils.youtube import extract_video_id
from .expansion import ExpansionOverlay, ExpansionView
from .render import AnnotationListView, TimelineView, render_list, render_timeline
from .status import validate_transition
from .store import AnnotationStore

logger = logging.getLogger(__name__)

# How often the player is asked for the video duration, in seconds
DURATION_POLL_INTERVAL = float(os.getenv("DURATION_POLL_INTERVAL", "1.0"))


class Player(Protocol):
    """The embedded video player."""

    def get_current_time(self) -> Optional[float]: ...

    def get_duration(self) -> Optional[float]: ...

    def seek_to(self, seconds: float) -> None: ...

    def play(self) -> None: ...


class ReviewSession:
    """
    Controller for one project page.

    Args:
        project_id: Project being reviewed
        api: Annotation API client
        player: Video player, may be attached later
        alert: Shows a message to the reviewer
        on_render: Receives every freshly rendered timeline
        last_author: Name used when a comment is added without one
    """

    def __init__(
        self,
        project_id: str,
        api: AnnotationAPIClient,
        player: Optional[Player] = None,
        alert: Optional[Callable[[str], None]] = None,
        on_render: Optional[Callable[[TimelineView], None]] = None,
        last_author: Optional[str] = None
    ):
        self.project_id = project_id
        self.api = api
        self.player = player
        self.alert = alert
        self.on_render = on_render
        self.last_author = last_author

        self.project: Optional[Project] = None
        self.store = AnnotationStore()
        self.duration: Optional[float] = None
        self.expansion = ExpansionView(seek=self.seek)
        self.view: TimelineView = render_timeline([], None)
        self.listing: AnnotationListView = render_list([])
        self.expansion.attach(self.view)

    @property
    def video_id(self) -> Optional[str]:
        if self.project is None:
            return None
        return extract_video_id(self.project.youtube_url)

    def _surface(self, error: ReviewError) -> None:
        logger.error(f"Project {self.project_id}: {error.message}")
        if self.alert is not None:
            self.alert(error.message)

    # -----------------------------
    # Rendering
    # -----------------------------

    def render(self) -> TimelineView:
        """Re-derive clusters, markers and the comment list from the store."""
        self.view = render_timeline(self.store.annotations, self.duration)
        self.listing = render_list(self.store.annotations)
        self.expansion.attach(self.view)
        if self.on_render is not None:
            self.on_render(self.view)
        return self.view

    def expand(self, cluster_index: int) -> Optional[ExpansionOverlay]:
        return self.expansion.expand(cluster_index)

    def collapse(self) -> bool:
        return self.expansion.collapse()

    # -----------------------------
    # Player
    # -----------------------------

    def attach_player(self, player: Player) -> None:
        self.player = player
        self.poll_duration()

    def seek(self, seconds: float) -> None:
        if self.player is None:
            return
        try:
            self.player.seek_to(seconds)
            self.player.play()
        except Exception as e:
            logger.error(f"Error seeking to {seconds}: {e}")

    def update_duration(self, duration: Optional[float]) -> bool:
        """
        Take a duration reported by the player.

        Unavailable and non-positive values are ignored. A changed value
        re-renders the timeline. Returns True if it did.
        """
        if duration is None or duration <= 0 or duration == self.duration:
            return False
        self.duration = float(duration)
        log_timeline_event("duration", self.project_id, f"duration={self.duration}")
        self.render()
        return True

    def poll_duration(self) -> bool:
        if self.player is None:
            return False
        try:
            duration = self.player.get_duration()
        except Exception as e:
            logger.error(f"Error getting duration: {e}")
            return False
        return self.update_duration(duration)

    async def watch_duration(self, stop: asyncio.Event, interval: Optional[float] = None) -> None:
        """Poll the player for duration changes until ``stop`` is set."""
        interval = DURATION_POLL_INTERVAL if interval is None else interval
        while not stop.is_set():
            self.poll_duration()
            try:
                await asyncio.wait_for(stop.wait(), timeout=interval)
            except asyncio.TimeoutError:
                pass

    # -----------------------------
    # Annotation API actions
    # -----------------------------

    async def load(self) -> bool:
        """Fetch the project and replace the store wholesale."""
        try:
            detail = await self.api.get_project(self.project_id)
            try:
                self.store.load(detail.annotations)
            except ValueError as e:
                raise NetworkFailure(f"Malformed response from the annotation service: {e}")
        except ReviewError as e:
            self._surface(e)
            return False

        self.project = detail.project
        log_timeline_event("load", self.project_id, f"annotations={len(self.store)}")
        self.render()
        return True

    def _current_timecode(self) -> float:
        if self.player is None:
            raise PlayerNotReady()
        try:
            timecode = self.player.get_current_time()
        except Exception as e:
            logger.error(f"Error getting current time: {e}")
            raise PlayerNotReady("Error getting current time")
        if timecode is None:
            raise PlayerNotReady()
        return max(0.0, float(timecode))

    async def add_annotation(self, author: Optional[str], text: str) -> Optional[Annotation]:
        """
        Stamp a comment with the current playback time and send it to the API.

        A blank author falls back to the last name used in this session.
        """
        author = (author or "").strip() or (self.last_author or "").strip()
        text = (text or "").strip()

        try:
            if not author or not text:
                raise InvalidInput("Please fill in all fields")
            timecode = self._current_timecode()
            annotation = await self.api.create_annotation(self.project_id, author, text, timecode)
            try:
                self.store.add(annotation)
            except ValueError as e:
                raise NetworkFailure(f"Malformed response from the annotation service: {e}")
        except ReviewError as e:
            log_annotation_event("create", self.project_id, None, False, e.message)
            self._surface(e)
            return None

        self.last_author = author
        log_annotation_event("create", self.project_id, annotation.id, True, f"timecode={annotation.timecode}")
        self.render()
        return annotation

    async def delete_annotation(self, annotation_id: str) -> bool:
        try:
            await self.api.delete_annotation(annotation_id)
        except ReviewError as e:
            log_annotation_event("delete", self.project_id, annotation_id, False, e.message)
            self._surface(e)
            return False

        self.store.remove(annotation_id)
        log_annotation_event("delete", self.project_id, annotation_id, True)
        self.render()
        return True

    async def set_status(self, annotation_id: str, status: Any) -> bool:
        """
        Request a review status change.

        Ids missing from the store are ignored. A stale id the server no
        longer knows about surfaces NotFound and stays in the store until
        the next full load. If the annotation is removed locally while the
        request is in flight, the confirmed status is dropped.
        """
        annotation = self.store.get(annotation_id)
        if annotation is None:
            logger.warning(f"Ignoring status change for unknown annotation {annotation_id}")
            return False

        old_status = annotation.status
        try:
            target = validate_transition(old_status, status)
            stored = await self.api.set_status(annotation_id, target)
        except ReviewError as e:
            log_annotation_event("status", self.project_id, annotation_id, False, e.message)
            self._surface(e)
            return False

        if not self.store.set_status(annotation_id, stored):
            logger.warning(f"Annotation {annotation_id} was removed before its status change was confirmed")
            log_annotation_event("status", self.project_id, annotation_id, False, "removed while pending")
            return False

        log_status_change(self.project_id, annotation_id, old_status.name, AnnotationStatus(stored).name)
        self.render()
        return True
